"""
@file: lexicon.py
Closed word lists used by tokenization, scoring and segmentation.
"""

STOP_WORDS = frozenset([
    'a', 'an', 'the', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
    'of', 'with', 'by', 'from', 'as', 'is', 'was', 'are', 'were', 'been',
    'be', 'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would',
    'could', 'should', 'may', 'might', 'must', 'shall', 'can', 'need',
    'it', 'its', 'this', 'that', 'these', 'those', 'i', 'you', 'he',
    'she', 'we', 'they', 'what', 'which', 'who', 'whom', 'when', 'where',
    'why', 'how', 'all', 'each', 'every', 'both', 'few', 'more', 'most',
    'other', 'some', 'such', 'no', 'nor', 'not', 'only', 'own', 'same',
    'so', 'than', 'too', 'very', 'just', 'also', 'now', 'here', 'there',
])

IMPORTANCE_INDICATORS = (
    'important', 'essential', 'critical', 'key', 'main', 'primary',
    'significant', 'major', 'fundamental', 'crucial', 'vital', 'necessary',
    'must', 'should', 'always', 'never', 'requires', 'ensures',
)

# Abbreviations whose periods never end a sentence
ABBREVIATIONS = (
    'Mr.', 'Mrs.', 'Ms.', 'Dr.', 'Prof.', 'Sr.', 'Jr.', 'St.',
    'vs.', 'etc.', 'e.g.', 'i.e.',
)
