"""
@file: questions.py
Template-based question synthesis over declarative sentences.

A question is built in two steps:
    1. The first matching primary subject/predicate pattern (QUESTION_PATTERNS) captures the
       text before the verb phrase as the subject.
    2. The first matching content cue (QUESTION_RULES) picks the question template.

Both tables are ordered and explicit, so a new cue is added by inserting a row rather than
by touching control flow. When no cue applies, or no primary pattern matches at all, the
generic template is used.

Limitations:
- This is a shallow heuristic, not a grammar; questions are not guaranteed to be grammatical.
- Pattern matching runs over a bounded prefix of the sentence (GENERATION.MAX_PATTERN_CHARS)
  so very long or hostile input cannot make matching slow.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .settings import GenerationSettings

logger = logging.getLogger(__name__)

GENERIC_TEMPLATE = "What is important to know about {subject}?"

LEADING_ARTICLE_REGEX = re.compile(r'^(?:the|a|an)\s+', re.IGNORECASE)
CLAUSE_SEPARATOR_REGEX = re.compile(r'[,;:]')
TRAILING_TERMINAL_REGEX = re.compile(r'[.!?]$')


def _subject_predicate(verbs: str) -> re.Pattern:
    return re.compile(r'^(.+?)\s+' + verbs + r'\s+(.+)$', re.IGNORECASE)


QUESTION_PATTERNS = (
    ('be', _subject_predicate(r'(?:is|are|was|were)')),
    ('have', _subject_predicate(r'(?:has|have|had)')),
    ('modal', _subject_predicate(r'(?:can|could|may|might)')),
    ('help', _subject_predicate(r'(?:helps?|assists?|enables?|allows?)')),
    ('cause', _subject_predicate(r'(?:causes?|leads?\s+to|results?\s+in)')),
    ('require', _subject_predicate(r'(?:requires?|needs?)')),
    ('provide', _subject_predicate(r'(?:provides?|offers?|gives?)')),
    ('include', _subject_predicate(r'(?:includes?|contains?|consists?\s+of)')),
)


@dataclass(frozen=True)
class QuestionRule:
    """A content cue and the question template it selects."""
    name: str
    matcher: re.Pattern
    template: str

    def applies(self, text: str) -> bool:
        return self.matcher.search(text) is not None

    def render(self, subject: str) -> str:
        return self.template.format(subject=subject)


QUESTION_RULES = (
    QuestionRule('type', re.compile(r'\b(?:is|are|was|were)\s+(?:a|an|the)?\s*(?:type|kind|form|example)', re.IGNORECASE),
                 "What type is {subject}?"),
    QuestionRule('quantity', re.compile(r'\bpercent|%|\b\d+\s*(?:times|percent|million|billion)', re.IGNORECASE),
                 "What is the quantity or percentage related to {subject}?"),
    QuestionRule('cause', re.compile(r'\b(?:causes?|leads?\s+to|results?\s+in)', re.IGNORECASE),
                 "What are the effects or results of {subject}?"),
    QuestionRule('reason', re.compile(r'\b(?:because|since|due\s+to|reason)', re.IGNORECASE),
                 "Why is {subject} significant?"),
    QuestionRule('enablement', re.compile(r'\b(?:helps?|enables?|allows?|supports?)', re.IGNORECASE),
                 "How does {subject} help or enable outcomes?"),
    QuestionRule('requirement', re.compile(r'\b(?:requires?|needs?|must|should)', re.IGNORECASE),
                 "What are the requirements for {subject}?"),
    QuestionRule('inclusion', re.compile(r'\b(?:includes?|contains?|consists?|comprises?)', re.IGNORECASE),
                 "What does {subject} include or contain?"),
    QuestionRule('occurrence', re.compile(r'\b(?:located|found|exists?|occurs?)', re.IGNORECASE),
                 "Where or when does {subject} occur?"),
    QuestionRule('process', re.compile(r'\b(?:process|method|way|approach|technique)', re.IGNORECASE),
                 "What is the process or method for {subject}?"),
)


def extract_subject(text: str, max_words: int = 5) -> Optional[str]:
    """
    Normalize a phrase into a short question subject.

    Strips a leading article, cuts at the first clause separator and keeps at most
    ``max_words`` words.

    Args:
        text (str): Candidate subject phrase (or a whole sentence).
        max_words (int): Maximum number of words to keep.
    Returns:
        str or None: The subject, or None if nothing usable remains.
    """
    subject = LEADING_ARTICLE_REGEX.sub('', text.strip(), count=1)
    subject = CLAUSE_SEPARATOR_REGEX.split(subject, 1)[0]
    words = subject.split()
    if not words:
        return None
    return ' '.join(words[:max_words])


def match_primary_pattern(text: str):
    """Return ``(name, match)`` for the first primary pattern matching ``text``, or None."""
    for name, pattern in QUESTION_PATTERNS:
        match = pattern.match(text)
        if match:
            return name, match
    return None


def classify_sentence(text: str) -> Optional[QuestionRule]:
    """Return the first QuestionRule whose cue occurs in ``text``, or None."""
    for rule in QUESTION_RULES:
        if rule.applies(text):
            return rule
    return None


def synthesize_question(text: str, settings: GenerationSettings = None) -> Optional[str]:
    """
    Convert a declarative sentence into a question.

    Args:
        text (str): Sentence text.
        settings (GenerationSettings, optional): Subject length and pattern probe bound.
    Returns:
        str or None: The question, or None if no usable subject can be extracted.
    """
    settings = settings or GenerationSettings()
    normalized = TRAILING_TERMINAL_REGEX.sub('', ' '.join(text.split())).strip()
    if not normalized:
        return None

    primary = match_primary_pattern(normalized[:settings.max_pattern_chars])
    if primary is not None:
        name, match = primary
        subject = extract_subject(match.group(1), settings.max_subject_words) \
            or extract_subject(normalized, settings.max_subject_words)
        if subject is None:
            logger.debug(f"No usable subject in {normalized!r}")
            return None
        rule = classify_sentence(normalized)
        logger.debug(f"Primary pattern '{name}' subject={subject!r} rule={rule.name if rule else None}")
        if rule is not None:
            return rule.render(subject)
        return GENERIC_TEMPLATE.format(subject=subject)

    subject = extract_subject(normalized, settings.max_subject_words)
    if subject is None:
        logger.debug(f"No usable subject in {normalized!r}")
        return None
    return GENERIC_TEMPLATE.format(subject=subject.lower())
