"""
@file: __init__.py
Text analysis public API for the FAQ system.

This module exposes the stages of the generation pipeline:
    - Sentence, ScoredSentence, CorpusStatistics, FAQRecord, GenerationResult: Data models
    - segment, tokenize: Sentence segmentation and tokenization
    - score_sentences: Statistical importance scoring
    - select_sentences: Diversity-aware selection
    - synthesize_question: Question synthesis
    - assemble_faq: FAQ assembly
"""
from .models import Sentence, ScoredSentence, CorpusStatistics, FAQRecord, GenerationResult
from .settings import GenerationSettings, ScoringWeights
from .segmenter import segment, tokenize, count_qualifying_sentences
from .scoring import score_sentences, compute_statistics
from .selection import select_sentences, jaccard_similarity, Selection
from .questions import synthesize_question, extract_subject, QuestionRule, QUESTION_RULES
from .assembler import assemble_faq
