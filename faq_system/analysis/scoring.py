"""
@file: scoring.py
Statistical importance scoring for segmented sentences.

This module provides functions to:
    - Compute per-document term statistics (term frequency, inverse sentence frequency, combined weight).
    - Score each sentence as the sum of additive signals: mean term weight, position, length band,
      importance indicator words, numerals, proper nouns and definitional cues.

Scoring is a pure annotation pass: it returns new ScoredSentence records in the same order
as its input and never reorders. Scores are only comparable within one document's run.
"""

import logging
import math
import re
from collections import Counter
from typing import Dict, Iterable, List, Sequence

from .lexicon import IMPORTANCE_INDICATORS
from .models import CorpusStatistics, ScoredSentence, Sentence
from .segmenter import tokenize
from .settings import ScoringWeights

logger = logging.getLogger(__name__)

INDICATOR_REGEXES = tuple(
    (word, re.compile(r'\b' + re.escape(word) + r'\b')) for word in IMPORTANCE_INDICATORS
)
NUMERIC_REGEX = re.compile(r'\d')
PROPER_NOUN_REGEX = re.compile(r'(?<=\s)[A-Z][a-z]+')
DEFINITION_REGEX = re.compile(r'\b(?:is|are|refers\s+to|means|defined\s+as)\b', re.IGNORECASE)


def compute_statistics(document_tokens: Iterable[str], sentences: Sequence[Sentence]) -> CorpusStatistics:
    """
    Compute term statistics for one document.

    Args:
        document_tokens: Tokens of the whole document.
        sentences: Qualifying sentences of the document.
    Returns:
        CorpusStatistics: term frequency, inverse sentence frequency and combined weights.
    """
    counts = Counter(document_tokens)
    total = sum(counts.values())
    term_frequency = {token: count / total for token, count in counts.items()} if total else {}

    sentence_count = len(sentences)
    containing = Counter()
    for sentence in sentences:
        containing.update(set(sentence.tokens))
    inverse_sentence_frequency = {
        token: math.log(sentence_count / (1 + n)) + 1
        for token, n in containing.items()
    }

    weights = {
        token: tf * inverse_sentence_frequency.get(token, 1.0)
        for token, tf in term_frequency.items()
    }
    logger.debug(f"compute_statistics: {len(counts)} distinct tokens, {total} total, {sentence_count} sentences")
    return CorpusStatistics(
        term_frequency=term_frequency,
        inverse_sentence_frequency=inverse_sentence_frequency,
        weights=weights,
        total_tokens=total,
        sentence_count=sentence_count,
    )


def matched_indicators(text: str) -> List[str]:
    """Return the distinct importance indicator words found in ``text``."""
    lowered = text.lower()
    return [word for word, regex in INDICATOR_REGEXES if regex.search(lowered)]


def score_breakdown(sentence: Sentence, statistics: CorpusStatistics, weights: ScoringWeights = None) -> Dict[str, float]:
    """
    Compute each additive importance signal for a sentence.

    Args:
        sentence (Sentence): The sentence to score.
        statistics (CorpusStatistics): Statistics of the sentence's document.
        weights (ScoringWeights, optional): Signal weights; defaults apply if None.
    Returns:
        dict: signal name -> contribution. The importance is the sum of the values.
    """
    weights = weights or ScoringWeights()
    tokens = sentence.tokens
    text = sentence.text
    n = statistics.sentence_count

    mean_weight = sum(statistics.weight(t) for t in tokens) / max(len(tokens), 1)
    position = 0.0
    if sentence.index < weights.lead_sentences:
        position += weights.lead_bonus
    if sentence.index >= n - weights.tail_sentences:
        position += weights.tail_bonus

    return {
        'term_weight': mean_weight * weights.tfidf_multiplier,
        'position': position,
        'length': weights.length_bonus if weights.min_tokens <= len(tokens) <= weights.max_tokens else 0.0,
        'indicators': weights.indicator_bonus * len(matched_indicators(text)),
        'numeric': weights.numeric_bonus if NUMERIC_REGEX.search(text) else 0.0,
        'proper_noun': weights.proper_noun_bonus if PROPER_NOUN_REGEX.search(text) else 0.0,
        'definition': weights.definition_bonus if DEFINITION_REGEX.search(text) else 0.0,
    }


def score_sentences(sentences: Sequence[Sentence], document: str, weights: ScoringWeights = None) -> List[ScoredSentence]:
    """
    Score sentence importance using multiple additive signals.

    Args:
        sentences: Qualifying sentences of ``document``, in document order.
        document (str): The full document the sentences were segmented from.
        weights (ScoringWeights, optional): Signal weights; defaults apply if None.
    Returns:
        list[ScoredSentence]: One record per input sentence, in input order.
    """
    logger.info(f"Called score_sentences(sentences={len(sentences)}, document_length={len(document)})")
    weights = weights or ScoringWeights()
    statistics = compute_statistics(tokenize(document), sentences)
    scored = []
    for sentence in sentences:
        signals = score_breakdown(sentence, statistics, weights)
        importance = sum(signals.values())
        logger.debug(
            f"Scoring: sentence {sentence.index} | "
            + " | ".join(f"{name}={value:.4f}" for name, value in signals.items())
            + f" | importance={importance:.4f}"
        )
        scored.append(ScoredSentence(sentence=sentence, importance=importance))
    return scored
