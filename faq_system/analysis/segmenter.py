"""
@file: segmenter.py
Sentence segmentation and tokenization for the FAQ system.

This module splits a raw document into qualifying sentences, relocates each
sentence in the untouched document so answers stay traceable to their source
passage, and normalizes sentences into word tokens for scoring.

Major Components:
- tokenize: Lowercased, punctuation-free, stop-word-filtered tokens
- split_sentences: Abbreviation-safe boundary splitting with the minimum length filter
- locate_original_span: Best-effort relocation of a sentence in the raw document
- segment: Main entry point producing Sentence records
- count_qualifying_sentences: Readiness check used before generation

Limitations:
- Boundaries are recognized only at '.', '!' or '?' followed by whitespace and an uppercase letter
- Span relocation is heuristic; when it fails the sentence text itself is used as the reference
"""

import logging
import re
from typing import List, Optional, Tuple

from .lexicon import ABBREVIATIONS, STOP_WORDS
from .models import Sentence
from .settings import GenerationSettings

logger = logging.getLogger(__name__)

# Candidates for the character standing in for abbreviation periods while boundaries
# are detected; the first one absent from the document is used
PLACEHOLDER_CANDIDATES = tuple(chr(c) for c in range(0xE000, 0xF900))

ABBREVIATION_REGEX = re.compile(
    r'(?<!\w)(?:' + '|'.join(re.escape(a) for a in sorted(ABBREVIATIONS, key=len, reverse=True)) + r')'
)
SENTENCE_BOUNDARY_REGEX = re.compile(r'(?<=[.!?])\s+(?=[A-Z])')
TERMINAL_REGEX = re.compile(r'[.!?](?=\s|$)')
NON_WORD_REGEX = re.compile(r'[^\w\s]')


def tokenize(text: str) -> List[str]:
    """
    Tokenize text into normalized words.

    Lowercases, replaces every non-word/non-space character with a space, splits on
    whitespace and drops tokens of length <= 2 and stop-words.

    Args:
        text (str): Text to tokenize.
    Returns:
        list[str]: Tokens in text order (duplicates kept).
    """
    words = NON_WORD_REGEX.sub(' ', text.lower()).split()
    return [w for w in words if len(w) > 2 and w not in STOP_WORDS]


def _period_placeholder(text: str) -> str:
    for candidate in PLACEHOLDER_CANDIDATES:
        if candidate not in text:
            return candidate
    raise ValueError("document uses every private-use character")


def _neutralize_abbreviations(text: str, placeholder: str) -> str:
    return ABBREVIATION_REGEX.sub(lambda m: m.group(0).replace('.', placeholder), text)


def _advance_non_space(document: str, start: int, count: int) -> int:
    """Return the offset reached after passing ``count`` non-whitespace characters from ``start``."""
    position = start
    while position < len(document) and count > 0:
        if not document[position].isspace():
            count -= 1
        position += 1
    return position


def split_sentences(document: str, min_length: int = 20) -> List[str]:
    """
    Split a document into qualifying sentence strings.

    Args:
        document (str): Raw document text.
        min_length (int): Minimum sentence length in characters; shorter candidates are dropped.
    Returns:
        list[str]: Trimmed sentences of at least ``min_length`` characters, in document order.
    """
    placeholder = _period_placeholder(document)
    prepared = _neutralize_abbreviations(document, placeholder)
    sentences = []
    for candidate in SENTENCE_BOUNDARY_REGEX.split(prepared):
        candidate = candidate.replace(placeholder, '.').strip()
        if len(candidate) >= min_length:
            sentences.append(candidate)
        elif candidate:
            logger.debug(f"Discarding short sentence ({len(candidate)} chars): {candidate!r}")
    return sentences


def locate_original_span(document: str, text: str, probe_words: int = 5, search_from: int = 0) -> Tuple[Optional[str], Optional[int]]:
    """
    Find the verbatim passage of the document a sentence came from.

    An exact occurrence of the sentence is preferred. Otherwise the first
    ``probe_words`` words of the sentence are matched case-insensitively
    (whitespace-tolerant) against the document, starting at ``search_from`` and
    falling back to the whole document. The match is then extended to the sentence's
    terminal punctuation.

    Args:
        document (str): The untouched source document.
        text (str): The sentence text.
        probe_words (int): Number of leading words used to anchor the search.
        search_from (int): Offset to start searching from (end of the previous span).
    Returns:
        tuple: (span, start_offset), or (None, None) if the sentence could not be relocated.
    """
    exact = document.find(text, search_from)
    if exact == -1 and search_from:
        exact = document.find(text)
    if exact != -1:
        return text, exact
    words = text.split()[:probe_words]
    if not words:
        return None, None
    probe = re.compile(r'\s+'.join(re.escape(w) for w in words), re.IGNORECASE)
    match = probe.search(document, search_from)
    if match is None and search_from:
        match = probe.search(document)
    if match is None:
        return None, None
    start = match.start()
    scan_from = max(match.end(), _advance_non_space(document, start, len(''.join(text.split())) - 1))
    end_match = TERMINAL_REGEX.search(document, scan_from)
    end = end_match.end() if end_match else min(len(document), start + len(text))
    return document[start:end].strip(), start


def segment(document: str, settings: GenerationSettings = None) -> List[Sentence]:
    """
    Segment a document into qualifying Sentence records.

    Args:
        document (str): Raw document text.
        settings (GenerationSettings, optional): Minimum length and span probe size.
    Returns:
        list[Sentence]: Sentences in document order with stable 0-based indices.
            Empty if the document has no qualifying sentence.
    """
    settings = settings or GenerationSettings()
    logger.info(f"Called segment(document_length={len(document)})")
    sentences = []
    cursor = 0
    for index, text in enumerate(split_sentences(document, settings.min_sentence_length)):
        span, start = locate_original_span(document, text, settings.span_probe_words, cursor)
        if start is None:
            logger.warning(f"Could not relocate sentence {index} in source; using normalized text as reference")
            span = text
        else:
            cursor = start + len(span)
        sentences.append(Sentence(
            text=text,
            original_span=span,
            index=index,
            tokens=tuple(tokenize(text)),
            start_offset=start,
        ))
    logger.info(f"Segmented {len(sentences)} qualifying sentences")
    return sentences


def count_qualifying_sentences(document: str, settings: GenerationSettings = None) -> int:
    """
    Count the sentences of a document that meet the minimum length.

    Args:
        document (str): Raw document text.
        settings (GenerationSettings, optional): Supplies the minimum sentence length.
    Returns:
        int: Number of qualifying sentences.
    """
    settings = settings or GenerationSettings()
    return len(split_sentences(document, settings.min_sentence_length))
