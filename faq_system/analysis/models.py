"""
@file: models.py
Data models for sentence analysis and FAQ output in the FAQ system.

This module defines the core data structures passed between the stages of the
generation pipeline. All records are immutable: each stage produces new records
instead of annotating earlier ones, so the order in which stages run can never
leak into the results.

Classes:
    Sentence: A qualifying sentence of the source document and its provenance.
    ScoredSentence: A Sentence paired with the importance the scorer assigned to it.
    CorpusStatistics: Per-document term statistics used for scoring.
    FAQRecord: One question/answer pair with its source reference.
    GenerationResult: The FAQs of one generation run plus run-level details.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Sentence:
    """
    A contiguous span of the source document.

    Attributes:
        text (str): The sentence text after boundary resolution. This is the FAQ answer.
        original_span (str): The verbatim substring located in the untouched document,
            or ``text`` itself when the span could not be relocated.
        index (int): 0-based position among qualifying sentences (document order).
        tokens (tuple): Normalized tokens (lowercased, punctuation and stop-words removed).
        start_offset (int): Offset of ``original_span`` in the document, or None if not located.
    """
    text: str
    original_span: str
    index: int
    tokens: Tuple[str, ...] = ()
    start_offset: Optional[int] = None

    @property
    def span_located(self) -> bool:
        return self.start_offset is not None

    @property
    def reference(self) -> str:
        return self.original_span or self.text


@dataclass(frozen=True)
class ScoredSentence:
    """A Sentence paired with its importance score for one generation run."""
    sentence: Sentence
    importance: float

    @property
    def text(self) -> str:
        return self.sentence.text

    @property
    def index(self) -> int:
        return self.sentence.index

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self.sentence.tokens


@dataclass(frozen=True)
class CorpusStatistics:
    """
    Term statistics derived from a single document.

    Attributes:
        term_frequency (dict): token -> count / total document tokens.
        inverse_sentence_frequency (dict): token -> log(n / (1 + containing)) + 1.
        weights (dict): token -> term_frequency * inverse_sentence_frequency.
        total_tokens (int): Number of tokens in the whole document.
        sentence_count (int): Number of qualifying sentences.
    """
    term_frequency: Dict[str, float]
    inverse_sentence_frequency: Dict[str, float]
    weights: Dict[str, float]
    total_tokens: int
    sentence_count: int

    def weight(self, token: str) -> float:
        return self.weights.get(token, 0.0)


@dataclass(frozen=True)
class FAQRecord:
    """
    One generated FAQ.

    Attributes:
        ordinal (int): 1-based presentation order.
        question (str): Synthesized question.
        answer (str): The source sentence text, unmodified.
        reference (str): The located original passage for traceability.
        source_index (int): Index of the originating Sentence.
    """
    ordinal: int
    question: str
    answer: str
    reference: str
    source_index: int

    def to_dict(self) -> dict:
        """Serialize the record, including the back-reference to its sentence."""
        return {
            'ordinal': self.ordinal,
            'question': self.question,
            'answer': self.answer,
            'reference': self.reference,
            'sourceIndex': self.source_index,
        }

    def to_export_dict(self) -> dict:
        """Serialize the record for export. ``sourceIndex`` is not exported."""
        return {
            'ordinal': self.ordinal,
            'question': self.question,
            'answer': self.answer,
            'reference': self.reference,
        }


@dataclass
class GenerationResult:
    """
    The outcome of one generation run.

    Attributes:
        faqs (list): Ordered FAQRecord objects.
        warnings (list): Non-fatal messages, e.g. when fewer FAQs than requested were produced.
        sentence_count (int): Number of qualifying sentences in the document.
        strict_count (int): How many FAQs came from the diversity-enforcing selection pass.
        source_length (int): Length of the source document in characters.
    """
    faqs: List[FAQRecord] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    sentence_count: int = 0
    strict_count: int = 0
    source_length: int = 0

    @property
    def is_partial(self) -> bool:
        return bool(self.warnings)
