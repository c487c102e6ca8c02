"""
@file: settings.py
Typed generation and scoring settings built from the FAQ system configuration.

The pipeline constants (target FAQ count, minimum sentence length, similarity
threshold and every additive scoring weight) default to the documented values.
Any of them can be overridden through the GENERATION and SCORING sections of
config.yaml, which is how the weights are calibrated during testing.
"""

import logging
from dataclasses import dataclass, fields

from faq_system.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _coerce(kind, value):
    """Convert a configured value to ``kind`` without silently truncating or accepting booleans."""
    if isinstance(value, bool):
        raise TypeError(f"expected {kind.__name__}, got a boolean")
    if kind is int:
        if isinstance(value, float) and not value.is_integer():
            raise ValueError("expected a whole number")
        if isinstance(value, str):
            return int(value.strip())
    return kind(value)


def _read_section(cls, config, section):
    """Build ``cls`` from ``config`` values under ``section``, keyed by upper-cased field name."""
    if config is None:
        return cls()
    values = {}
    for f in fields(cls):
        key = f"{section}.{f.name.upper()}"
        value = config.get_nested(key, None) if hasattr(config, 'get_nested') else getattr(config, key, None)
        if value is None:
            continue
        try:
            values[f.name] = _coerce(type(f.default), value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid value for {key}: {value!r} ({e})")
    return cls(**values)


@dataclass(frozen=True)
class GenerationSettings:
    """Pipeline constants for segmentation, selection and question synthesis."""
    faq_count: int = 5
    min_sentences: int = 5
    min_sentence_length: int = 20
    similarity_threshold: float = 0.5
    span_probe_words: int = 5
    max_subject_words: int = 5
    max_pattern_chars: int = 500
    timeout_seconds: float = 30.0

    def __post_init__(self):
        if self.faq_count < 1:
            raise ConfigurationError("GENERATION.FAQ_COUNT must be at least 1")
        if self.min_sentences < 1:
            raise ConfigurationError("GENERATION.MIN_SENTENCES must be at least 1")
        if self.min_sentence_length < 1:
            raise ConfigurationError("GENERATION.MIN_SENTENCE_LENGTH must be at least 1")
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ConfigurationError("GENERATION.SIMILARITY_THRESHOLD must be between 0 and 1")
        if self.span_probe_words < 1 or self.max_subject_words < 1:
            raise ConfigurationError("GENERATION.SPAN_PROBE_WORDS and MAX_SUBJECT_WORDS must be at least 1")
        if self.max_pattern_chars < 1:
            raise ConfigurationError("GENERATION.MAX_PATTERN_CHARS must be at least 1")
        if self.timeout_seconds <= 0:
            raise ConfigurationError("GENERATION.TIMEOUT_SECONDS must be positive")

    @classmethod
    def from_config(cls, config=None) -> "GenerationSettings":
        """
        Build settings from a Config object.

        Args:
            config: Config (or any object with get_nested), or None for defaults.
        Returns:
            GenerationSettings
        Raises:
            ConfigurationError: If a configured value has the wrong type or range.
        """
        settings = _read_section(cls, config, 'GENERATION')
        logger.debug(f"GenerationSettings.from_config -> {settings}")
        return settings


@dataclass(frozen=True)
class ScoringWeights:
    """Additive sentence-importance weights and the bands they apply to."""
    tfidf_multiplier: float = 3.0
    lead_bonus: float = 0.5
    lead_sentences: int = 2
    tail_bonus: float = 0.3
    tail_sentences: int = 2
    length_bonus: float = 0.4
    min_tokens: int = 8
    max_tokens: int = 25
    indicator_bonus: float = 0.5
    numeric_bonus: float = 0.4
    proper_noun_bonus: float = 0.3
    definition_bonus: float = 0.5

    def __post_init__(self):
        if self.min_tokens > self.max_tokens:
            raise ConfigurationError("SCORING.MIN_TOKENS must not exceed SCORING.MAX_TOKENS")
        if self.lead_sentences < 0 or self.tail_sentences < 0:
            raise ConfigurationError("SCORING.LEAD_SENTENCES and TAIL_SENTENCES must not be negative")

    @classmethod
    def from_config(cls, config=None) -> "ScoringWeights":
        """
        Build scoring weights from a Config object.

        Args:
            config: Config (or any object with get_nested), or None for defaults.
        Returns:
            ScoringWeights
        Raises:
            ConfigurationError: If a configured value has the wrong type or range.
        """
        weights = _read_section(cls, config, 'SCORING')
        logger.debug(f"ScoringWeights.from_config -> {weights}")
        return weights
