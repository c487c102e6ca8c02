"""
@file: generator.py
FAQ generation pipeline for the FAQ system.

This module wires the analysis stages together:
    raw text -> segment -> (fail fast on insufficient content) -> score -> select -> synthesize + assemble

Major Components:
- FAQGenerator: Configured pipeline; run() returns a GenerationResult with warnings
- generate: Module-level entry point returning the ordered FAQ records
- run_with_timeout: Caller-side overall time bound for a generation call

Usage Example:
    from faq_system.generator import generate
    faqs = generate(open('policy.txt').read())
    for faq in faqs:
        print(faq.ordinal, faq.question)
"""

import logging
import queue
import threading
from typing import List, Tuple

from faq_system.analysis.assembler import assemble_faq
from faq_system.analysis.models import FAQRecord, GenerationResult
from faq_system.analysis.questions import synthesize_question
from faq_system.analysis.scoring import score_sentences
from faq_system.analysis.segmenter import count_qualifying_sentences, segment
from faq_system.analysis.selection import select_sentences
from faq_system.analysis.settings import GenerationSettings, ScoringWeights
from faq_system.exceptions import GenerationTimeoutError, InsufficientContentError

logger = logging.getLogger(__name__)


class FAQGenerator:
    """
    Generates traceable FAQs from a single document.

    Every answer is the verbatim text of a segmented sentence and every FAQ carries the
    located source passage as its reference. Each call is independent: no state is kept
    between documents.
    """
    def __init__(self, config=None):
        """
        Initialize the generator.

        Args:
            config: Config object (or None for the built-in defaults).
        Raises:
            ConfigurationError: If configured generation or scoring values are invalid.
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.info(f"Called FAQGenerator.__init__(config={config})")
        self.config = config
        self.settings = GenerationSettings.from_config(config)
        self.weights = ScoringWeights.from_config(config)

    def check_readiness(self, document: str) -> Tuple[int, bool]:
        """
        Report whether a document has enough qualifying sentences to generate FAQs.

        Args:
            document (str): Raw document text.
        Returns:
            tuple: (qualifying sentence count, ready flag)
        """
        count = count_qualifying_sentences(document, self.settings)
        return count, count >= self.settings.min_sentences

    def _has_question(self, candidate) -> bool:
        return synthesize_question(candidate.text, self.settings) is not None

    def run(self, document: str) -> GenerationResult:
        """
        Generate FAQs and report run details.

        Args:
            document (str): Raw document text, already loaded and decoded.
        Returns:
            GenerationResult: Ordered FAQs, shortfall warnings and run statistics.
        Raises:
            InsufficientContentError: If fewer than GENERATION.MIN_SENTENCES sentences qualify.
                Raised before any scoring work.
        """
        self.logger.info(f"Called FAQGenerator.run(document_length={len(document)})")
        sentences = segment(document, self.settings)
        if len(sentences) < self.settings.min_sentences:
            self.logger.error(f"Insufficient content: {len(sentences)} of {self.settings.min_sentences} qualifying sentences")
            raise InsufficientContentError(len(sentences), self.settings.min_sentences)

        scored = score_sentences(sentences, document, self.weights)
        selection = select_sentences(
            scored,
            count=self.settings.faq_count,
            threshold=self.settings.similarity_threshold,
            eligible=self._has_question,
        )

        faqs: List[FAQRecord] = []
        for candidate in selection.sentences:
            faq = assemble_faq(candidate, len(faqs) + 1, self.settings)
            if faq is not None:
                faqs.append(faq)

        result = GenerationResult(
            faqs=faqs,
            sentence_count=len(sentences),
            strict_count=len(selection.strict),
            source_length=len(document),
        )
        if len(faqs) < self.settings.faq_count:
            message = (
                f"Generated {len(faqs)} FAQs. Document may need more diverse content "
                f"for {self.settings.faq_count} FAQs."
            )
            self.logger.warning(message)
            result.warnings.append(message)
        self.logger.info(f"Generated {len(faqs)} FAQs ({result.strict_count} from the diversity pass)")
        return result

    def generate(self, document: str) -> List[FAQRecord]:
        """
        Generate FAQs from a document.

        Args:
            document (str): Raw document text.
        Returns:
            list[FAQRecord]: min(FAQ_COUNT, available) records with ordinals 1..N.
        Raises:
            InsufficientContentError: If the document has too few qualifying sentences.
        """
        return self.run(document).faqs


def generate(document: str, config=None) -> List[FAQRecord]:
    """
    Generate FAQs from a document with the given (or default) configuration.

    Args:
        document (str): Raw document text.
        config: Optional Config object.
    Returns:
        list[FAQRecord]: Ordered FAQ records.
    Raises:
        InsufficientContentError: If the document has too few qualifying sentences.
    """
    return FAQGenerator(config).generate(document)


def run_with_timeout(func, timeout: float, *args, **kwargs):
    """
    Run ``func`` and give up waiting after ``timeout`` seconds.

    The work runs in a daemon thread. On timeout the caller gets an error
    immediately; the abandoned worker does not keep the interpreter alive, so a
    CLI run exits within the bound even if generation never finishes.

    Args:
        func: Callable to run.
        timeout (float): Time bound in seconds.
        *args, **kwargs: Arguments for ``func``.
    Returns:
        Whatever ``func`` returns.
    Raises:
        GenerationTimeoutError: If ``func`` does not finish within ``timeout``.
        Any exception raised by ``func`` is re-raised in the caller.
    """
    logger.info(f"Called run_with_timeout(func={getattr(func, '__name__', func)}, timeout={timeout})")
    outcome = queue.Queue(maxsize=1)

    def worker():
        try:
            outcome.put((True, func(*args, **kwargs)))
        except BaseException as e:
            outcome.put((False, e))

    thread = threading.Thread(target=worker, name="faq-generation", daemon=True)
    thread.start()
    try:
        succeeded, value = outcome.get(timeout=timeout)
    except queue.Empty:
        logger.error(f"Generation timed out after {timeout} seconds")
        raise GenerationTimeoutError(timeout) from None
    if not succeeded:
        raise value
    return value
