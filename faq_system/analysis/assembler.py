"""
@file: assembler.py
Pairs synthesized questions with verbatim answers and source references.
"""

import logging
from typing import Optional, Union

from .models import FAQRecord, ScoredSentence, Sentence
from .questions import synthesize_question
from .settings import GenerationSettings

logger = logging.getLogger(__name__)


def assemble_faq(sentence: Union[Sentence, ScoredSentence], ordinal: int, settings: GenerationSettings = None) -> Optional[FAQRecord]:
    """
    Create a single FAQ from a sentence.

    The answer is the sentence text exactly as segmented; it is never rewritten,
    summarized or truncated.

    Args:
        sentence: The source Sentence (or ScoredSentence).
        ordinal (int): 1-based position of the FAQ in the result.
        settings (GenerationSettings, optional): Passed to question synthesis.
    Returns:
        FAQRecord or None: None if no question could be synthesized; the caller skips the sentence.
    """
    if isinstance(sentence, ScoredSentence):
        sentence = sentence.sentence
    question = synthesize_question(sentence.text, settings)
    if not question:
        logger.info(f"Skipping sentence {sentence.index}: no question could be synthesized")
        return None
    return FAQRecord(
        ordinal=ordinal,
        question=question,
        answer=sentence.text,
        reference=sentence.reference,
        source_index=sentence.index,
    )
