"""
@file: selection.py
Ranking and diversity-aware selection of scored sentences.

Selection runs in two passes over the same importance ranking:
    - select_strict: accepts a candidate only if it is not too similar (Jaccard over token sets)
      to any sentence already accepted.
    - select_relaxed: fills the remaining slots in rank order, ignoring similarity.

Both passes are pure functions; select_sentences composes them. An optional ``eligible``
predicate lets the caller skip candidates it cannot use (e.g. no question can be synthesized),
so those never occupy a slot and the next-ranked sentence backfills.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence

from .models import ScoredSentence

logger = logging.getLogger(__name__)

Eligibility = Optional[Callable[[ScoredSentence], bool]]


def jaccard_similarity(tokens_a: Iterable[str], tokens_b: Iterable[str]) -> float:
    """
    Calculate Jaccard similarity between two token collections.

    Args:
        tokens_a: First token collection (duplicates ignored).
        tokens_b: Second token collection (duplicates ignored).
    Returns:
        float: |intersection| / |union|, or 0.0 when both are empty.
    """
    set_a, set_b = set(tokens_a), set(tokens_b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


def rank_sentences(scored: Sequence[ScoredSentence]) -> List[ScoredSentence]:
    """Order by descending importance; ties keep document order."""
    return sorted(scored, key=lambda s: s.importance, reverse=True)


def is_too_similar(candidate: ScoredSentence, selected: Sequence[ScoredSentence], threshold: float) -> bool:
    """Return True if ``candidate`` exceeds ``threshold`` similarity with any selected sentence."""
    for chosen in selected:
        similarity = jaccard_similarity(candidate.tokens, chosen.tokens)
        if similarity > threshold:
            logger.debug(f"Sentence {candidate.index} too similar to {chosen.index} ({similarity:.2f} > {threshold})")
            return True
    return False


def select_strict(ranked: Sequence[ScoredSentence], count: int, threshold: float = 0.5, eligible: Eligibility = None) -> List[ScoredSentence]:
    """
    Pick up to ``count`` mutually dissimilar sentences in rank order.

    Args:
        ranked: Sentences in rank order.
        count: Maximum number of sentences to pick.
        threshold: Maximum allowed Jaccard similarity to an already selected sentence.
        eligible: Optional predicate; ineligible sentences are skipped.
    Returns:
        list[ScoredSentence]: Selected sentences in rank order.
    """
    selected = []
    for candidate in ranked:
        if len(selected) >= count:
            break
        if eligible is not None and not eligible(candidate):
            continue
        if is_too_similar(candidate, selected, threshold):
            continue
        selected.append(candidate)
    return selected


def select_relaxed(ranked: Sequence[ScoredSentence], chosen: Sequence[ScoredSentence], count: int, eligible: Eligibility = None) -> List[ScoredSentence]:
    """
    Fill the slots left after ``chosen`` with unused sentences, highest importance first.

    Args:
        ranked: Sentences in rank order.
        chosen: Sentences already selected.
        count: Total number of sentences wanted (including ``chosen``).
        eligible: Optional predicate; ineligible sentences are skipped.
    Returns:
        list[ScoredSentence]: The additional sentences, in rank order.
    """
    used = {s.index for s in chosen}
    remaining = count - len(chosen)
    fill = []
    for candidate in ranked:
        if len(fill) >= remaining:
            break
        if candidate.index in used:
            continue
        if eligible is not None and not eligible(candidate):
            continue
        fill.append(candidate)
    return fill


@dataclass
class Selection:
    """Sentences picked by the strict pass and by the relaxed pass."""
    strict: List[ScoredSentence] = field(default_factory=list)
    relaxed: List[ScoredSentence] = field(default_factory=list)

    @property
    def sentences(self) -> List[ScoredSentence]:
        return self.strict + self.relaxed


def select_sentences(scored: Sequence[ScoredSentence], count: int = 5, threshold: float = 0.5, eligible: Eligibility = None) -> Selection:
    """
    Select up to ``count`` sentences, preferring diversity.

    Args:
        scored: Scored sentences in document order.
        count: Number of sentences wanted.
        threshold: Jaccard similarity threshold for the strict pass.
        eligible: Optional predicate; ineligible sentences are never selected.
    Returns:
        Selection: ``min(count, available eligible)`` sentences, each used at most once.
    """
    logger.info(f"Called select_sentences(candidates={len(scored)}, count={count}, threshold={threshold})")
    ranked = rank_sentences(scored)
    strict = select_strict(ranked, count, threshold, eligible)
    relaxed = []
    if len(strict) < count:
        relaxed = select_relaxed(ranked, strict, count, eligible)
        if relaxed:
            logger.info(f"Similarity filter left {len(strict)} of {count} sentences; relaxed pass added {len(relaxed)}")
    return Selection(strict=strict, relaxed=relaxed)
