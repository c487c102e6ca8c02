import pytest

from faq_system.analysis.models import ScoredSentence, Sentence
from faq_system.analysis.selection import (
    jaccard_similarity,
    rank_sentences,
    select_relaxed,
    select_sentences,
    select_strict,
)

def scored(index, importance, tokens):
    text = ' '.join(tokens)
    sentence = Sentence(text=text, original_span=text, index=index, tokens=tuple(tokens))
    return ScoredSentence(sentence=sentence, importance=importance)

@pytest.fixture
def candidates():
    return [
        scored(0, 1.0, ['backup', 'nightly', 'server']),
        scored(1, 3.0, ['backup', 'nightly', 'server', 'logs']),
        scored(2, 2.0, ['invoice', 'retention', 'years']),
        scored(3, 2.5, ['backup', 'nightly', 'server', 'disk']),
        scored(4, 2.0, ['training', 'security', 'course']),
    ]

def test_jaccard_similarity():
    assert jaccard_similarity(['a', 'b'], ['b', 'c']) == pytest.approx(1 / 3)
    assert jaccard_similarity(['a', 'a'], ['a']) == 1.0
    assert jaccard_similarity([], []) == 0.0
    assert jaccard_similarity(['a'], []) == 0.0

def test_rank_is_descending_and_stable(candidates):
    ranked = rank_sentences(candidates)
    assert [s.index for s in ranked] == [1, 3, 2, 4, 0]

def test_strict_pass_rejects_similar_sentences(candidates):
    selected = select_strict(rank_sentences(candidates), count=5, threshold=0.5)
    # 3 and 0 overlap sentence 1 by 3/5 and 3/4
    assert [s.index for s in selected] == [1, 2, 4]

def test_strict_pass_threshold_is_inclusive():
    a = scored(0, 2.0, ['one', 'two', 'three'])
    b = scored(1, 1.0, ['one', 'two', 'four'])
    # similarity 2/4 is allowed at threshold 0.5
    assert len(select_strict([a, b], count=2, threshold=0.5)) == 2
    assert len(select_strict([a, b], count=2, threshold=0.4)) == 1

def test_relaxed_pass_fills_remaining_slots_in_rank_order(candidates):
    ranked = rank_sentences(candidates)
    strict = select_strict(ranked, count=5)
    fill = select_relaxed(ranked, strict, count=5)
    assert [s.index for s in fill] == [3, 0]

def test_select_sentences_composes_both_passes(candidates):
    selection = select_sentences(candidates, count=4)
    assert [s.index for s in selection.strict] == [1, 2, 4]
    assert [s.index for s in selection.relaxed] == [3]
    assert [s.index for s in selection.sentences] == [1, 2, 4, 3]

def test_select_sentences_never_repeats_and_caps_at_available(candidates):
    selection = select_sentences(candidates, count=10)
    indices = [s.index for s in selection.sentences]
    assert len(indices) == 5
    assert len(set(indices)) == 5

def test_no_relaxed_pass_when_strict_is_enough(candidates):
    selection = select_sentences(candidates, count=2)
    assert [s.index for s in selection.strict] == [1, 2]
    assert selection.relaxed == []

def test_ineligible_sentences_are_skipped_and_backfilled(candidates):
    selection = select_sentences(candidates, count=3, eligible=lambda s: s.index != 2)
    assert [s.index for s in selection.sentences] == [1, 4, 3]

def test_empty_input():
    selection = select_sentences([], count=5)
    assert selection.sentences == []
