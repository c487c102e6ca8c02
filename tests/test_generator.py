import itertools
import subprocess
import sys
import time
import logging
import threading
import pytest
from pathlib import Path

from faq_system.analysis.segmenter import segment, tokenize
from faq_system.analysis.selection import jaccard_similarity
from faq_system.config import Config
from faq_system.document_loaders import load_document
from faq_system.exceptions import ConfigurationError, GenerationTimeoutError, InsufficientContentError
from faq_system.generator import FAQGenerator, generate, run_with_timeout

PARTIAL_DOCUMENT = (
    ", and then there was nothing more to add. "
    "Invoices are archived for seven years. "
    "Receipts must be scanned within one week. "
    "The finance team reviews expenses monthly. "
    "Travel bookings require manager approval in advance."
)

def test_generate_returns_five_complete_records(policy_document):
    faqs = generate(policy_document)
    assert len(faqs) == 5
    assert [faq.ordinal for faq in faqs] == [1, 2, 3, 4, 5]
    for faq in faqs:
        assert faq.question and faq.answer and faq.reference
        assert faq.question.endswith('?')

def test_answers_and_references_trace_to_document(policy_document):
    texts = {s.text for s in segment(policy_document)}
    for faq in generate(policy_document):
        assert faq.answer in texts
        assert faq.reference in policy_document

def test_strict_pass_results_are_diverse(policy_document):
    result = FAQGenerator().run(policy_document)
    strict = result.faqs[:result.strict_count]
    for a, b in itertools.combinations(strict, 2):
        assert jaccard_similarity(tokenize(a.answer), tokenize(b.answer)) <= 0.5

def test_generation_is_deterministic(policy_document):
    assert generate(policy_document) == generate(policy_document)

def test_scenario_document(scenario_document):
    result = FAQGenerator().run(scenario_document)
    faqs = result.faqs
    assert len(faqs) == 5
    assert result.warnings == []
    assert "What are the requirements for process?" in [faq.question for faq in faqs]
    requirement = next(faq for faq in faqs if 'requires' in faq.answer)
    assert requirement.answer == "The process requires no manual intervention."
    assert "Users can review results easily." not in [faq.answer for faq in faqs]
    for a, b in itertools.combinations(faqs, 2):
        assert jaccard_similarity(tokenize(a.answer), tokenize(b.answer)) <= 0.5

def test_scenario_ranking_order(scenario_document):
    faqs = generate(scenario_document)
    assert faqs[0].answer == "It ensures accuracy at every step."
    assert faqs[0].source_index == 1
    assert faqs[1].question == "What are the requirements for process?"

def test_json_scenario_is_insufficient(json_scenario):
    text = load_document(json_scenario.encode('utf-8'), 'json')
    assert text == "Revenue grew by 12% last year.\nThe company plans further growth."
    with pytest.raises(InsufficientContentError) as excinfo:
        generate(text)
    assert excinfo.value.found == 2
    assert excinfo.value.required == 5
    assert "Not enough valid sentences" in str(excinfo.value)

def test_insufficient_content_fails_before_scoring(mocker):
    score = mocker.patch('faq_system.generator.score_sentences')
    with pytest.raises(InsufficientContentError):
        FAQGenerator().run("One complete sentence is here. Another complete sentence is here.")
    score.assert_not_called()

def test_empty_document_is_insufficient():
    with pytest.raises(InsufficientContentError) as excinfo:
        generate("")
    assert excinfo.value.found == 0

def test_shortfall_returns_partial_result_with_warning(caplog):
    caplog.set_level(logging.WARNING)
    result = FAQGenerator().run(PARTIAL_DOCUMENT)
    assert result.sentence_count == 5
    assert len(result.faqs) == 4
    assert [faq.ordinal for faq in result.faqs] == [1, 2, 3, 4]
    assert result.is_partial
    assert result.warnings == ["Generated 4 FAQs. Document may need more diverse content for 5 FAQs."]
    assert "Generated 4 FAQs" in caplog.text

def test_configured_faq_count(policy_document):
    config = Config({'GENERATION': {'FAQ_COUNT': 3}})
    assert len(generate(policy_document, config)) == 3

def test_configured_minimum_sentences(json_scenario):
    text = load_document(json_scenario.encode('utf-8'), 'json')
    config = Config({'GENERATION': {'MIN_SENTENCES': 2}})
    result = FAQGenerator(config).run(text)
    assert [faq.question for faq in result.faqs] == [
        "What is important to know about revenue grew by 12% last?",
        "What is important to know about company plans further growth?",
    ]
    assert result.warnings == ["Generated 2 FAQs. Document may need more diverse content for 5 FAQs."]

def test_invalid_configuration_is_rejected():
    with pytest.raises(ConfigurationError):
        FAQGenerator(Config({'GENERATION': {'FAQ_COUNT': 'many'}}))
    with pytest.raises(ConfigurationError):
        FAQGenerator(Config({'GENERATION': {'SIMILARITY_THRESHOLD': 2}}))

def test_check_readiness(scenario_document):
    generator = FAQGenerator()
    assert generator.check_readiness(scenario_document) == (6, True)
    assert generator.check_readiness("Only one sentence is present here.") == (1, False)

def test_run_with_timeout_returns_result():
    assert run_with_timeout(lambda a, b: a + b, 1, 2, 3) == 5

def test_run_with_timeout_raises_when_exceeded():
    release = threading.Event()
    try:
        with pytest.raises(GenerationTimeoutError) as excinfo:
            run_with_timeout(release.wait, 0.05, 5)
        assert excinfo.value.timeout == 0.05
        workers = [t for t in threading.enumerate() if t.name == "faq-generation"]
        assert workers and all(t.daemon for t in workers)
    finally:
        release.set()

def test_run_with_timeout_propagates_errors():
    with pytest.raises(InsufficientContentError):
        run_with_timeout(generate, 5, "Too short.")

TIMED_OUT_SCRIPT = """
import time
from faq_system.exceptions import GenerationTimeoutError
from faq_system.generator import run_with_timeout
try:
    run_with_timeout(time.sleep, 0.1, 30)
except GenerationTimeoutError:
    print("timed out")
"""

def test_process_exits_without_waiting_for_abandoned_work():
    started = time.monotonic()
    completed = subprocess.run(
        [sys.executable, "-c", TIMED_OUT_SCRIPT],
        cwd=Path(__file__).parent.parent,
        capture_output=True,
        text=True,
        timeout=25,
    )
    elapsed = time.monotonic() - started
    assert completed.returncode == 0, completed.stderr
    assert completed.stdout.strip() == "timed out"
    assert elapsed < 15
