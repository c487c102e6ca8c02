import argparse
import json
import pytest
from unittest.mock import patch

from faq_system.__main__ import (
    parse_args,
    process_generate,
    main
)
from faq_system.config import Config
from faq_system.exceptions import GenerationTimeoutError

# Test data
TEST_CONFIG = Config({
    'LOGGING': {
        'LEVEL': 'INFO',
        'LOG_FILE': 'logs/test.log'
    }
})

def make_args(**overrides):
    values = dict(file=None, text=None, format=None, export=None, json=False,
                  timeout=None, debug=False, config=None)
    values.update(overrides)
    return argparse.Namespace(**values)

@pytest.fixture
def mock_config():
    with patch('faq_system.__main__.get_config', return_value=TEST_CONFIG) as mock:
        yield mock

@pytest.fixture
def mock_setup_logging():
    with patch('faq_system.__main__.setup_logging') as mock:
        yield mock

class TestParseArgs:
    def test_file_operation(self):
        """Test parsing file input arguments"""
        with patch('sys.argv', ['faq_system', '--file', 'policy.pdf', '--json', '--export', 'out.json']):
            args = parse_args()
            assert args.file == 'policy.pdf'
            assert args.text is None
            assert args.json
            assert args.export == 'out.json'

    def test_text_operation(self):
        """Test parsing inline text with a timeout"""
        with patch('sys.argv', ['faq_system', '--text', 'Some text.', '--timeout', '2.5', '--debug']):
            args = parse_args()
            assert args.text == 'Some text.'
            assert args.timeout == 2.5
            assert args.debug
            assert not args.json

    def test_inputs_are_mutually_exclusive(self):
        """Test that --file and --text cannot be combined"""
        with patch('sys.argv', ['faq_system', '--file', 'a.txt', '--text', 'b']):
            with pytest.raises(SystemExit):
                parse_args()

    def test_input_is_required(self):
        """Test that an input source is required"""
        with patch('sys.argv', ['faq_system', '--json']):
            with pytest.raises(SystemExit):
                parse_args()

class TestProcessGenerate:
    def test_text_rendering(self, scenario_document, capsys):
        assert process_generate(make_args(text=scenario_document), TEST_CONFIG) == 0
        out = capsys.readouterr().out
        assert out.startswith("Q1: ")
        assert "What are the requirements for process?" in out
        assert 'Reference: "The process requires no manual intervention."' in out

    def test_json_output(self, scenario_document, capsys):
        assert process_generate(make_args(text=scenario_document, json=True), TEST_CONFIG) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['faqCount'] == 5
        assert all('sourceIndex' not in faq for faq in data['faqs'])

    def test_file_input_and_export(self, tmp_path, policy_document, capsys):
        source = tmp_path / 'policy.md'
        source.write_text(policy_document, encoding='utf-8')
        target = tmp_path / 'faqs.json'
        assert process_generate(make_args(file=str(source), export=str(target)), TEST_CONFIG) == 0
        assert json.loads(target.read_text(encoding='utf-8'))['faqCount'] == 5
        assert "Exported 5 FAQs" in capsys.readouterr().err

    def test_declared_format_overrides_extension(self, tmp_path, scenario_document, capsys):
        source = tmp_path / 'payload.dat'
        source.write_text(json.dumps({"body": scenario_document}), encoding='utf-8')
        assert process_generate(make_args(file=str(source), format='json'), TEST_CONFIG) == 0
        assert "Q5: " in capsys.readouterr().out

    def test_partial_result_prints_warning(self, capsys):
        document = (
            ", and then there was nothing more to add. "
            "Invoices are archived for seven years. "
            "Receipts must be scanned within one week. "
            "The finance team reviews expenses monthly. "
            "Travel bookings require manager approval in advance."
        )
        assert process_generate(make_args(text=document), TEST_CONFIG) == 0
        captured = capsys.readouterr()
        assert "Q4: " in captured.out
        assert "Warning: Generated 4 FAQs." in captured.err

    def test_insufficient_content_fails(self, capsys):
        assert process_generate(make_args(text="Only one sentence is here."), TEST_CONFIG) == 1
        assert capsys.readouterr().out == ''

    def test_unsupported_file_fails(self, tmp_path):
        source = tmp_path / 'sheet.xlsx'
        source.write_bytes(b'data')
        assert process_generate(make_args(file=str(source)), TEST_CONFIG) == 1

    def test_timeout_fails(self, scenario_document, mocker):
        mocker.patch('faq_system.generator.run_with_timeout', side_effect=GenerationTimeoutError(0.1))
        assert process_generate(make_args(text=scenario_document, timeout=0.1), TEST_CONFIG) == 1

    def test_timeout_defaults_to_config(self, scenario_document, mocker):
        run = mocker.patch('faq_system.generator.run_with_timeout')
        run.return_value.faqs = []
        run.return_value.warnings = []
        config = Config({'GENERATION': {'TIMEOUT_SECONDS': 12}})
        assert process_generate(make_args(text=scenario_document), config) == 0
        assert run.call_args[0][1] == 12.0

class TestMain:
    def test_main_success(self, mock_config, mock_setup_logging, scenario_document, capsys):
        with patch('sys.argv', ['faq_system', '--text', scenario_document]):
            assert main() == 0
        mock_setup_logging.assert_called_once_with(LOG_FILE='logs/test.log', LEVEL='INFO')
        assert "Q5: " in capsys.readouterr().out

    def test_main_debug_flag(self, mock_config, mock_setup_logging, scenario_document):
        with patch('sys.argv', ['faq_system', '--text', scenario_document, '--debug']):
            assert main() == 0
        mock_setup_logging.assert_called_once_with(LOG_FILE='logs/test.log', LEVEL='DEBUG')

    def test_main_uses_config_path(self, mock_config, mock_setup_logging, scenario_document):
        with patch('sys.argv', ['faq_system', '--text', scenario_document, '--config', 'custom.yaml']):
            main()
        mock_config.assert_called_once_with('custom.yaml')

    def test_main_generation_error(self, mock_config, mock_setup_logging):
        with patch('sys.argv', ['faq_system', '--text', 'Too short.']):
            assert main() == 1

    def test_main_unexpected_error(self, mock_setup_logging):
        with patch('faq_system.__main__.get_config', side_effect=FileNotFoundError("missing.yaml")):
            with patch('sys.argv', ['faq_system', '--text', 'anything']):
                assert main() == 1
