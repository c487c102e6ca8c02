"""Test configuration and fixtures."""

import logging
import pytest

from faq_system.logging_setup import LineBufferedRotatingFileHandler

SCENARIO_DOCUMENT = (
    "The system processes documents quickly. It ensures accuracy at every step. "
    "Data is validated before export. Users can review results easily. "
    "The process requires no manual intervention. Reports are generated automatically every night."
)

POLICY_DOCUMENT = """Remote Work Policy

The remote work program is a flexible arrangement for eligible employees.
Employees must complete a security training course before working remotely.
Managers approve remote schedules because team coverage is essential.
The company provides a laptop and a monthly internet stipend of 50 dollars.
Approximately 40 percent of staff currently work remotely at least twice a week.
The helpdesk supports remote employees through chat and phone channels.
Dr. Alvarez leads the Remote Work Committee, which reviews the policy every year.
Violations of the data handling rules can lead to suspension of remote privileges.
"""

JSON_SCENARIO = '{"a": "Revenue grew by 12% last year.", "b": {"c": "The company plans further growth."}}'

@pytest.fixture
def scenario_document():
    """Six short sentences, all distinct in vocabulary."""
    return SCENARIO_DOCUMENT

@pytest.fixture
def policy_document():
    """A longer multi-line document with numbers, names and abbreviations."""
    return POLICY_DOCUMENT

@pytest.fixture
def json_scenario():
    return JSON_SCENARIO

@pytest.fixture
def temp_log_file(tmp_path):
    """Create a temporary log file."""
    log_file = tmp_path / "test.log"
    yield str(log_file)
    if log_file.exists():
        log_file.unlink()

@pytest.fixture(autouse=True)
def reset_root_logging():
    """Detach handlers installed by setup_logging so later tests log cleanly."""
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if isinstance(handler, LineBufferedRotatingFileHandler) or type(handler) is logging.StreamHandler:
            logging.root.removeHandler(handler)
            handler.close()
    logging.root.setLevel(level)
