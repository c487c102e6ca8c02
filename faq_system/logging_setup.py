"""
@file: logging_setup.py
Logging setup module for the FAQ system.

The CLI prints FAQs (or the JSON export) on stdout, so every log record goes
either to the rotating log file or to stderr. This module provides:
- A line-buffered rotating file handler that flushes each record to disk
- A stderr console handler with a short format
- Log level resolution from the argument or config.yaml LOGGING.LEVEL

Usage:
    from faq_system.logging_setup import setup_logging
    setup_logging(LOG_FILE="logs/faq_system.log", LEVEL="DEBUG")

"""

import logging
import logging.handlers
import sys
from pathlib import Path

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s - %(message)s'
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class LineBufferedRotatingFileHandler(logging.handlers.RotatingFileHandler):
    """
    RotatingFileHandler with line buffering enabled.
    Ensures each log record is flushed to disk immediately.
    """
    def _open(self):
        return open(self.baseFilename, self.mode, encoding=self.encoding, buffering=1)


class FlushOnWriteFilter(logging.Filter):
    """Flushes the given handler for every record it lets through."""
    def __init__(self, handler: logging.Handler):
        super().__init__()
        self.handler = handler

    def filter(self, record):
        self.handler.flush()
        return True


def resolve_level(LEVEL: str = None, config_path: str = None) -> int:
    """
    Turn a level name into a logging level number.

    When LEVEL is None, LOGGING.LEVEL is read from config.yaml (or config_path).
    Unknown names and unreadable configs fall back to INFO.
    """
    if LEVEL is None:
        try:
            from faq_system.config import get_config
            LEVEL = get_config(config_path).get_nested('LOGGING.LEVEL', 'INFO')
        except Exception:
            LEVEL = 'INFO'
    level = getattr(logging, str(LEVEL).upper(), logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def _file_handler(log_file: str, level: int) -> logging.Handler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handler = LineBufferedRotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    handler.setLevel(level)
    handler.addFilter(FlushOnWriteFilter(handler))
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handler.setLevel(level)
    return handler


def setup_logging(LOG_FILE: str = "logs/faq_system.log", LEVEL: str = None, config_path: str = None) -> None:
    """
    Set up logging configuration for the FAQ system.

    - File logs are written to LOG_FILE, rotated at 10MB, with 5 backups.
    - Console logs are written to stderr, never stdout.
    - Both handlers use the same level; the log directory is created if missing.
    - Existing root handlers are replaced, so calling this twice does not duplicate output.

    Args:
        LOG_FILE: Path to the log file (default: 'logs/faq_system.log')
        LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). If None, will read from config.yaml LOGGING.LEVEL.
        config_path: Optional path to config.yaml to use for loading the log level if LEVEL is None.
    """
    numeric_level = resolve_level(LEVEL, config_path)

    logging.root.setLevel(numeric_level)
    logging.root.handlers = [_file_handler(LOG_FILE, numeric_level), _console_handler(numeric_level)]

    logging.getLogger(__name__).info(f"Logging setup complete (level {logging.getLevelName(numeric_level)})")
