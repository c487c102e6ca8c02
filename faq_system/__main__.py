"""
@file: __main__.py
Main entry point for the FAQ System CLI.

This module provides a command-line interface for generating FAQs from a single document:
- Loading a document from a file (txt, md, pdf, docx, json) or from inline text
- Generating up to five traceable FAQs within a time bound
- Printing them as text or as the JSON export, and optionally writing the export to disk

It handles argument parsing, configuration loading and logging setup, then delegates to the generator.
"""

#!/usr/bin/env python3

import argparse
import logging
import sys

from faq_system.config import get_config
from faq_system.exceptions import FAQSystemError
from faq_system.logging_setup import setup_logging

logger = logging.getLogger(__name__)

def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the FAQ System CLI.

    Returns:
        argparse.Namespace: Parsed command line arguments
    """
    logger.info("Called parse_args()")
    parser = argparse.ArgumentParser(
        description="FAQ System - Generate traceable FAQs from a single document"
    )

    # Mutually exclusive input group
    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument(
        "--file",
        help="Path of the document to generate FAQs from"
    )
    source_group.add_argument(
        "--text",
        help="Document text given inline"
    )

    parser.add_argument(
        "--format",
        help="Document format (txt, md, pdf, docx, json). Defaults to the file extension."
    )
    parser.add_argument(
        "--export",
        help="Write the JSON export to this file or directory"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON export instead of the text rendering"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Give up after this many seconds (default: GENERATION.TIMEOUT_SECONDS)"
    )

    # Debug flag
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    # Config file option
    parser.add_argument(
        "--config",
        help="Path to configuration file"
    )

    return parser.parse_args()

def load_source(args: argparse.Namespace, config) -> str:
    """Return the document text named by --file or given by --text."""
    logger.info(f"Called load_source(file={args.file}, format={args.format})")
    if args.file:
        from faq_system.document_loaders import load_file
        return load_file(args.file, config, declared_format=args.format)
    return args.text

def process_generate(args: argparse.Namespace, config) -> int:
    """Generate FAQs for the requested document and print them.

    Args:
        args: Parsed command line arguments
        config: Configuration object

    Returns:
        int: Exit code (0 for success, including partial results; 1 for failure)
    """
    logger.info(f"Called process_generate(file={args.file}, json={args.json}, export={args.export})")
    try:
        from faq_system.export import export_json, render_text, write_export
        from faq_system.generator import FAQGenerator, run_with_timeout

        document = load_source(args, config)
        generator = FAQGenerator(config)
        timeout = args.timeout if args.timeout is not None else generator.settings.timeout_seconds
        result = run_with_timeout(generator.run, timeout, document)
        indent = int(config.get_nested('EXPORT.INDENT', 2))

        if args.json:
            print(export_json(result.faqs, document, indent=indent))
        else:
            print(render_text(result.faqs))

        for warning in result.warnings:
            print(f"Warning: {warning}", file=sys.stderr)

        if args.export:
            path = write_export(result.faqs, document, args.export, indent=indent)
            print(f"Exported {len(result.faqs)} FAQs to {path}", file=sys.stderr)
        return 0

    except FAQSystemError as e:
        logger.error(f"Error generating FAQs: {str(e)}")
        return 1

def main() -> int:
    """Main entry point for the FAQ System CLI.

    Returns:
        int: Exit code (0 for success, 1 for failure)
    """
    logger.info("Called main()")
    try:
        args = parse_args()

        # Load configuration
        config = get_config(args.config)

        # Setup logging
        log_level = "DEBUG" if args.debug else config.get_nested('LOGGING.LEVEL', 'INFO')
        setup_logging(
            LOG_FILE=config.get_nested('LOGGING.LOG_FILE', 'logs/faq_system.log'),
            LEVEL=log_level
        )
        # Ensure all loggers inherit the root logger's level
        for name in logging.root.manager.loggerDict:
            logging.getLogger(name).setLevel(logging.NOTSET)

        return process_generate(args, config)

    except FAQSystemError as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.critical(f"Unexpected error: {str(e)}", exc_info=True)
        return 1

if __name__ == "__main__":
    sys.exit(main())
