"""
@file: export.py
Rendering, export and provenance lookup for generated FAQs.

This module provides functions to:
    - Render FAQs as plain text (the "copy all" format).
    - Build, serialize, write and re-parse the structured JSON export.
    - Locate a FAQ reference in the original document for highlighting.

The export intentionally omits sourceIndex: it is only meaningful against the
in-memory segmentation that produced it.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional

from faq_system.analysis.models import FAQRecord
from faq_system.exceptions import FAQSystemError

logger = logging.getLogger(__name__)

EXPORT_KEYS = ('generatedAt', 'sourceDocumentLength', 'faqCount', 'faqs')
EXPORT_FAQ_KEYS = ('ordinal', 'question', 'answer', 'reference')


def render_text(faqs: Iterable[FAQRecord]) -> str:
    """
    Render FAQs as text, three lines per FAQ separated by blank lines.

    Args:
        faqs: FAQ records in presentation order.
    Returns:
        str: Lines of the form 'Q1: ...', 'A: ...', 'Reference: "..."'.
    """
    blocks = [
        f"Q{faq.ordinal}: {faq.question}\n"
        f"A: {faq.answer}\n"
        f"Reference: \"{faq.reference}\"\n"
        for faq in faqs
    ]
    return '\n'.join(blocks)


def build_export(faqs: List[FAQRecord], document: str, generated_at: datetime = None) -> dict:
    """
    Build the structured export document.

    Args:
        faqs: FAQ records in presentation order.
        document (str): The source document the FAQs were generated from.
        generated_at (datetime, optional): Timestamp; defaults to now (UTC).
    Returns:
        dict: {generatedAt, sourceDocumentLength, faqCount, faqs: [{ordinal, question, answer, reference}]}
    """
    generated_at = generated_at or datetime.now(timezone.utc)
    return {
        'generatedAt': generated_at.isoformat(),
        'sourceDocumentLength': len(document),
        'faqCount': len(faqs),
        'faqs': [faq.to_export_dict() for faq in faqs],
    }


def export_json(faqs: List[FAQRecord], document: str, indent: int = 2, generated_at: datetime = None) -> str:
    """Serialize the export document as JSON."""
    return json.dumps(build_export(faqs, document, generated_at), indent=indent, ensure_ascii=False)


def default_export_filename(now: datetime = None) -> str:
    """Return 'faqs-<epoch milliseconds>.json'."""
    now = now or datetime.now(timezone.utc)
    return f"faqs-{int(now.timestamp() * 1000)}.json"


def write_export(faqs: List[FAQRecord], document: str, path=None, indent: int = 2) -> Path:
    """
    Write the JSON export to a file.

    Args:
        faqs: FAQ records.
        document (str): Source document.
        path: Destination file or directory. A directory (or None, meaning the current
            directory) receives a file named by default_export_filename().
        indent (int): JSON indentation.
    Returns:
        Path: The written file.
    """
    logger.info(f"Called write_export(faqs={len(faqs)}, path={path})")
    target = Path(path) if path else Path('.')
    if target.is_dir():
        target = target / default_export_filename()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(export_json(faqs, document, indent=indent), encoding='utf-8')
    logger.info(f"Exported {len(faqs)} FAQs to {target}")
    return target


def parse_export(payload: str) -> dict:
    """
    Parse a JSON export and check its structure.

    Args:
        payload (str): JSON text produced by export_json.
    Returns:
        dict: The parsed export.
    Raises:
        FAQSystemError: If the payload is not valid JSON or lacks required keys.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise FAQSystemError(f"Invalid FAQ export: {e}") from e
    missing = [key for key in EXPORT_KEYS if key not in data]
    if missing:
        raise FAQSystemError(f"Invalid FAQ export: missing keys {missing}")
    for entry in data['faqs']:
        absent = [key for key in EXPORT_FAQ_KEYS if key not in entry]
        if absent:
            raise FAQSystemError(f"Invalid FAQ export entry: missing keys {absent}")
    return data


def find_reference(document: str, reference: str) -> Optional[int]:
    """
    Find where a reference occurs in the original document.

    Args:
        document (str): The same original document that produced the reference.
        reference (str): A FAQ reference.
    Returns:
        int or None: The first character offset, or None if not found.
    """
    if not reference:
        return None
    index = document.find(reference)
    return index if index != -1 else None


@dataclass(frozen=True)
class ReferenceLocation:
    """Where a reference sits in a document: [start, end) offsets and 0-based line number."""
    start: int
    end: int
    line: int


def locate_reference(document: str, reference: str) -> Optional[ReferenceLocation]:
    """
    Locate a reference for highlighting.

    Args:
        document (str): Original document.
        reference (str): A FAQ reference.
    Returns:
        ReferenceLocation or None: Offsets and line of the first occurrence.
    """
    start = find_reference(document, reference)
    if start is None:
        return None
    return ReferenceLocation(start=start, end=start + len(reference), line=document.count('\n', 0, start))
