"""
@file: __init__.py
Document loader factory for the FAQ system.

This module selects the appropriate loader for a declared document format and offers
convenience functions that turn raw bytes or a file into the plain text the generation
pipeline consumes.

Exports:
    - get_loader_for_format: Returns a loader instance for a given format.
    - load_document: Bytes + declared format -> plain text.
    - load_file: File path -> plain text (format from the extension unless declared).
    - SUPPORTED_FORMATS: Formats with a registered loader.
"""

import logging
from pathlib import Path

from faq_system.exceptions import DocumentLoadError, UnsupportedFormatError
from .base_loader import BaseDocumentLoader
from .text_loader import TextDocumentLoader
from .markdown_loader import MarkdownDocumentLoader
from .pdf_loader import PDFDocumentLoader
from .docx_loader import DocxDocumentLoader
from .json_loader import JSONDocumentLoader

logger = logging.getLogger(__name__)

LOADERS = {}
for _loader_class in (TextDocumentLoader, MarkdownDocumentLoader, PDFDocumentLoader, DocxDocumentLoader, JSONDocumentLoader):
    for _fmt in _loader_class.formats:
        LOADERS[_fmt] = _loader_class

SUPPORTED_FORMATS = tuple(LOADERS)

def normalize_format(declared_format):
    """Return a lowercase format name without a leading dot (e.g. '.PDF' -> 'pdf')."""
    return str(declared_format or '').strip().lower().lstrip('.')

def get_loader_for_format(declared_format, config=None):
    """
    Return the appropriate document loader instance for the given format.

    Args:
        declared_format: Format name or file extension (e.g. 'pdf', '.md').
        config: Configuration object (optional). DOCUMENT_LOADING.ALLOWED_EXTENSIONS
            restricts which registered formats may be used.

    Returns:
        BaseDocumentLoader: A loader suitable for the format.

    Raises:
        UnsupportedFormatError: If the format has no loader or is not allowed.
    """
    logger.info(f"Called get_loader_for_format(declared_format={declared_format}, config={config})")
    fmt = normalize_format(declared_format)
    allowed = SUPPORTED_FORMATS
    if config is not None and hasattr(config, 'get_nested'):
        configured = config.get_nested('DOCUMENT_LOADING.ALLOWED_EXTENSIONS', None)
        if configured:
            allowed = tuple(normalize_format(ext) for ext in configured if normalize_format(ext) in LOADERS)
    if fmt not in LOADERS or fmt not in allowed:
        raise UnsupportedFormatError(fmt, supported=allowed)
    return LOADERS[fmt](config)

def load_document(source_bytes, declared_format, config=None):
    """
    Load raw document bytes as plain text.

    Args:
        source_bytes (bytes): Raw document content.
        declared_format (str): Format name or extension.
        config: Configuration object (optional).

    Returns:
        str: Plain text.

    Raises:
        UnsupportedFormatError: Unknown or disallowed format.
        DocumentLoadError: Corrupt or undecodable payload.
        EmptyExtractionError: No text content found.
    """
    loader = get_loader_for_format(declared_format, config)
    return loader.load(source_bytes, normalize_format(declared_format))

def load_file(path, config=None, declared_format=None):
    """
    Load a file as plain text.

    Args:
        path: Path to the document.
        config: Configuration object (optional).
        declared_format (str, optional): Overrides the format implied by the extension.

    Returns:
        str: Plain text.

    Raises:
        UnsupportedFormatError: Unknown or disallowed format.
        DocumentLoadError: The file cannot be read or parsed.
        EmptyExtractionError: No text content found.
    """
    logger.info(f"Called load_file(path={path}, declared_format={declared_format})")
    path = Path(path)
    fmt = normalize_format(declared_format or path.suffix)
    loader = get_loader_for_format(fmt, config)
    try:
        source_bytes = path.read_bytes()
    except OSError as e:
        raise DocumentLoadError(f"Failed to read file {path}: {e}") from e
    text = loader.load(source_bytes, fmt)
    logger.info(f"Loaded {len(text)} characters from {path.name}")
    return text

__all__ = [
    'BaseDocumentLoader',
    'TextDocumentLoader',
    'MarkdownDocumentLoader',
    'PDFDocumentLoader',
    'DocxDocumentLoader',
    'JSONDocumentLoader',
    'SUPPORTED_FORMATS',
    'get_loader_for_format',
    'load_document',
    'load_file',
    'normalize_format',
]
