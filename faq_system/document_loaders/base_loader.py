"""
@file: base_loader.py
Base class for document loaders providing common services such as logging, decoding and error handling.

This module defines the BaseDocumentLoader class, which should be subclassed by format-specific loaders.
"""

import logging
from faq_system.exceptions import DocumentLoadError, EmptyExtractionError

class BaseDocumentLoader:
    """
    Base class for document loaders.

    Provides:
        - Logging
        - Text decoding with the configured encoding
        - Error handling hooks
        - Empty extraction detection

    Usage:
        Subclasses should implement extract(source_bytes) returning {'text': str, 'metadata': dict}.
        Call run(source_bytes, declared_format) for the full result, or load() for the text only.
    """
    formats = ()

    def __init__(self, config=None):
        """
        Initialize the document loader with configuration.

        Args:
            config: Configuration object (or None for defaults).
        """
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.info(f"Called __init__(config={config})")
        self.encoding = self._get_config('DOCUMENT_LOADING.ENCODING', 'utf-8')

    def _get_config(self, key, default=None):
        """
        Retrieve a configuration value by key, supporting nested configs.

        Args:
            key (str): Configuration key.
            default: Default value if key is not found.
        Returns:
            The configuration value or default.
        """
        if self.config is None:
            return default
        if hasattr(self.config, 'get_nested'):
            return self.config.get_nested(key, default)
        return getattr(self.config, key, default)

    def decode(self, source_bytes):
        """
        Decode raw bytes into text.

        A UTF-8 byte order mark is dropped. Text input is returned unchanged.

        Args:
            source_bytes (bytes or str): Raw document content.
        Returns:
            str: Decoded text.
        Raises:
            DocumentLoadError: If the bytes are not valid in the configured encoding.
        """
        if isinstance(source_bytes, str):
            return source_bytes
        encoding = 'utf-8-sig' if self.encoding.lower().replace('_', '-') in ('utf-8', 'utf8') else self.encoding
        try:
            return source_bytes.decode(encoding)
        except UnicodeDecodeError as e:
            raise DocumentLoadError(f"Failed to decode document as {self.encoding}: {e}") from e

    def extract(self, source_bytes):
        """
        Extract text from raw document bytes. Should be implemented by subclasses.

        Args:
            source_bytes (bytes): Raw document content.
        Returns:
            dict: {'text': str, 'metadata': dict}
        Raises:
            NotImplementedError: If not implemented in subclass.
        """
        raise NotImplementedError("Subclasses must implement extract()")

    def run(self, source_bytes, declared_format=None):
        """
        Run the loader with error handling and logging.

        Calls self.extract(source_bytes), wraps library errors as DocumentLoadError and
        rejects results without usable text.

        Args:
            source_bytes (bytes): Raw document content.
            declared_format (str, optional): Format name, used in messages and metadata.
        Returns:
            dict: {'text': str, 'metadata': dict}
        Raises:
            DocumentLoadError: If extraction fails.
            EmptyExtractionError: If no text content was found.
        """
        declared_format = declared_format or (self.formats[0] if self.formats else 'unknown')
        self.logger.info(f"Called run(source_bytes=<{len(source_bytes)} bytes>, declared_format={declared_format})")
        try:
            result = self.extract(source_bytes)
        except DocumentLoadError:
            raise
        except Exception as e:
            self.logger.error(f"Loading failed: {e}")
            raise DocumentLoadError(f"Failed to parse .{declared_format} document: {e}") from e
        text = result.get('text') or ''
        if not text.strip():
            self.logger.error(f"No text content found in .{declared_format} document")
            raise EmptyExtractionError("No text content found in the file.")
        metadata = dict(result.get('metadata') or {})
        metadata['format'] = declared_format
        metadata['char_count'] = len(text)
        return {'text': text, 'metadata': metadata}

    def load(self, source_bytes, declared_format=None):
        """
        Load a document and return its plain text.

        Args:
            source_bytes (bytes): Raw document content.
            declared_format (str, optional): Format name.
        Returns:
            str: Extracted plain text.
        """
        return self.run(source_bytes, declared_format)['text']
