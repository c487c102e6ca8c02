"""
@file: text_loader.py
Loader for plain text (.txt, .text) documents.
"""

from .base_loader import BaseDocumentLoader

class TextDocumentLoader(BaseDocumentLoader):
    """Document loader for plain text files. The text is returned exactly as decoded."""
    formats = ('txt', 'text')

    def extract(self, source_bytes):
        self.logger.debug("Extracting plain text")
        text = self.decode(source_bytes)
        return {
            'text': text,
            'metadata': {'line_count': len(text.splitlines())}
        }
