"""
@file: docx_loader.py
Loader for Word (.docx) documents using python-docx.

Paragraph text is read first, then the text of table cells, one line per non-empty paragraph.
"""

from io import BytesIO
from .base_loader import BaseDocumentLoader

class DocxDocumentLoader(BaseDocumentLoader):
    """Loader for DOCX documents."""
    formats = ('docx',)

    def extract(self, source_bytes):
        """
        Extract raw text from a DOCX document.

        Args:
            source_bytes (bytes): Raw DOCX content.
        Returns:
            dict: {'text': str, 'metadata': {'paragraph_count': int, 'table_count': int}}
        """
        from docx import Document
        doc = Document(BytesIO(source_bytes))
        parts = []
        for paragraph in doc.paragraphs:
            text = (paragraph.text or '').strip()
            if text:
                parts.append(text)
        paragraph_count = len(parts)
        for table in doc.tables:
            for row in table.rows:
                for cell in row.cells:
                    for paragraph in cell.paragraphs:
                        text = (paragraph.text or '').strip()
                        if text:
                            parts.append(text)
        self.logger.debug(f"Extracted {paragraph_count} paragraphs and {len(doc.tables)} tables from DOCX")
        return {
            'text': '\n'.join(parts),
            'metadata': {
                'paragraph_count': paragraph_count,
                'table_count': len(doc.tables),
            }
        }
