"""
@file: pdf_loader.py
PDFDocumentLoader: Extracts plain text from PDF documents for FAQ generation.

This module defines PDFDocumentLoader, a subclass of BaseDocumentLoader, for handling PDF (.pdf)
documents. Text is read page by page with PyMuPDF (fitz), cleaned of PDF line-wrapping artifacts
and joined with one newline per page.

Dependencies:
- PyMuPDF (fitz) for PDF parsing

Usage Example:
    loader = PDFDocumentLoader(config)
    text = loader.load(pdf_bytes)

Limitations:
- Scanned PDFs without a text layer yield no text (EmptyExtractionError)
- Multi-column layouts are read in PyMuPDF's block order
"""

import re
from .base_loader import BaseDocumentLoader

def clean_pdf_text(text):
    """
    Cleans up PDF-extracted text by:
    - Removing hyphenation at line breaks
    - Joining lines that are split mid-sentence
    - Collapsing multiple spaces
    - Preserving paragraph breaks
    """
    # "infor-\nmation" -> "information"
    text = re.sub(r'(\w+)-\n(\w+)', r'\1\2', text)
    # Join lines that are not paragraph breaks
    text = re.sub(r'(?<!\n)\n(?!\n)', ' ', text)
    text = re.sub(r' +', ' ', text)
    return text.strip()

class PDFDocumentLoader(BaseDocumentLoader):
    """
    Loader for PDF (.pdf) documents using PyMuPDF (fitz).

    Returns a dictionary with 'text' and 'metadata' (page_count, page_texts).
    """
    formats = ('pdf',)

    def extract(self, source_bytes):
        """
        Extract cleaned text from every page of a PDF.

        Args:
            source_bytes (bytes): Raw PDF content.
        Returns:
            dict: {
                'text': Page texts joined by newlines,
                'metadata': {'page_count': int, 'page_texts': list of cleaned page texts}
            }
        """
        import fitz  # PyMuPDF
        self.logger.debug(f"Extracting PDF text from {len(source_bytes)} bytes")
        page_texts = []
        with fitz.open(stream=source_bytes, filetype="pdf") as doc:
            for page in doc:
                page_texts.append(clean_pdf_text(page.get_text("text") or ''))
        self.logger.info(f"Extracted {len(page_texts)} PDF pages")
        return {
            'text': '\n'.join(page_texts).strip(),
            'metadata': {
                'page_count': len(page_texts),
                'page_texts': page_texts,
            }
        }
