"""
@file: markdown_loader.py
Loader for Markdown (.md, .markdown) documents.

This module defines MarkdownDocumentLoader, which decodes Markdown and, when
DOCUMENT_LOADING.STRIP_FRONTMATTER is enabled, removes a leading YAML frontmatter block
so it does not end up in FAQ answers. The frontmatter is parsed with PyYAML and returned
as metadata; the Markdown body itself is kept verbatim.

Limitations:
- Markdown syntax (headers, emphasis, list markers) is not stripped from the body
"""

import re
import yaml
from .base_loader import BaseDocumentLoader

FRONTMATTER_REGEX = re.compile(r'^---\s*\n(.*?)\n---\s*(?:\n|$)', re.DOTALL)

class MarkdownDocumentLoader(BaseDocumentLoader):
    """
    Loader for Markdown files.

    Features:
    - Strips and parses YAML frontmatter (configurable)
    - Collects frontmatter tags into metadata
    """
    formats = ('md', 'markdown')

    def __init__(self, config=None):
        super().__init__(config)
        self.strip_frontmatter = self._get_config('DOCUMENT_LOADING.STRIP_FRONTMATTER', True)

    def _parse_frontmatter(self, block):
        """
        Parse a YAML frontmatter block.

        Args:
            block (str): The YAML text between the '---' fences.
        Returns:
            dict: Parsed frontmatter, or {} if it is not a mapping or fails to parse.
        """
        try:
            data = yaml.safe_load(block)
        except yaml.YAMLError as e:
            self.logger.warning(f"YAML frontmatter parse error: {e}")
            return {}
        self.logger.debug(f"Parsed YAML frontmatter: {data}")
        return data if isinstance(data, dict) else {}

    def extract(self, source_bytes):
        text = self.decode(source_bytes)
        metadata = {'frontmatter': {}, 'tags': []}
        match = FRONTMATTER_REGEX.match(text)
        if match and self.strip_frontmatter:
            frontmatter = self._parse_frontmatter(match.group(1))
            metadata['frontmatter'] = frontmatter
            tags = set()
            for key in ['tags', 'tag', 'categories', 'category']:
                val = frontmatter.get(key)
                if isinstance(val, str):
                    tags.update(v.strip() for v in val.split(','))
                elif isinstance(val, list):
                    tags.update(str(v).strip() for v in val)
            metadata['tags'] = sorted(t for t in tags if t)
            text = text[match.end():]
            if not text.strip():
                self.logger.warning("Markdown document contains only a YAML header and no body text")
        return {'text': text, 'metadata': metadata}
