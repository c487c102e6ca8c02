"""
@file: json_loader.py
Loader for JSON (.json) documents.

Every string value is collected depth-first in the order the structure is written
(list items and object values are walked the same way) and joined with newlines.
Keys, numbers, booleans and nulls are ignored.
"""

import json
from .base_loader import BaseDocumentLoader

def collect_strings(value):
    """
    Recursively collect string values from parsed JSON.

    Args:
        value: Parsed JSON value.
    Returns:
        list[str]: String values in depth-first order.
    """
    if isinstance(value, str):
        return [value]
    strings = []
    if isinstance(value, list):
        for item in value:
            strings.extend(collect_strings(item))
    elif isinstance(value, dict):
        for item in value.values():
            strings.extend(collect_strings(item))
    return strings

class JSONDocumentLoader(BaseDocumentLoader):
    """Loader that flattens a JSON document into newline-separated text."""
    formats = ('json',)

    def extract(self, source_bytes):
        data = json.loads(self.decode(source_bytes))
        strings = collect_strings(data)
        self.logger.debug(f"Collected {len(strings)} string values from JSON")
        return {
            'text': '\n'.join(strings),
            'metadata': {'string_count': len(strings)}
        }
