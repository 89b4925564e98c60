"""
PPTX Utilities

Shared OOXML namespaces and text helpers for writing and reading decks.
"""

import re
from pathlib import Path

# OOXML namespaces
NSMAP = {
    'a': 'http://schemas.openxmlformats.org/drawingml/2006/main',
    'p': 'http://schemas.openxmlformats.org/presentationml/2006/main',
}


def clean_text(text: str, strip: bool = True) -> str:
    """Remove control characters that break XML.

    Args:
        text: Input text string
        strip: Trim surrounding whitespace

    Returns:
        Cleaned text string
    """
    if not text:
        return ""
    cleaned = ''.join(c if ord(c) >= 32 or c in '\n\t' else ' ' for c in str(text))
    return cleaned.strip() if strip else cleaned


def slide_number(part_name: str) -> int:
    """Numeric suffix of a slide part name such as 'ppt/slides/slide12.xml'."""
    match = re.search(r'slide(\d+)\.xml$', Path(part_name).name)
    return int(match.group(1)) if match else 0
