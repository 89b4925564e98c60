"""
Report Summary

Reads an exported report back from its OOXML parts and lists each slide's
text and picture count, for checking a generated deck without PowerPoint.
"""

import io
import zipfile
from pathlib import Path
from typing import Any, Dict, List, Union

from lxml import etree

from .pptx_utils import NSMAP, clean_text, slide_number


def summarize_report(report: Union[str, Path, bytes]) -> List[Dict[str, Any]]:
    """Summarize the slides of a .pptx file.

    Args:
        report: Path to a .pptx file, or its raw bytes

    Returns:
        One dict per slide with 'number', 'texts', 'title' and 'pictures'
    """
    source = io.BytesIO(report) if isinstance(report, bytes) else Path(report)

    slides = []
    with zipfile.ZipFile(source, 'r') as zf:
        slide_parts = sorted(
            [n for n in zf.namelist() if n.startswith('ppt/slides/slide') and n.endswith('.xml')],
            key=slide_number
        )

        for part in slide_parts:
            root = etree.fromstring(zf.read(part))

            texts = []
            for paragraph in root.xpath('.//a:p', namespaces=NSMAP):
                text = clean_text(''.join(paragraph.xpath('.//a:t/text()', namespaces=NSMAP)))
                if text:
                    texts.append(text)

            slides.append({
                'number': slide_number(part),
                'title': texts[0] if texts else '',
                'texts': texts,
                'pictures': len(root.xpath('.//p:pic', namespaces=NSMAP)),
            })

    return slides


def format_summary(slides: List[Dict[str, Any]]) -> str:
    """Render a slide summary as readable text."""
    lines = [f"Total Slides: {len(slides)}", ""]
    for slide in slides:
        if slide['pictures'] and not slide['texts']:
            kind = f"image ({slide['pictures']})"
        else:
            kind = f"{len(slide['texts'])} text blocks"
        lines.append(f"Slide {slide['number']:3d}: {slide['title'] or '(No title)'} - {kind}")
    return '\n'.join(lines)
