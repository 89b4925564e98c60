"""
Page Rasterizer

Renders the first and last page of an offering document to PNG, samples
each page's accent color and pulls the plain text of page one.

The rendering backend is injected: PdfEngine wraps PyMuPDF, tests pass a
fake with the same four methods.
"""

import io
from typing import Any, Optional

from PIL import Image

from .colors import sample_dominant_color
from .config import RenderSettings
from .errors import DependencyLoadError, DocumentParseError
from .models import RasterPage, RasterizedDocument


class PdfEngine:
    """PDF rendering backend built on PyMuPDF."""

    def __init__(self):
        try:
            import fitz  # PyMuPDF
        except ImportError as e:
            raise DependencyLoadError(
                "PyMuPDF (fitz) is required for PDF rendering. Install with: pip install PyMuPDF"
            ) from e
        self._fitz = fitz

    def open(self, data: bytes) -> Any:
        try:
            doc = self._fitz.open(stream=data, filetype='pdf')
        except Exception as e:
            raise DocumentParseError(f"Could not open document: {e}") from e
        if doc.page_count == 0:
            doc.close()
            raise DocumentParseError("Document has no pages")
        return doc

    def page_count(self, doc: Any) -> int:
        return doc.page_count

    def render(self, doc: Any, index: int, scale: float) -> Image.Image:
        try:
            pix = doc[index].get_pixmap(matrix=self._fitz.Matrix(scale, scale), alpha=False)
        except Exception as e:
            raise DocumentParseError(f"Could not render page {index + 1}: {e}") from e
        return Image.frombytes('RGB', (pix.width, pix.height), pix.samples)

    def page_text(self, doc: Any, index: int) -> str:
        words = doc[index].get_text('words')
        return ' '.join(w[4] for w in words)

    def close(self, doc: Any) -> None:
        doc.close()


def to_raster_page(image: Image.Image, settings: Optional[RenderSettings] = None,
                   fallback: Optional[str] = None) -> RasterPage:
    """Encode a rendered page as PNG and attach its dominant color."""
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')
    kwargs = {'fallback': fallback} if fallback else {}
    return RasterPage(
        image_data=buffer.getvalue(),
        width=image.width,
        height=image.height,
        dominant_color=sample_dominant_color(image, settings, **kwargs),
    )


def rasterize_document(
    data: bytes,
    engine: Any,
    settings: Optional[RenderSettings] = None,
    fallback_color: Optional[str] = None,
    verbose: bool = False
) -> RasterizedDocument:
    """Render the first and last page of a document.

    Args:
        data: Raw document bytes
        engine: Rendering backend (PdfEngine or compatible)
        settings: Render scale and sampling parameters
        fallback_color: Accent used for pages without non-white pixels
        verbose: Print progress

    Returns:
        RasterizedDocument with both pages and the first page's text

    Raises:
        DocumentParseError: If the document cannot be opened or rendered
    """
    settings = settings or RenderSettings()

    doc = engine.open(data)
    try:
        total = engine.page_count(doc)
        if verbose:
            print(f"  Document has {total} pages")

        first_image = engine.render(doc, 0, settings.scale)
        first_page = to_raster_page(first_image, settings, fallback_color)

        # Text is a best-effort extra
        try:
            text = engine.page_text(doc, 0) or ''
        except Exception as e:
            if verbose:
                print(f"  Warning: could not extract text from page 1: {e}")
            text = ''

        if total == 1:
            last_page = first_page
        else:
            last_image = engine.render(doc, total - 1, settings.scale)
            last_page = to_raster_page(last_image, settings, fallback_color)
    finally:
        engine.close(doc)

    if verbose:
        print(f"  Rendered pages at {first_page.width}x{first_page.height}px, "
              f"accent #{first_page.dominant_color}")
        if not text:
            print("  WARNING: No text extracted. Property details will use placeholders.")

    return RasterizedDocument(first_page=first_page, last_page=last_page, text=text)
