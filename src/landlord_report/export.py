"""
Deck Export

Writes a Deck to PowerPoint with python-pptx. python-pptx is imported when
the exporter is created so a missing install surfaces as
DependencyLoadError before any work is done.
"""

import io

from .errors import DependencyLoadError
from .models import Deck, ImageElement, ShapeElement, Slide, TextElement
from .pptx_utils import clean_text

BLANK_LAYOUT = 6


class PptxExporter:
    """Renders Deck models into .pptx bytes."""

    def __init__(self):
        try:
            from pptx import Presentation
            from pptx.dml.color import RGBColor
            from pptx.enum.shapes import MSO_SHAPE
            from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
            from pptx.util import Inches, Pt
        except ImportError as e:
            raise DependencyLoadError(
                "python-pptx is required. Install with: pip install python-pptx"
            ) from e

        self._presentation = Presentation
        self._rgb = RGBColor.from_string
        self._rectangle = MSO_SHAPE.RECTANGLE
        self._inches = Inches
        self._pt = Pt
        self._align = {'left': PP_ALIGN.LEFT, 'center': PP_ALIGN.CENTER, 'right': PP_ALIGN.RIGHT}
        self._anchor = {'top': MSO_ANCHOR.TOP, 'middle': MSO_ANCHOR.MIDDLE, 'bottom': MSO_ANCHOR.BOTTOM}

    def export(self, deck: Deck) -> bytes:
        """Build the presentation and return it as bytes."""
        prs = self._presentation()
        prs.slide_width = self._inches(deck.width)
        prs.slide_height = self._inches(deck.height)
        layout = prs.slide_layouts[BLANK_LAYOUT]

        for slide in deck.slides:
            self._add_slide(prs.slides.add_slide(layout), slide)

        buffer = io.BytesIO()
        prs.save(buffer)
        return buffer.getvalue()

    def _add_slide(self, target, slide: Slide) -> None:
        if slide.background:
            fill = target.background.fill
            fill.solid()
            fill.fore_color.rgb = self._rgb(slide.background)

        for element in slide.elements:
            if isinstance(element, ShapeElement):
                self._add_shape(target, element)
            elif isinstance(element, TextElement):
                self._add_text(target, element)
            elif isinstance(element, ImageElement):
                self._add_image(target, element)

    def _box(self, element):
        inches = self._inches
        return inches(element.x), inches(element.y), inches(element.w), inches(element.h)

    def _add_shape(self, target, element: ShapeElement) -> None:
        shape = target.shapes.add_shape(self._rectangle, *self._box(element))
        shape.shadow.inherit = False
        if element.fill:
            shape.fill.solid()
            shape.fill.fore_color.rgb = self._rgb(element.fill)
        else:
            shape.fill.background()
        if element.line_color:
            shape.line.color.rgb = self._rgb(element.line_color)
            shape.line.width = self._pt(element.line_width)
        else:
            shape.line.fill.background()

    def _add_text(self, target, element: TextElement) -> None:
        box = target.shapes.add_textbox(*self._box(element))
        frame = box.text_frame
        frame.word_wrap = True
        frame.vertical_anchor = self._anchor[element.valign]

        for i, line in enumerate(element.text.split('\n')):
            paragraph = frame.paragraphs[0] if i == 0 else frame.add_paragraph()
            paragraph.alignment = self._align[element.align]
            if element.paragraph_spacing is not None:
                paragraph.space_after = self._pt(element.paragraph_spacing)

            run = paragraph.add_run()
            run.text = clean_text(line, strip=False)
            font = run.font
            font.size = self._pt(element.font_size)
            font.bold = element.bold
            font.name = element.font_face
            font.color.rgb = self._rgb(element.color)

    def _add_image(self, target, element: ImageElement) -> None:
        target.shapes.add_picture(io.BytesIO(element.data), *self._box(element))
