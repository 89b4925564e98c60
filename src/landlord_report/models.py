"""
Data Models for Landlord Report Generation

Pages, property facts, contacts and the positioned-element deck that the
layout engine builds and the exporter writes out.
"""

from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


# ============================================================
# SOURCE DOCUMENT
# ============================================================

class RasterPage(BaseModel):
    """A rendered document page plus its sampled accent color."""
    model_config = ConfigDict(frozen=True)

    image_data: bytes = Field(repr=False, description="PNG-encoded bitmap")
    width: int = Field(gt=0, description="Pixel width")
    height: int = Field(gt=0, description="Pixel height")
    dominant_color: str = Field(description="6-hex-digit RGB")


class RasterizedDocument(BaseModel):
    """First and last page of a source document with first-page text."""
    model_config = ConfigDict(frozen=True)

    first_page: RasterPage
    last_page: RasterPage
    text: str = ""


# ============================================================
# PROPERTY FACTS
# ============================================================

NAME_PLACEHOLDER = '[Property Name]'
SIZE_PLACEHOLDER = '[XX,XXX SF]'
LOCATION_PLACEHOLDER = '[City, State]'
AVAILABLE_PLACEHOLDER = '[X,XXX SF]'
RENT_PLACEHOLDER = '$[XX.XX]/SF/YR'


class PropertyFacts(BaseModel):
    """Display-ready property details; labels are never empty."""
    model_config = ConfigDict(frozen=True)

    name: str = NAME_PLACEHOLDER
    size_label: str = SIZE_PLACEHOLDER
    location_label: str = LOCATION_PLACEHOLDER
    available_space_label: str = AVAILABLE_PLACEHOLDER
    rent_label: str = RENT_PLACEHOLDER
    city: str = ""
    state: str = ""
    address: Optional[str] = None

    def with_address(self, address: str) -> "PropertyFacts":
        """Return a copy carrying the caller-supplied address."""
        return self.model_copy(update={'address': address})


# ============================================================
# CONTACTS
# ============================================================

class ContactRecord(BaseModel):
    """One row of a contact activity table."""
    model_config = ConfigDict(frozen=True)

    company: str
    contact: str
    date: str
    method: str
    status: str

    def cells(self) -> List[str]:
        """Cell values in column order."""
        return [self.company, self.contact, self.date, self.method, self.status]


# ============================================================
# DECK
# ============================================================

class Theme(BaseModel):
    """Accent color and its lightened variant."""
    model_config = ConfigDict(frozen=True)

    accent: str
    light: str


class ShapeElement(BaseModel):
    """A filled rectangle, positioned in inches."""
    kind: Literal['shape'] = 'shape'
    x: float
    y: float
    w: float
    h: float
    fill: Optional[str] = None
    line_color: Optional[str] = None
    line_width: float = 0.0


class TextElement(BaseModel):
    """A text box, positioned in inches."""
    kind: Literal['text'] = 'text'
    text: str
    x: float
    y: float
    w: float
    h: float
    font_size: float = 12
    bold: bool = False
    color: str = '1E293B'
    font_face: str = 'Calibri'
    align: Literal['left', 'center', 'right'] = 'left'
    valign: Literal['top', 'middle', 'bottom'] = 'middle'
    paragraph_spacing: Optional[float] = Field(None, description="Points after each paragraph")


class ImageElement(BaseModel):
    """A picture, positioned in inches."""
    kind: Literal['image'] = 'image'
    data: bytes = Field(repr=False)
    x: float
    y: float
    w: float
    h: float


SlideElement = Union[ShapeElement, TextElement, ImageElement]


class Slide(BaseModel):
    """One slide: an optional background and its positioned elements."""
    name: str = ""
    background: Optional[str] = None
    elements: List[SlideElement] = Field(default_factory=list)

    def add(self, element: SlideElement) -> SlideElement:
        self.elements.append(element)
        return element

    def texts(self) -> List[str]:
        """All text content on the slide, in insertion order."""
        return [e.text for e in self.elements if isinstance(e, TextElement)]


class Deck(BaseModel):
    """Ordered slides on a canvas measured in inches."""
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    slides: List[Slide] = Field(default_factory=list)

    def add_slide(self, name: str = "", background: Optional[str] = None) -> Slide:
        slide = Slide(name=name, background=background)
        self.slides.append(slide)
        return slide

    def extend(self, slides: List[Slide]) -> None:
        self.slides.extend(slides)
