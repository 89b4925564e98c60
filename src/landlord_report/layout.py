"""
Deck Layout Engine

Builds the Landlord Update Report deck:
- Cover slide (first document page, full bleed)
- Activity summary: property card, KPI row, market insights panel
- Outbound and inbound contact tables, paginated
- Back slide (last document page, full bleed)

The canvas takes the cover page's aspect ratio and every element is placed
as a fraction of slide width/height.
"""

from typing import Optional

from .colors import derive_theme
from .config import ReportConfig
from .contacts import ContactSource, inbound_source, outbound_source
from .geometry import (
    BACKGROUND,
    BORDER,
    TEXT_BODY,
    TEXT_DARK,
    TEXT_MUTED,
    WHITE,
    SlideFrame,
)
from .models import (
    Deck,
    ImageElement,
    PropertyFacts,
    RasterPage,
    ShapeElement,
    Slide,
    TextElement,
    Theme,
)
from .paginate import build_contact_slides

# Activity summary proportions
HEADER_BAND = 0.10
CARD_TOP = 0.12
CARD_HEIGHT = 0.16
PROPERTY_CARD_WIDTH = 0.30
KPI_LEFT = 0.35
KPI_WIDTH = 0.10
KPI_GAP = 0.008
MARKET_TOP = 0.31
MARKET_HEIGHT = 0.63


def add_full_bleed_image(deck: Deck, page: RasterPage, name: str) -> Slide:
    """Append a slide showing a rendered page edge to edge."""
    slide = deck.add_slide(name=name)
    slide.add(ImageElement(data=page.image_data, x=0, y=0, w=deck.width, h=deck.height))
    return slide


def build_summary_slide(
    deck: Deck,
    frame: SlideFrame,
    theme: Theme,
    facts: PropertyFacts,
    narrative: str,
    config: ReportConfig
) -> Slide:
    """Append the activity summary slide."""
    font = config.labels.font_face
    slide = deck.add_slide(name='activity summary', background=BACKGROUND)

    # Header band
    slide.add(ShapeElement(x=0, y=0, w=frame.width, h=frame.y(HEADER_BAND), fill=theme.accent))
    slide.add(TextElement(
        text=config.labels.report_title,
        x=frame.x(0.03), y=frame.y(0.02), w=frame.x(0.94), h=frame.y(0.035),
        font_size=32, bold=True, color=WHITE, font_face=font,
    ))
    slide.add(TextElement(
        text=config.labels.reporting_period,
        x=frame.x(0.03), y=frame.y(0.06), w=frame.x(0.94), h=frame.y(0.028),
        font_size=14, color=WHITE, font_face=font,
    ))

    top_y = frame.y(CARD_TOP)
    top_h = frame.y(CARD_HEIGHT)

    # Property card
    prop_x = frame.x(0.03)
    prop_w = frame.x(PROPERTY_CARD_WIDTH)
    slide.add(ShapeElement(x=prop_x, y=top_y, w=prop_w, h=top_h,
                           fill=WHITE, line_color=BORDER, line_width=1))
    slide.add(ShapeElement(x=prop_x, y=top_y, w=prop_w, h=top_h * 0.18, fill=theme.light))
    slide.add(TextElement(
        text='PROPERTY',
        x=prop_x, y=top_y, w=prop_w, h=top_h * 0.18,
        font_size=13, bold=True, color=TEXT_DARK, font_face=font, align='center',
    ))

    lines = [
        (facts.name, 0.25, 0.15, 15, True, theme.accent),
        (f'{facts.size_label} | {facts.location_label}', 0.46, 0.12, 11, False, TEXT_MUTED),
        (f'Available: {facts.available_space_label}', 0.64, 0.12, 11, False, TEXT_BODY),
        (f'Rent: {facts.rent_label}', 0.80, 0.12, 11, False, TEXT_BODY),
    ]
    for text, offset, height, size, bold, color in lines:
        slide.add(TextElement(
            text=text,
            x=prop_x + prop_w * 0.05, y=top_y + top_h * offset, w=prop_w * 0.9, h=top_h * height,
            font_size=size, bold=bold, color=color, font_face=font,
        ))

    # KPI row
    kpi_w = frame.x(KPI_WIDTH)
    kpi_gap = frame.x(KPI_GAP)
    for idx, kpi in enumerate(config.kpis):
        x = frame.x(KPI_LEFT) + idx * (kpi_w + kpi_gap)
        slide.add(ShapeElement(x=x, y=top_y, w=kpi_w, h=top_h,
                               fill=WHITE, line_color=BORDER, line_width=1))
        slide.add(ShapeElement(x=x, y=top_y, w=kpi_w, h=top_h * 0.1, fill=theme.accent))
        slide.add(TextElement(
            text=str(kpi.value),
            x=x, y=top_y + top_h * 0.28, w=kpi_w, h=top_h * 0.3,
            font_size=36, bold=True, color=theme.accent, font_face=font, align='center',
        ))
        slide.add(TextElement(
            text=kpi.label,
            x=x, y=top_y + top_h * 0.68, w=kpi_w, h=top_h * 0.18,
            font_size=11, bold=True, color=TEXT_DARK, font_face=font, align='center',
        ))

    # Market insights panel
    market_y = frame.y(MARKET_TOP)
    market_h = frame.y(MARKET_HEIGHT)
    slide.add(ShapeElement(x=frame.x(0.03), y=market_y, w=frame.x(0.94), h=market_h,
                           fill=WHITE, line_color=BORDER, line_width=1))
    slide.add(ShapeElement(x=frame.x(0.03), y=market_y, w=frame.x(0.94), h=market_h * 0.08,
                           fill=theme.light))
    slide.add(TextElement(
        text=config.labels.market_title,
        x=frame.x(0.03), y=market_y, w=frame.x(0.94), h=market_h * 0.08,
        font_size=15, bold=True, color=TEXT_DARK, font_face=font, align='center',
    ))
    slide.add(TextElement(
        text=narrative,
        x=frame.x(0.05), y=market_y + market_h * 0.12, w=frame.x(0.90), h=market_h * 0.82,
        font_size=14, color=TEXT_DARK, font_face=font, valign='top', paragraph_spacing=12,
    ))

    return slide


def build_deck(
    cover: RasterPage,
    back: RasterPage,
    facts: PropertyFacts,
    narrative: str,
    config: Optional[ReportConfig] = None,
    outbound: Optional[ContactSource] = None,
    inbound: Optional[ContactSource] = None,
    verbose: bool = False
) -> Deck:
    """Assemble the full report deck.

    Args:
        cover: First document page; also sets canvas size and accent color
        back: Last document page
        facts: Property details for the summary card
        narrative: Market commentary, shown verbatim
        config: Report configuration
        outbound: Source of outbound contacts (default: sample tenants)
        inbound: Source of inbound contacts (default: sample tenants)
        verbose: Print progress

    Returns:
        Deck with cover, summary, contact tables and back slide

    Raises:
        LayoutOverflowError: If the table geometry fits no rows
    """
    config = config or ReportConfig()
    outbound = outbound or outbound_source()
    inbound = inbound or inbound_source()

    frame = SlideFrame.from_pixels(cover.width, cover.height, config.render.pixels_per_inch)
    theme = derive_theme(cover.dominant_color, config.theme)
    deck = Deck(width=frame.width, height=frame.height)

    if verbose:
        print(f"  Canvas: {frame.width:.2f} x {frame.height:.2f} in, "
              f"accent #{theme.accent}, light #{theme.light}")

    add_full_bleed_image(deck, cover, 'cover')
    build_summary_slide(deck, frame, theme, facts, narrative, config)

    labels = config.labels
    sections = [
        (labels.outbound_title, labels.outbound_subtitle, outbound, config.contacts.outbound_count),
        (labels.inbound_title, labels.inbound_subtitle, inbound, config.contacts.inbound_count),
    ]
    for title, subtitle, source, count in sections:
        contacts = source.fetch_contacts(count)
        slides = build_contact_slides(
            title, subtitle, contacts, theme.accent, frame, config.table, labels.font_face
        )
        deck.extend(slides)
        if verbose:
            print(f"  {title}: {len(contacts)} contacts on {len(slides)} slides")

    add_full_bleed_image(deck, back, 'back')

    return deck
