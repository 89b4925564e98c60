"""
Contact Table Pagination

Splits a contact list into as many table slides as the slide height allows,
keeping the original order and labelling each page.
"""

import math
from typing import List, Optional, Sequence, Tuple

from .config import TableGeometry
from .errors import LayoutOverflowError
from .geometry import (
    BACKGROUND,
    BORDER,
    TABLE_BORDER,
    TEXT_BODY,
    TEXT_DARK,
    TEXT_MUTED,
    WHITE,
    SlideFrame,
)
from .models import ContactRecord, ShapeElement, Slide, TextElement

COLUMN_HEADERS = {
    'company': 'Company',
    'contact': 'Contact Name',
    'date': 'Date',
    'method': 'Method',
    'status': 'Status',
}
COLUMN_ORDER = ['company', 'contact', 'date', 'method', 'status']
ROW_SHADES = (WHITE, BACKGROUND)
HEADER_ROW_SCALE = 1.15


def rows_per_slide(slide_height: float, geometry: Optional[TableGeometry] = None) -> int:
    """Number of data rows that fit on one table slide.

    One row's worth of height is held back for the table's header row.

    Raises:
        LayoutOverflowError: If not even one data row fits
    """
    geometry = geometry or TableGeometry()
    row_height = slide_height * geometry.row_height
    available = slide_height - slide_height * geometry.header_reserve - slide_height * geometry.footer_reserve
    max_rows = math.floor(available / row_height) - 1
    if max_rows <= 0:
        raise LayoutOverflowError(
            f"Table rows of {geometry.row_height:.3f} slide height leave room for {max_rows} rows"
        )
    return max_rows


def page_ranges(total: int, max_rows: int) -> List[Tuple[int, int]]:
    """Half-open [start, end) index ranges covering ``total`` records in order."""
    if max_rows < 1:
        raise LayoutOverflowError(f"Row capacity must be at least 1, got {max_rows}")
    pages = math.ceil(total / max_rows)
    return [(k * max_rows, min((k + 1) * max_rows, total)) for k in range(pages)]


def page_title(title: str, index: int, total_pages: int) -> str:
    if total_pages > 1:
        return f'{title} ({index + 1}/{total_pages})'
    return title


def footer_text(start: int, end: int, total: int, total_pages: int) -> str:
    if total_pages > 1:
        return f'Showing {start + 1}-{end} of {total} contacts'
    return f'Total Contacts: {total}'


def build_contact_slides(
    title: str,
    subtitle: str,
    contacts: Sequence[ContactRecord],
    accent: str,
    frame: SlideFrame,
    geometry: Optional[TableGeometry] = None,
    font_face: str = 'Calibri'
) -> List[Slide]:
    """Lay out a contact list as one or more table slides.

    An empty list still yields a single slide showing "Total Contacts: 0".

    Args:
        title: Slide heading, suffixed with (page/pages) when paginated
        subtitle: Line under the heading
        contacts: Records in display order
        accent: Header band color
        frame: Slide canvas
        geometry: Table proportions
        font_face: Font for all table text

    Returns:
        Slides in page order
    """
    geometry = geometry or TableGeometry()
    max_rows = rows_per_slide(frame.height, geometry)
    ranges = page_ranges(len(contacts), max_rows) or [(0, 0)]
    total_pages = len(ranges)

    table_x = frame.x(0.03)
    table_y = frame.y(geometry.header_reserve)
    table_w = frame.x(0.94)
    row_h = frame.y(geometry.row_height)
    header_h = row_h * HEADER_ROW_SCALE
    widths = [table_w * geometry.columns[col] for col in COLUMN_ORDER]

    slides = []
    for index, (start, end) in enumerate(ranges):
        slide = Slide(name=f'{title.lower()} {index + 1}', background=BACKGROUND)

        slide.add(ShapeElement(x=0, y=0, w=frame.width, h=frame.y(0.11), fill=accent))
        slide.add(TextElement(
            text=page_title(title, index, total_pages),
            x=frame.x(0.03), y=frame.y(0.023), w=frame.x(0.94), h=frame.y(0.045),
            font_size=32, bold=True, color=WHITE, font_face=font_face,
        ))
        slide.add(TextElement(
            text=subtitle,
            x=frame.x(0.03), y=frame.y(0.07), w=frame.x(0.94), h=frame.y(0.03),
            font_size=14, color=WHITE, font_face=font_face,
        ))

        # Header row
        slide.add(ShapeElement(
            x=table_x, y=table_y, w=table_w, h=header_h,
            fill=WHITE, line_color=TABLE_BORDER, line_width=0.5,
        ))
        x = table_x
        for col, width in zip(COLUMN_ORDER, widths):
            pad = table_w * 0.015 if col == 'company' else 0
            slide.add(TextElement(
                text=COLUMN_HEADERS[col],
                x=x + pad, y=table_y, w=width, h=header_h,
                font_size=13, bold=True, color=TEXT_DARK, font_face=font_face,
            ))
            x += width

        for position, record in enumerate(contacts[start:end]):
            y = table_y + header_h + position * row_h
            slide.add(ShapeElement(
                x=table_x, y=y, w=table_w, h=row_h,
                fill=ROW_SHADES[position % 2], line_color=BORDER, line_width=0.3,
            ))
            x = table_x
            for i, (value, width) in enumerate(zip(record.cells(), widths)):
                first = i == 0
                slide.add(TextElement(
                    text=value,
                    x=x + (table_w * 0.015 if first else 0),
                    y=y,
                    w=width - (table_w * 0.02 if first else table_w * 0.01),
                    h=row_h,
                    font_size=11 if COLUMN_ORDER[i] == 'status' else 12,
                    color=TEXT_DARK if first else TEXT_BODY,
                    font_face=font_face,
                ))
                x += width

        slide.add(TextElement(
            text=footer_text(start, end, len(contacts), total_pages),
            x=table_x, y=frame.y(0.95), w=table_w, h=frame.y(0.03),
            font_size=11, bold=True, color=TEXT_MUTED, font_face=font_face, align='right',
        ))
        slides.append(slide)

    return slides
