"""Tests for contact table pagination."""

import math

import pytest

from landlord_report.config import TableGeometry
from landlord_report.contacts import outbound_source
from landlord_report.errors import LayoutOverflowError
from landlord_report.geometry import BACKGROUND, WHITE, SlideFrame
from landlord_report.models import ContactRecord, ShapeElement
from landlord_report.paginate import (
    build_contact_slides,
    footer_text,
    page_ranges,
    page_title,
    rows_per_slide,
)

# Exact binary fractions: 8in slide -> 5in available, 0.5in rows -> 9 data rows
EXACT = TableGeometry(header_reserve=0.25, row_height=0.0625, footer_reserve=0.125)
FRAME = SlideFrame(12, 8)


def contacts(n):
    return [
        ContactRecord(company=f'Company {i}', contact=f'Person {i}', date='1/1/25',
                      method='Call', status='Left VM')
        for i in range(n)
    ]


def table_rows(slide):
    """Cell texts of the data rows on a table slide."""
    texts = slide.texts()
    cells = texts[7:-1]
    return [cells[i:i + 5] for i in range(0, len(cells), 5)]


def test_rows_per_slide_reserves_header_row():
    assert rows_per_slide(8, EXACT) == 9


def test_rows_per_slide_is_scale_independent():
    assert rows_per_slide(8, EXACT) == rows_per_slide(80, EXACT)


def test_rows_per_slide_default_geometry():
    rows = rows_per_slide(11)
    assert rows in (18, 19)


def test_rows_per_slide_overflow():
    cramped = TableGeometry(header_reserve=0.25, row_height=0.5, footer_reserve=0.125)
    with pytest.raises(LayoutOverflowError):
        rows_per_slide(8, cramped)


def test_page_ranges_uneven_split():
    assert page_ranges(45, 20) == [(0, 20), (20, 40), (40, 45)]


def test_page_ranges_rejects_zero_capacity():
    with pytest.raises(LayoutOverflowError):
        page_ranges(10, 0)


@pytest.mark.parametrize('total', [0, 1, 9, 10, 19, 45, 101])
@pytest.mark.parametrize('max_rows', [1, 3, 9, 20])
def test_page_ranges_cover_list_exactly(total, max_rows):
    ranges = page_ranges(total, max_rows)
    assert len(ranges) == math.ceil(total / max_rows)
    covered = [i for start, end in ranges for i in range(start, end)]
    assert covered == list(range(total))
    assert all(0 < end - start <= max_rows for start, end in ranges)


def test_page_title_and_footer():
    assert page_title('OUTBOUND ACTIVITY', 0, 1) == 'OUTBOUND ACTIVITY'
    assert page_title('OUTBOUND ACTIVITY', 1, 3) == 'OUTBOUND ACTIVITY (2/3)'
    assert footer_text(0, 12, 12, 1) == 'Total Contacts: 12'
    assert footer_text(20, 40, 45, 3) == 'Showing 21-40 of 45 contacts'


def test_single_page_table():
    slides = build_contact_slides('INBOUND ACTIVITY', 'Tenants Who Contacted Us',
                                  contacts(5), 'C81E1E', FRAME, EXACT)
    assert len(slides) == 1
    texts = slides[0].texts()
    assert texts[0] == 'INBOUND ACTIVITY'
    assert texts[1] == 'Tenants Who Contacted Us'
    assert texts[2:7] == ['Company', 'Contact Name', 'Date', 'Method', 'Status']
    assert texts[-1] == 'Total Contacts: 5'


def test_multi_page_table_labels():
    slides = build_contact_slides('OUTBOUND ACTIVITY', 'Tenants We Contacted',
                                  contacts(20), 'C81E1E', FRAME, EXACT)
    assert len(slides) == 3
    assert [s.texts()[0] for s in slides] == [
        'OUTBOUND ACTIVITY (1/3)', 'OUTBOUND ACTIVITY (2/3)', 'OUTBOUND ACTIVITY (3/3)'
    ]
    assert [s.texts()[-1] for s in slides] == [
        'Showing 1-9 of 20 contacts',
        'Showing 10-18 of 20 contacts',
        'Showing 19-20 of 20 contacts',
    ]


def test_pages_reconstruct_contact_order():
    records = outbound_source().fetch_contacts(45)
    slides = build_contact_slides('OUTBOUND ACTIVITY', 'Tenants We Contacted',
                                  records, 'C81E1E', FRAME, EXACT)
    assert len(slides) == math.ceil(45 / 9)
    rows = [row for slide in slides for row in table_rows(slide)]
    assert rows == [r.cells() for r in records]


def test_row_shading_alternates_per_slide():
    slides = build_contact_slides('T', 'S', contacts(12), 'C81E1E', FRAME, EXACT)
    for slide in slides:
        shapes = [e for e in slide.elements if isinstance(e, ShapeElement)]
        row_fills = [s.fill for s in shapes[2:]]
        assert row_fills == [(WHITE, BACKGROUND)[i % 2] for i in range(len(row_fills))]


def test_header_band_uses_accent():
    slide = build_contact_slides('T', 'S', contacts(1), 'ABCDEF', FRAME, EXACT)[0]
    assert slide.elements[0].fill == 'ABCDEF'
    assert slide.background == BACKGROUND


def test_rows_stay_above_footer():
    slides = build_contact_slides('T', 'S', contacts(30), 'C81E1E', FRAME, EXACT)
    for slide in slides:
        shapes = [e for e in slide.elements if isinstance(e, ShapeElement)]
        assert max(s.y + s.h for s in shapes) <= FRAME.y(0.95) + 1e-9


def test_empty_list_gets_one_slide():
    slides = build_contact_slides('T', 'S', [], 'C81E1E', FRAME, EXACT)
    assert len(slides) == 1
    assert slides[0].texts()[-1] == 'Total Contacts: 0'
    assert table_rows(slides[0]) == []


def test_column_widths_fit_table():
    slide = build_contact_slides('T', 'S', contacts(1), 'C81E1E', FRAME, EXACT)[0]
    headers = slide.elements[4:9]
    table_right = FRAME.x(0.03) + FRAME.x(0.94)
    last = headers[-1]
    assert last.x + last.w <= table_right + 1e-9
