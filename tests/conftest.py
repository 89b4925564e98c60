"""Shared fakes and fixtures for report generation tests."""

import io

import pytest
from PIL import Image

from landlord_report.models import RasterPage


def make_image(width=816, height=1056, color=(200, 30, 30)):
    """Solid-color page image."""
    return Image.new('RGB', (width, height), color)


def make_page(width=816, height=1056, color='C81E1E'):
    """RasterPage backed by a real PNG."""
    buffer = io.BytesIO()
    Image.new('RGB', (width, height), '#' + color).save(buffer, format='PNG')
    return RasterPage(image_data=buffer.getvalue(), width=width, height=height, dominant_color=color)


class FakeEngine:
    """Rendering backend serving prepared images."""

    def __init__(self, images, text='', text_error=None, open_error=None):
        self.images = images
        self.text = text
        self.text_error = text_error
        self.open_error = open_error
        self.rendered = []
        self.closed = False

    def open(self, data):
        if self.open_error:
            raise self.open_error
        return 'doc'

    def page_count(self, doc):
        return len(self.images)

    def render(self, doc, index, scale):
        self.rendered.append((index, scale))
        return self.images[index]

    def page_text(self, doc, index):
        if self.text_error:
            raise self.text_error
        return self.text

    def close(self, doc):
        self.closed = True


class FakeExporter:
    """Exporter that records the deck instead of writing PowerPoint."""

    def __init__(self):
        self.decks = []

    def export(self, deck):
        self.decks.append(deck)
        return f'deck:{len(deck.slides)}'.encode()


class RecordingNarrative:
    """Narrative source that remembers what it was asked for."""

    def __init__(self, text='Leasing velocity remained strong.'):
        self.text = text
        self.calls = []

    def fetch(self, city, state, address):
        self.calls.append((city, state, address))
        return self.text


@pytest.fixture
def exporter():
    return FakeExporter()


@pytest.fixture
def cover_page():
    return make_page(1632, 1056, 'C81E1E')


@pytest.fixture
def back_page():
    return make_page(1632, 1056, '3264C8')
