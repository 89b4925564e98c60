"""
Color Utilities

Dominant-color sampling from rendered pages and the brand theme derived
from it.
"""

from typing import Dict, Optional, Tuple

from PIL import Image

from .config import RenderSettings, ThemeSettings
from .models import Theme

FALLBACK_COLOR = '2C5AA0'


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert an RGB triple to an uppercase 6-digit hex string."""
    return f'{r:02X}{g:02X}{b:02X}'


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Parse a 6-digit hex string (with or without #)."""
    value = int(hex_color.lstrip('#'), 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def _quantize(channel: int, step: int) -> int:
    # Round half up, then keep the bucket inside the channel range
    return min(255, int(channel / step + 0.5) * step)


def sample_dominant_color(
    image: Image.Image,
    settings: Optional[RenderSettings] = None,
    fallback: str = FALLBACK_COLOR
) -> str:
    """Return the most frequent non-white color bucket of an image.

    Every ``sample_stride``-th pixel in raster order is considered. Pixels
    whose three channels all exceed ``white_threshold`` are skipped, the rest
    are bucketed by rounding each channel to ``bucket_size``. On equal counts
    the bucket seen first wins.

    Args:
        image: Rendered page
        settings: Sampling parameters (defaults: stride 10, threshold 240, bucket 10)
        fallback: Color returned when no non-white pixel is sampled

    Returns:
        Uppercase 6-digit hex color
    """
    settings = settings or RenderSettings()
    step = settings.bucket_size
    threshold = settings.white_threshold

    data = image.convert('RGB').tobytes()
    stride = settings.sample_stride * 3

    counts: Dict[Tuple[int, int, int], int] = {}
    for i in range(0, len(data) - 2, stride):
        r, g, b = data[i], data[i + 1], data[i + 2]
        if r > threshold and g > threshold and b > threshold:
            continue
        key = (_quantize(r, step), _quantize(g, step), _quantize(b, step))
        counts[key] = counts.get(key, 0) + 1

    best = None
    best_count = 0
    for key, count in counts.items():
        if count > best_count:
            best, best_count = key, count

    if best is None:
        return fallback
    return rgb_to_hex(*best)


def lighten_color(hex_color: str, percent: float) -> str:
    """Blend a color toward white.

    Each channel becomes ``c + round((255 - c) * percent / 100)``, capped at 255.
    """
    channels = []
    for c in hex_to_rgb(hex_color):
        mixed = c + int((255 - c) * percent / 100 + 0.5)
        channels.append(min(255, mixed))
    return rgb_to_hex(*channels)


def derive_theme(accent: Optional[str], settings: Optional[ThemeSettings] = None) -> Theme:
    """Build the deck theme from a sampled accent color."""
    settings = settings or ThemeSettings()
    base = (accent or settings.fallback_color).upper().lstrip('#')
    return Theme(accent=base, light=lighten_color(base, settings.lighten_percent))
