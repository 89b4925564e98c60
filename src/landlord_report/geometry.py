"""
Proportional slide geometry and the shared slide palette.

Layout code places everything as fractions of the slide; SlideFrame turns
those fractions into inches for a given canvas.
"""

# Fixed palette (hex, no #)
BACKGROUND = 'F8FAFC'
WHITE = 'FFFFFF'
BORDER = 'E2E8F0'
TABLE_BORDER = 'CBD5E1'
TEXT_DARK = '1E293B'
TEXT_BODY = '475569'
TEXT_MUTED = '64748B'


class SlideFrame:
    """Converts fractions of slide width/height into inches."""

    def __init__(self, width: float, height: float):
        if width <= 0 or height <= 0:
            raise ValueError(f"Slide dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def x(self, fraction: float) -> float:
        return self.width * fraction

    def y(self, fraction: float) -> float:
        return self.height * fraction

    @classmethod
    def from_pixels(cls, width_px: int, height_px: int, pixels_per_inch: float = 96) -> "SlideFrame":
        """Size the canvas so the deck matches a rendered page's aspect ratio."""
        return cls(width_px / pixels_per_inch, height_px / pixels_per_inch)
