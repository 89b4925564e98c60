"""
Landlord Report

Turns a property offering memorandum into a branded leasing activity deck:
cover and back pages from the document, extracted property facts, market
insights and paginated tenant contact tables.
"""

__version__ = "0.1.0"

from .config import (
    ReportConfig,
    load_config,
    save_config,
    default_config,
)

from .errors import (
    ReportError,
    InputValidationError,
    DependencyLoadError,
    DocumentParseError,
    NarrativeFetchError,
    LayoutOverflowError,
)

from .models import (
    RasterPage,
    PropertyFacts,
    ContactRecord,
    Deck,
    Slide,
    Theme,
)

from .colors import (
    sample_dominant_color,
    lighten_color,
    derive_theme,
)

from .extract import (
    extract_property_facts,
)

from .paginate import (
    rows_per_slide,
    page_ranges,
    build_contact_slides,
)

from .layout import (
    build_deck,
)

from .pipeline import (
    ReportRequest,
    ReportResult,
    generate_report,
    write_report,
)

__all__ = [
    # Config
    'ReportConfig',
    'load_config',
    'save_config',
    'default_config',
    # Errors
    'ReportError',
    'InputValidationError',
    'DependencyLoadError',
    'DocumentParseError',
    'NarrativeFetchError',
    'LayoutOverflowError',
    # Models
    'RasterPage',
    'PropertyFacts',
    'ContactRecord',
    'Deck',
    'Slide',
    'Theme',
    # Colors
    'sample_dominant_color',
    'lighten_color',
    'derive_theme',
    # Extraction
    'extract_property_facts',
    # Layout
    'rows_per_slide',
    'page_ranges',
    'build_contact_slides',
    'build_deck',
    # Pipeline
    'ReportRequest',
    'ReportResult',
    'generate_report',
    'write_report',
]
