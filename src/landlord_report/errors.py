"""
Error Types for Landlord Report Generation

Every failure the pipeline can surface derives from ReportError so a caller
can catch one type and show a single message.
"""


class ReportError(Exception):
    """Base class for report generation failures."""


class InputValidationError(ReportError):
    """Missing document, blank address, or unsupported file type."""


class DependencyLoadError(ReportError, ImportError):
    """A rendering or export library could not be loaded."""


class DocumentParseError(ReportError):
    """The source document could not be opened or rendered."""


class NarrativeFetchError(ReportError):
    """The market narrative could not be retrieved.

    Never escapes the pipeline: ``fallback`` is the text shown instead.
    """

    def __init__(self, message: str, fallback: str):
        super().__init__(message)
        self.fallback = fallback


class LayoutOverflowError(ReportError):
    """Table geometry leaves no room for a single data row."""
