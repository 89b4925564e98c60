"""
Report Pipeline

Turns an offering document and a property address into a finished
Landlord Update Report:

    validate -> rasterize -> extract facts -> narrative -> layout -> export

Rendering, export, narrative and contact collaborators are passed in, so
each invocation is independent and fully testable with fakes. Fatal errors
propagate; nothing is returned unless the whole report was built.
"""

from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import ReportConfig
from .contacts import ContactSource
from .errors import InputValidationError
from .extract import city_from_address, extract_property_facts, state_from_address
from .layout import build_deck
from .models import Deck, PropertyFacts
from .narrative import HttpNarrativeSource, NarrativeSource, fetch_narrative
from .rasterize import rasterize_document

ACCEPTED_MIME_TYPES = ('application/pdf',)


class ReportRequest(BaseModel):
    """One report generation request."""
    model_config = ConfigDict(frozen=True)

    document: bytes = Field(repr=False)
    address: str
    mime_type: Optional[str] = 'application/pdf'
    filename: Optional[str] = None


class ReportResult(BaseModel):
    """A generated report and the inputs that shaped it."""
    model_config = ConfigDict(frozen=True)

    filename: str
    content: bytes = Field(repr=False)
    deck: Deck
    facts: PropertyFacts
    narrative: str


def validate_request(request: ReportRequest) -> None:
    """Reject requests the pipeline cannot run on.

    Raises:
        InputValidationError: Missing document, blank address, or non-PDF type
    """
    if not request.document:
        raise InputValidationError("Please upload a file first")
    if not request.address or not request.address.strip():
        raise InputValidationError("Please enter the property address")
    if request.mime_type not in ACCEPTED_MIME_TYPES:
        raise InputValidationError(
            f"Please upload a PDF file (got {request.mime_type or 'unknown type'})"
        )


def generate_report(
    request: ReportRequest,
    engine: Any,
    exporter: Any,
    narrative_source: Optional[NarrativeSource] = None,
    outbound: Optional[ContactSource] = None,
    inbound: Optional[ContactSource] = None,
    config: Optional[ReportConfig] = None,
    verbose: bool = False
) -> ReportResult:
    """Generate a Landlord Update Report.

    Args:
        request: Document bytes and property address
        engine: Page rendering backend (PdfEngine or compatible)
        exporter: Deck exporter (PptxExporter or compatible)
        narrative_source: Market commentary provider; defaults to the
            HTTP service named in config.narrative
        outbound: Outbound contact source
        inbound: Inbound contact source
        config: Report configuration
        verbose: Print progress

    Returns:
        ReportResult with the exported file contents

    Raises:
        InputValidationError: If the request is incomplete
        DocumentParseError: If the document cannot be read
        LayoutOverflowError: If the contact table cannot fit a row
    """
    config = config or ReportConfig()
    validate_request(request)

    if verbose:
        print(f"Reading: {request.filename or 'document'} ({len(request.document)} bytes)")

    pages = rasterize_document(
        request.document, engine, config.render, config.theme.fallback_color, verbose=verbose
    )

    address = request.address.strip()
    facts = extract_property_facts(pages.text).with_address(address)
    if verbose:
        print(f"Property: {facts.name} | {facts.size_label} | {facts.location_label}")

    city = facts.city or city_from_address(address)
    state = facts.state or state_from_address(address)

    if narrative_source is None:
        narrative_source = HttpNarrativeSource(config.narrative)
    if verbose:
        print(f"Requesting market report for: {city}, {state}")
    narrative = fetch_narrative(
        narrative_source, city, state, address,
        verbose=verbose, failed_text=config.narrative.failed_text,
    )

    deck = build_deck(
        pages.first_page,
        pages.last_page,
        facts,
        narrative,
        config=config,
        outbound=outbound,
        inbound=inbound,
        verbose=verbose,
    )

    content = exporter.export(deck)
    if verbose:
        print(f"Built {len(deck.slides)} slides ({len(content)} bytes)")

    return ReportResult(
        filename=config.labels.output_filename,
        content=content,
        deck=deck,
        facts=facts,
        narrative=narrative,
    )


def write_report(result: ReportResult, output_dir: Union[str, Path]) -> Path:
    """Write a generated report into a directory.

    Returns:
        Path of the written file
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / result.filename
    with open(output_path, 'wb') as f:
        f.write(result.content)
    return output_path
