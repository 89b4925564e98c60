"""
Configuration Schema for Landlord Report Generation

Pydantic models defining every tunable value of the report pipeline.
All defaults reproduce the stock Landlord Update Report.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator
import re


HEX_COLOR = re.compile(r'^[0-9A-F]{6}$')


class ThemeSettings(BaseModel):
    """Brand color derivation settings."""
    fallback_color: str = Field("2C5AA0", description="Accent used when no page color is available")
    lighten_percent: float = Field(45, ge=0, le=100, description="Mix toward white for the light variant")

    @field_validator('fallback_color', mode='before')
    @classmethod
    def normalize_hex_color(cls, v):
        """Normalize hex colors to uppercase without # prefix."""
        if isinstance(v, str):
            v = v.upper().lstrip('#')
            if not HEX_COLOR.match(v):
                raise ValueError(f"Not a 6-digit hex color: {v}")
        return v


class RenderSettings(BaseModel):
    """Page rasterization and color sampling settings."""
    scale: float = Field(2.0, gt=0, description="Upscaling factor relative to native page size")
    pixels_per_inch: float = Field(96, gt=0, description="Pixels per slide unit when sizing the deck")
    sample_stride: int = Field(10, ge=1, description="Sample every Nth pixel in raster order")
    white_threshold: int = Field(240, ge=0, le=255, description="Channels above this count as near-white")
    bucket_size: int = Field(10, ge=1, description="Quantization step for color buckets")


class TableGeometry(BaseModel):
    """Contact table geometry as fractions of slide height and table width."""
    header_reserve: float = Field(0.16, gt=0, lt=1, description="Height reserved above the table")
    row_height: float = Field(0.038, gt=0, lt=1, description="Height of one data row")
    footer_reserve: float = Field(0.08, ge=0, lt=1, description="Height reserved below the table")
    columns: Dict[str, float] = Field(
        default_factory=lambda: {
            'company': 0.35,
            'contact': 0.25,
            'date': 0.15,
            'method': 0.12,
            'status': 0.13,
        },
        description="Column width fractions of the table width"
    )

    @model_validator(mode='after')
    def check_columns(self):
        missing = {'company', 'contact', 'date', 'method', 'status'} - set(self.columns)
        if missing:
            raise ValueError(f"Missing column widths: {', '.join(sorted(missing))}")
        total = sum(self.columns.values())
        if total > 1.0 + 1e-9:
            raise ValueError(f"Column fractions sum to {total:.3f}, must not exceed 1.0")
        return self


class NarrativeSettings(BaseModel):
    """Market narrative collaborator settings."""
    endpoint: Optional[str] = Field(None, description="URL accepting {city, state, address} and returning {report}")
    timeout: float = Field(60, gt=0, description="Request timeout in seconds")
    unavailable_text: str = Field(
        "Market report could not be generated. Please try again.",
        description="Shown when the collaborator answers with a non-success status"
    )
    failed_text: str = Field(
        "Market report generation failed. Please check your API configuration.",
        description="Shown when the collaborator cannot be reached"
    )


class ContactSettings(BaseModel):
    """Sizes of the generated contact lists."""
    outbound_count: int = Field(45, ge=0)
    inbound_count: int = Field(32, ge=0)


class KpiCard(BaseModel):
    """One card of the KPI row."""
    label: str
    value: int


DEFAULT_KPIS = [
    KpiCard(label='Outbound', value=45),
    KpiCard(label='Inbound', value=15),
    KpiCard(label='Tours', value=12),
    KpiCard(label='Prospects', value=28),
    KpiCard(label='Proposals', value=7),
    KpiCard(label='Follow-ups', value=34),
]


class ReportLabels(BaseModel):
    """Fixed headings and names used in the deck."""
    report_title: str = "LEASING ACTIVITY REPORT"
    reporting_period: str = "Reporting Period: January 1 - 14, 2025"
    market_title: str = "LOCAL MARKET INSIGHTS - LAST 60 DAYS"
    outbound_title: str = "OUTBOUND ACTIVITY"
    outbound_subtitle: str = "Tenants We Contacted"
    inbound_title: str = "INBOUND ACTIVITY"
    inbound_subtitle: str = "Tenants Who Contacted Us"
    output_filename: str = "Landlord_Update_Report.pptx"
    font_face: str = "Calibri"


class ReportConfig(BaseModel):
    """Complete configuration for report generation."""

    version: str = Field("1.0", description="Configuration schema version")

    theme: ThemeSettings = Field(default_factory=ThemeSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)
    table: TableGeometry = Field(default_factory=TableGeometry)
    narrative: NarrativeSettings = Field(default_factory=NarrativeSettings)
    contacts: ContactSettings = Field(default_factory=ContactSettings)
    labels: ReportLabels = Field(default_factory=ReportLabels)

    kpis: List[KpiCard] = Field(
        default_factory=lambda: [k.model_copy() for k in DEFAULT_KPIS],
        description="KPI cards shown on the activity summary slide"
    )

    @field_validator('kpis')
    @classmethod
    def require_kpis(cls, v):
        if not v:
            raise ValueError("At least one KPI card is required")
        return v
