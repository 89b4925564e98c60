"""Configuration module for Landlord Report generation."""

from .schema import (
    ReportConfig,
    ThemeSettings,
    RenderSettings,
    TableGeometry,
    NarrativeSettings,
    ContactSettings,
    ReportLabels,
    KpiCard,
    DEFAULT_KPIS,
)
from .loader import load_config, save_config, parse_config, default_config

__all__ = [
    'ReportConfig',
    'ThemeSettings',
    'RenderSettings',
    'TableGeometry',
    'NarrativeSettings',
    'ContactSettings',
    'ReportLabels',
    'KpiCard',
    'DEFAULT_KPIS',
    'load_config',
    'save_config',
    'parse_config',
    'default_config',
]
