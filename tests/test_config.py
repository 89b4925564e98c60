"""Tests for configuration loading and schema."""

import json
import pytest
from pathlib import Path
import tempfile
import yaml
from pydantic import ValidationError

from landlord_report.config import (
    ReportConfig,
    ThemeSettings,
    TableGeometry,
    load_config,
    save_config,
    parse_config,
    default_config,
)


def test_theme_color_normalization():
    """Test that colors are normalized to uppercase without #."""
    theme = ThemeSettings(fallback_color="#1f4e79")
    assert theme.fallback_color == "1F4E79"


def test_theme_rejects_bad_color():
    with pytest.raises(ValidationError):
        ThemeSettings(fallback_color="blue")


def test_defaults_match_stock_report():
    """Test ReportConfig default values."""
    config = default_config()
    assert config.theme.fallback_color == "2C5AA0"
    assert config.theme.lighten_percent == 45
    assert config.render.scale == 2.0
    assert config.render.pixels_per_inch == 96
    assert config.contacts.outbound_count == 45
    assert config.contacts.inbound_count == 32
    assert [k.label for k in config.kpis] == [
        'Outbound', 'Inbound', 'Tours', 'Prospects', 'Proposals', 'Follow-ups'
    ]
    assert [k.value for k in config.kpis] == [45, 15, 12, 28, 7, 34]
    assert config.labels.output_filename == "Landlord_Update_Report.pptx"


def test_column_fractions_must_fit_table():
    with pytest.raises(ValidationError):
        TableGeometry(columns={'company': 0.5, 'contact': 0.3, 'date': 0.15, 'method': 0.12, 'status': 0.13})


def test_column_fractions_must_cover_all_columns():
    with pytest.raises(ValidationError):
        TableGeometry(columns={'company': 0.5, 'contact': 0.3})


def test_default_columns_sum_to_table_width():
    assert sum(TableGeometry().columns.values()) == pytest.approx(1.0)


def test_parse_config_kpi_mapping():
    """Test the {label: value} shorthand for KPI cards."""
    config = parse_config({'kpis': {'Calls': 10, 'Tours': 3}})
    assert [(k.label, k.value) for k in config.kpis] == [('Calls', 10), ('Tours', 3)]


def test_parse_config_theme_shorthand():
    config = parse_config({'theme': '#112233'})
    assert config.theme.fallback_color == '112233'


def test_load_config_yaml():
    """Test loading config from YAML file."""
    config_data = {
        "version": "1.0",
        "theme": {"fallback_color": "0066cc", "lighten_percent": 30},
        "contacts": {"outbound_count": 10, "inbound_count": 5},
        "narrative": {"endpoint": "http://localhost:3000/api/generate-report"},
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        temp_path = f.name

    try:
        config = load_config(temp_path)
        assert config.theme.fallback_color == "0066CC"
        assert config.theme.lighten_percent == 30
        assert config.contacts.outbound_count == 10
        assert config.narrative.endpoint == "http://localhost:3000/api/generate-report"
        assert config.table.row_height == 0.038
    finally:
        Path(temp_path).unlink()


def test_load_config_json():
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        json.dump({"labels": {"reporting_period": "Reporting Period: March 1 - 14"}}, f)
        temp_path = f.name

    try:
        config = load_config(temp_path)
        assert config.labels.reporting_period == "Reporting Period: March 1 - 14"
    finally:
        Path(temp_path).unlink()


def test_load_config_missing_file():
    with pytest.raises(FileNotFoundError):
        load_config("/nonexistent/report.yaml")


def test_load_config_unsupported_format():
    with tempfile.NamedTemporaryFile(mode='w', suffix='.toml', delete=False) as f:
        f.write("x = 1")
        temp_path = f.name

    try:
        with pytest.raises(ValueError):
            load_config(temp_path)
    finally:
        Path(temp_path).unlink()


def test_save_and_load_config():
    """Test round-trip save and load."""
    config = ReportConfig(theme=ThemeSettings(fallback_color="AA3300"))

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        temp_path = f.name

    try:
        save_config(config, temp_path)
        loaded = load_config(temp_path)
        assert loaded.theme.fallback_color == "AA3300"
        assert loaded.kpis == config.kpis
    finally:
        Path(temp_path).unlink()
