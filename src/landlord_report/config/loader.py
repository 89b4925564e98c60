"""
Configuration Loader for Landlord Report Generation

Loads report configuration from YAML or JSON files.
"""

import json
from pathlib import Path
from typing import Union

import yaml

from .schema import ReportConfig


def load_config(config_path: Union[str, Path]) -> ReportConfig:
    """Load report configuration from YAML or JSON file.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        ReportConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config format is unsupported or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}. Use .yaml, .yml, or .json")

    return parse_config(data or {})


def parse_config(data: dict) -> ReportConfig:
    """Parse configuration data into ReportConfig model.

    Accepts the KPI row either as a list of {label, value} objects or as a
    plain {label: value} mapping.

    Args:
        data: Raw configuration dictionary

    Returns:
        ReportConfig instance
    """
    data = dict(data)

    kpis = data.get('kpis')
    if isinstance(kpis, dict):
        data['kpis'] = [{'label': label, 'value': value} for label, value in kpis.items()]

    # Flat "theme: 1F4E79" shorthand
    if isinstance(data.get('theme'), str):
        data['theme'] = {'fallback_color': data['theme']}

    return ReportConfig(**data)


def save_config(config: ReportConfig, output_path: Union[str, Path]) -> None:
    """Save report configuration to YAML or JSON file.

    Args:
        config: ReportConfig instance to save
        output_path: Path for output file
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()

    data = config.model_dump(exclude_none=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        elif suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")


def default_config() -> ReportConfig:
    """Return the stock configuration."""
    return ReportConfig()
