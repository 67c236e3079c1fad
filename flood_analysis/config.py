"""Configuration helpers for loading YAML-driven settings.

All config files live under the repository's ``config/`` directory by default. The helpers
return plain Python objects so downstream modules stay dependency-light.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


REPO_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_DIR = REPO_ROOT / "config"

_ANALYSIS_KEYS = ("accepted_quality_codes", "column_map", "min_years", "return_periods")


def _load_yaml(path: Path) -> Any:
    """Load a YAML file and return its contents."""
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def load_sites(config_path: Path | None = None) -> dict[str, Any]:
    """Load gauge metadata (USGS site numbers, record period, flood event) from YAML."""
    path = config_path or DEFAULT_CONFIG_DIR / "sites.yaml"
    data = _load_yaml(path)
    if not isinstance(data, dict) or "sites" not in data:
        raise ValueError(f"sites config missing expected structure: {path}")
    return data


def load_analysis_settings(config_path: Path | None = None) -> dict[str, Any]:
    """Load quality codes, NWIS column mapping and return periods."""
    path = config_path or DEFAULT_CONFIG_DIR / "analysis.yaml"
    data = _load_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"analysis config missing expected structure: {path}")
    missing = [key for key in _ANALYSIS_KEYS if key not in data]
    if missing:
        raise ValueError(f"analysis config missing keys {missing}: {path}")
    data.setdefault("default_thresholds_cfs", [])
    return data


def dump_json(data: Any) -> str:
    """Pretty-print helper used in scripts and logging."""
    return json.dumps(data, indent=2, sort_keys=True, default=str)
