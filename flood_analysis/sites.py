"""Lookup of configured stream gauges.

Gauges are listed in ``config/sites.yaml`` under a short ID (``BOULDER``) and carry the
USGS site number used in daily-values exports. Either one identifies a gauge.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from flood_analysis.config import load_sites

# USGS surface-water site numbers have at least eight digits.
USGS_SITE_NO_WIDTH = 8


def normalize_site_no(site_no: str | int) -> str:
    """Site number as text with the leading zeros a numeric CSV column loses."""
    return str(site_no).strip().zfill(USGS_SITE_NO_WIDTH)


def get_site(site: str | int, path: Optional[Path] = None) -> Dict:
    """Return gauge metadata by config ID or USGS site number.

    ``get_site("BOULDER")``, ``get_site("06730500")`` and ``get_site(6730500)`` all
    return the Boulder Creek gauge.
    """
    gauges = list_sites(path)
    key = str(site).strip()
    for gauge in gauges:
        if gauge["id"] == key:
            return gauge
    if key.isdigit():
        site_no = normalize_site_no(key)
        for gauge in gauges:
            if normalize_site_no(gauge["site_no"]) == site_no:
                return gauge
    known = ", ".join(f"{g['id']} ({g['site_no']})" for g in gauges)
    raise KeyError(f"Gauge {site!r} not found in config/sites.yaml; known gauges: {known}")


def list_sites(path: Optional[Path] = None) -> list[Dict]:
    return load_sites(path)["sites"]
