"""Loading and cleaning of NWIS daily-values exports.

Retrieval itself happens elsewhere (``dataRetrieval``, the NWIS web page, a colleague's
CSV). This module only reads the exported table, normalises the column names and keeps
the rows that are allowed into the analysis.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from flood_analysis.config import load_analysis_settings
from flood_analysis.logging_config import get_logger
from flood_analysis.models import Observation

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("site_no", "date", "discharge_cfs", "quality_cd")


def load_daily_values(path: str | Path) -> pd.DataFrame:
    """Read a daily-values export from CSV or parquet.

    ``site_no`` is read as text so leading zeros in USGS site numbers survive.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Daily values file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        frame = pd.read_csv(path, dtype={"site_no": str})
    elif suffix in (".parquet", ".pq"):
        frame = pd.read_parquet(path)
    else:
        raise ValueError(f"Unsupported daily values format '{suffix}' for {path}")

    logger.info("Loaded daily values", path=str(path), rows=len(frame))
    return frame


def clean_daily_values(
    frame: pd.DataFrame,
    site_no: str,
    column_map: Optional[dict[str, str]] = None,
    accepted_codes: Optional[Iterable[str]] = None,
) -> pd.DataFrame:
    """Rename, filter and annotate a raw daily-values table for one station.

    Args:
        frame: Raw export with NWIS column names.
        site_no: USGS site number to keep; other stations are dropped.
        column_map: Raw -> canonical column names. Defaults to ``config/analysis.yaml``.
        accepted_codes: Quality codes to keep. Defaults to ``config/analysis.yaml``.

    Returns:
        DataFrame with ``site_no``, ``date``, ``discharge_cfs``, ``quality_cd`` and
        ``year``, sorted by date.
    """
    if column_map is None or accepted_codes is None:
        settings = load_analysis_settings()
        column_map = column_map if column_map is not None else settings["column_map"]
        if accepted_codes is None:
            accepted_codes = settings["accepted_quality_codes"]
    accepted = {str(code) for code in accepted_codes}

    renamed = frame.rename(columns={k: v for k, v in column_map.items() if k in frame.columns})
    missing = [col for col in REQUIRED_COLUMNS if col not in renamed.columns]
    if missing:
        raise ValueError(f"Daily values missing required columns: {missing}")

    cleaned = renamed.loc[:, list(REQUIRED_COLUMNS)].copy()
    # Site numbers may arrive as integers when a CSV was re-saved without quoting.
    cleaned["site_no"] = cleaned["site_no"].astype(str).str.zfill(len(site_no))
    cleaned = cleaned[cleaned["site_no"] == site_no].copy()

    cleaned["discharge_cfs"] = pd.to_numeric(cleaned["discharge_cfs"], errors="coerce")
    n_before = len(cleaned)
    cleaned = cleaned.dropna(subset=["discharge_cfs"])
    if (cleaned["discharge_cfs"] < 0).any():
        raise ValueError(f"Negative discharge values found for site {site_no}")

    cleaned["quality_cd"] = cleaned["quality_cd"].astype(str).str.strip()
    cleaned = cleaned[cleaned["quality_cd"].isin(accepted)].copy()

    cleaned["date"] = pd.to_datetime(cleaned["date"])
    cleaned["year"] = cleaned["date"].dt.year
    cleaned = cleaned.sort_values("date").reset_index(drop=True)

    logger.info(
        "Cleaned daily values",
        site_no=site_no,
        kept=len(cleaned),
        dropped=n_before - len(cleaned),
        accepted_codes=sorted(accepted),
    )
    return cleaned


def frame_to_observations(frame: pd.DataFrame) -> list[Observation]:
    """Convert a cleaned daily-values frame into immutable records."""
    return [
        Observation(
            station_id=str(row.site_no),
            timestamp=pd.Timestamp(row.date).date(),
            discharge=float(row.discharge_cfs),
            quality_code=str(row.quality_cd),
        )
        for row in frame.itertuples(index=False)
    ]
