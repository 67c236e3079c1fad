"""Annual maximum discharge computation."""

from __future__ import annotations

from typing import Iterable, Optional, Union

import pandas as pd

from flood_analysis.config import load_analysis_settings
from flood_analysis.models import AnnualMaximum, Observation


def observations_to_frame(observations: Iterable[Observation]) -> pd.DataFrame:
    """Lay out ``Observation`` records the same way as a cleaned daily-values frame."""
    rows = [
        {
            "site_no": obs.station_id,
            "date": pd.Timestamp(obs.timestamp),
            "discharge_cfs": float(obs.discharge),
            "quality_cd": obs.quality_code,
        }
        for obs in observations
    ]
    frame = pd.DataFrame(rows, columns=["site_no", "date", "discharge_cfs", "quality_cd"])
    frame["date"] = pd.to_datetime(frame["date"])
    frame["year"] = frame["date"].dt.year
    return frame


def compute_annual_maxima(
    observations: Union[pd.DataFrame, Iterable[Observation]],
    accepted_codes: Optional[Iterable[str]] = None,
) -> pd.Series:
    """Reduce one station's daily values to the largest accepted value per year.

    Args:
        observations: Cleaned daily-values frame or ``Observation`` records.
        accepted_codes: Quality codes that participate. Defaults to ``config/analysis.yaml``.

    Returns:
        Series indexed by year with the annual maximum discharge (cfs). Years without a
        single accepted observation are absent, not zero.
    """
    if isinstance(observations, pd.DataFrame):
        frame = observations
    else:
        frame = observations_to_frame(observations)

    if accepted_codes is None:
        accepted_codes = load_analysis_settings()["accepted_quality_codes"]
    accepted = {str(code) for code in accepted_codes}

    stations = frame["site_no"].dropna().unique()
    if len(stations) > 1:
        raise ValueError(f"Annual maxima need a single station, got {sorted(stations)}")

    usable = frame[frame["quality_cd"].astype(str).str.strip().isin(accepted)]
    usable = usable.dropna(subset=["discharge_cfs"])
    if "year" in usable.columns:
        years = usable["year"]
    else:
        years = pd.to_datetime(usable["date"]).dt.year

    annual_max = usable["discharge_cfs"].groupby(years).max().astype(float)
    annual_max.index = annual_max.index.astype(int)
    annual_max.index.name = "year"
    annual_max.name = "annual_max_cfs"
    return annual_max


def annual_maxima_records(annual_max: pd.Series) -> list[AnnualMaximum]:
    return [
        AnnualMaximum(year=int(year), discharge=float(value))
        for year, value in annual_max.items()
    ]
