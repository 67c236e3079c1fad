"""Shared pytest fixtures for flood frequency tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402
from scipy import stats  # noqa: E402

from flood_analysis.models import GEVParameters  # noqa: E402

BOULDER_SITE_NO = "06730500"
EVENT_PEAK_CFS = 3680.0


@pytest.fixture
def five_year_maxima() -> list[float]:
    """Small annual maxima example with a 2013-sized flood as the largest value."""
    return [800.0, 1200.0, 1600.0, 2000.0, 3680.0]


@pytest.fixture
def example_params() -> GEVParameters:
    """Heavy-tailed GEV similar in magnitude to Boulder Creek annual maxima."""
    return GEVParameters(location=1000.0, scale=400.0, shape=0.1)


@pytest.fixture
def synthetic_peaks() -> pd.Series:
    """Annual peaks 1986-2012 below the event, plus the 2013 event peak."""
    years = np.arange(1986, 2013)
    peaks = stats.genextreme.rvs(c=-0.1, loc=1000, scale=400, size=years.size, random_state=7)
    peaks = np.clip(peaks, 300.0, 3000.0)
    series = pd.Series(peaks, index=years, name="annual_max_cfs")
    series.loc[2013] = EVENT_PEAK_CFS
    series.index.name = "year"
    return series


@pytest.fixture
def raw_daily_values(synthetic_peaks: pd.Series) -> pd.DataFrame:
    """Daily values laid out like a ``dataRetrieval::readNWISdv`` export.

    Each year holds low flows, one approved peak, and one larger provisional value that
    must never reach the annual maxima. A second station's rows are mixed in.
    """
    rng = np.random.default_rng(11)
    frames = []
    for year, peak in synthetic_peaks.items():
        dates = pd.date_range(f"{year}-01-01", f"{year}-12-31", freq="D")
        flows = rng.uniform(20.0, 200.0, size=dates.size)
        codes = np.array(["A"] * dates.size, dtype=object)
        flows[160] = peak
        flows[200] = peak * 2
        codes[200] = "P"
        frames.append(
            pd.DataFrame(
                {
                    "agency_cd": "USGS",
                    "site_no": BOULDER_SITE_NO,
                    "Date": dates.strftime("%Y-%m-%d"),
                    "X_00060_00003": flows,
                    "X_00060_00003_cd": codes,
                }
            )
        )
    other = pd.DataFrame(
        {
            "agency_cd": "USGS",
            "site_no": "06727000",
            "Date": ["2013-09-12", "2013-09-13"],
            "X_00060_00003": [9999.0, 8888.0],
            "X_00060_00003_cd": ["A", "A"],
        }
    )
    frames.append(other)
    return pd.concat(frames, ignore_index=True)


@pytest.fixture
def nwis_column_map() -> dict[str, str]:
    return {
        "site_no": "site_no",
        "Date": "date",
        "X_00060_00003": "discharge_cfs",
        "X_00060_00003_cd": "quality_cd",
    }
