"""Tests for loading and cleaning NWIS daily values."""

from datetime import date
from pathlib import Path

import pandas as pd
import pytest

from flood_analysis.data_access.daily_values import (
    clean_daily_values,
    frame_to_observations,
    load_daily_values,
)
from flood_analysis.models import Observation

SITE_NO = "06730500"


class TestLoadDailyValues:
    """Tests for load_daily_values."""

    def test_csv_keeps_leading_zeros(self, tmp_path: Path) -> None:
        """site_no stays text so '06730500' is not read as 6730500."""
        path = tmp_path / "dv.csv"
        path.write_text(
            "agency_cd,site_no,Date,X_00060_00003,X_00060_00003_cd\n"
            "USGS,06730500,2013-09-12,3680,A\n"
        )
        frame = load_daily_values(path)
        assert frame.loc[0, "site_no"] == SITE_NO
        assert frame.loc[0, "X_00060_00003"] == 3680

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing export raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_daily_values(tmp_path / "absent.csv")

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        """Only CSV and parquet are read."""
        path = tmp_path / "dv.xlsx"
        path.write_text("not a spreadsheet")
        with pytest.raises(ValueError, match="Unsupported"):
            load_daily_values(path)


class TestCleanDailyValues:
    """Tests for clean_daily_values."""

    def test_renames_and_derives_year(
        self, raw_daily_values: pd.DataFrame, nwis_column_map: dict
    ) -> None:
        """Output has canonical columns and a year derived from the date."""
        cleaned = clean_daily_values(raw_daily_values, SITE_NO, column_map=nwis_column_map, accepted_codes=["A"])
        assert list(cleaned.columns) == ["site_no", "date", "discharge_cfs", "quality_cd", "year"]
        assert (cleaned["year"] == cleaned["date"].dt.year).all()
        assert cleaned["date"].is_monotonic_increasing

    def test_restricts_to_one_station(
        self, raw_daily_values: pd.DataFrame, nwis_column_map: dict
    ) -> None:
        """Rows from other gauges are dropped."""
        cleaned = clean_daily_values(raw_daily_values, SITE_NO, column_map=nwis_column_map, accepted_codes=["A"])
        assert set(cleaned["site_no"]) == {SITE_NO}
        assert cleaned["discharge_cfs"].max() < 9999.0

    def test_drops_non_accepted_codes(
        self, raw_daily_values: pd.DataFrame, nwis_column_map: dict
    ) -> None:
        """Provisional values never survive cleaning."""
        cleaned = clean_daily_values(raw_daily_values, SITE_NO, column_map=nwis_column_map, accepted_codes=["A"])
        assert set(cleaned["quality_cd"]) == {"A"}

    def test_uses_config_defaults(self, raw_daily_values: pd.DataFrame) -> None:
        """Column map and quality codes fall back to config/analysis.yaml."""
        cleaned = clean_daily_values(raw_daily_values, SITE_NO)
        assert set(cleaned["quality_cd"]) == {"A"}
        assert "discharge_cfs" in cleaned.columns

    def test_renamed_nwis_columns(self) -> None:
        """Exports passed through renameNWISColumns (Flow, Flow_cd) are understood."""
        raw = pd.DataFrame(
            {
                "agency_cd": ["USGS", "USGS"],
                "site_no": [SITE_NO, SITE_NO],
                "Date": ["2013-09-12", "2013-09-13"],
                "Flow": [3680.0, 2500.0],
                "Flow_cd": ["A", "P"],
            }
        )
        cleaned = clean_daily_values(raw, SITE_NO)
        assert list(cleaned["discharge_cfs"]) == [3680.0]

    def test_integer_site_numbers_are_padded(self, nwis_column_map: dict) -> None:
        """A CSV re-saved with numeric site numbers still matches."""
        raw = pd.DataFrame(
            {
                "site_no": [6730500, 6730500],
                "Date": ["2013-09-12", "2013-09-13"],
                "X_00060_00003": [3680.0, 2500.0],
                "X_00060_00003_cd": ["A", "A"],
            }
        )
        cleaned = clean_daily_values(raw, SITE_NO, column_map=nwis_column_map, accepted_codes=["A"])
        assert len(cleaned) == 2

    def test_missing_discharge_dropped(self, nwis_column_map: dict) -> None:
        """Blank discharge values are removed rather than treated as zero."""
        raw = pd.DataFrame(
            {
                "site_no": [SITE_NO, SITE_NO],
                "Date": ["2013-09-12", "2013-09-13"],
                "X_00060_00003": [None, "2500"],
                "X_00060_00003_cd": ["A", "A"],
            }
        )
        cleaned = clean_daily_values(raw, SITE_NO, column_map=nwis_column_map, accepted_codes=["A"])
        assert list(cleaned["discharge_cfs"]) == [2500.0]

    def test_missing_column_raises(self, nwis_column_map: dict) -> None:
        """Exports without a quality code column are rejected."""
        raw = pd.DataFrame({"site_no": [SITE_NO], "Date": ["2013-09-12"], "X_00060_00003": [1.0]})
        with pytest.raises(ValueError, match="quality_cd"):
            clean_daily_values(raw, SITE_NO, column_map=nwis_column_map, accepted_codes=["A"])

    def test_negative_discharge_raises(self, nwis_column_map: dict) -> None:
        """Discharge is non-negative."""
        raw = pd.DataFrame(
            {
                "site_no": [SITE_NO],
                "Date": ["2013-09-12"],
                "X_00060_00003": [-5.0],
                "X_00060_00003_cd": ["A"],
            }
        )
        with pytest.raises(ValueError, match="Negative"):
            clean_daily_values(raw, SITE_NO, column_map=nwis_column_map, accepted_codes=["A"])


class TestFrameToObservations:
    """Tests for frame_to_observations."""

    def test_builds_records(self, nwis_column_map: dict) -> None:
        """Each cleaned row becomes an immutable Observation."""
        raw = pd.DataFrame(
            {
                "site_no": [SITE_NO],
                "Date": ["2013-09-12"],
                "X_00060_00003": [3680.0],
                "X_00060_00003_cd": ["A"],
            }
        )
        cleaned = clean_daily_values(raw, SITE_NO, column_map=nwis_column_map, accepted_codes=["A"])
        observations = frame_to_observations(cleaned)
        assert observations == [
            Observation(station_id=SITE_NO, timestamp=date(2013, 9, 12), discharge=3680.0, quality_code="A")
        ]
