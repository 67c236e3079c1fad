"""Data access layer for exported NWIS daily values."""

from flood_analysis.data_access.daily_values import (
    clean_daily_values,
    frame_to_observations,
    load_daily_values,
)

__all__ = ["load_daily_values", "clean_daily_values", "frame_to_observations"]
