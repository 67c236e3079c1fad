"""Processing utilities: annual maxima."""

from flood_analysis.processing.annual_maxima import (
    annual_maxima_records,
    compute_annual_maxima,
    observations_to_frame,
)

__all__ = ["compute_annual_maxima", "annual_maxima_records", "observations_to_frame"]
