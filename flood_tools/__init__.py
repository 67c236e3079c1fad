"""Presentation helpers for flood frequency results."""

from flood_tools.plot import plot_annual_maxima, plot_discharge_series, plot_return_intervals

__all__ = [
    "plot_annual_maxima",
    "plot_discharge_series",
    "plot_return_intervals",
]
