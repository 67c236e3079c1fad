"""Flood frequency toolkit for introductory extreme value analysis of stream discharge.

The modules are intentionally small so learners can trace each analytical step. The
package supports:

- cleaning NWIS daily-values exports (quality codes, station, year)
- annual maxima and empirical exceedance / return intervals
- GEV maximum-likelihood fits, CDF evaluation and model-based return intervals
- bootstrap uncertainty for the model-based estimate
"""

from flood_analysis.config import load_analysis_settings, load_sites

__all__ = [
    "load_analysis_settings",
    "load_sites",
]
