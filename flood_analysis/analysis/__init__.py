"""Statistical analysis routines: GEV fitting, CDF evaluation, return intervals."""

from flood_analysis.analysis.gev_fit import (
    GUMBEL_SHAPE_TOLERANCE,
    fit_gev_distribution,
    gev_cdf,
    gev_return_level,
    gev_sf,
)
from flood_analysis.analysis.probabilities import (
    empirical_exceedance_table,
    empirical_return_interval,
    model_return_interval,
    return_interval_bootstrap,
)

__all__ = [
    "GUMBEL_SHAPE_TOLERANCE",
    "fit_gev_distribution",
    "gev_cdf",
    "gev_sf",
    "gev_return_level",
    "empirical_return_interval",
    "empirical_exceedance_table",
    "model_return_interval",
    "return_interval_bootstrap",
]
