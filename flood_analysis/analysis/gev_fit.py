"""Generalised Extreme Value (GEV) fitting and evaluation.

Fitting is delegated to ``scipy.stats.genextreme``. SciPy's shape ``c`` has the opposite
sign of the hydrological ``xi`` used here, so results are converted into
:class:`~flood_analysis.models.GEVParameters` straight away and nothing downstream sees
the SciPy convention.

The CDF and its complement are evaluated in closed form so the support boundary and the
Gumbel limit are handled explicitly:

    xi != 0:  F(x) = exp(-(1 + xi * (x - mu) / sigma) ** (-1 / xi))
    xi == 0:  F(x) = exp(-exp(-(x - mu) / sigma))
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np
import pandas as pd
from scipy import optimize, stats

from flood_analysis.exceptions import (
    EmptyInputError,
    FitNonConvergenceError,
    InsufficientDataError,
    InvalidDistributionParametersError,
)
from flood_analysis.logging_config import get_logger
from flood_analysis.models import GEVParameters

logger = get_logger(__name__)

# |xi| below this is evaluated with the Gumbel formula. The xi != 0 branch is
# log1p(xi * z) / xi, whose difference from z is about xi * z**2 / 2, so at 1e-9 the
# two branches agree to better than 1e-7 for |x - mu| / sigma up to ~10.
GUMBEL_SHAPE_TOLERANCE = 1e-9

_MAX_EXP_ARG = 709.0

MAX_OPTIMIZER_ITERATIONS = 2000


def as_sample_array(annual_maxima: pd.Series | Iterable[float]) -> np.ndarray:
    """Annual maxima as a float array with missing values removed."""
    if not isinstance(annual_maxima, pd.Series):
        annual_maxima = pd.Series(list(annual_maxima), dtype=float)
    return annual_maxima.dropna().astype(float).to_numpy()


def _exp(value: float) -> float:
    # math.exp raises OverflowError instead of returning inf.
    return math.inf if value > _MAX_EXP_ARG else math.exp(value)


def _checked_fmin(func, x0, args=(), disp=0):
    """Nelder-Mead that raises instead of returning a half-finished estimate."""
    xopt, _fopt, n_iter, n_calls, warnflag = optimize.fmin(
        func,
        x0,
        args=args,
        disp=disp,
        full_output=True,
        maxiter=MAX_OPTIMIZER_ITERATIONS,
        maxfun=2 * MAX_OPTIMIZER_ITERATIONS,
    )
    if warnflag:
        reason = "function evaluations" if warnflag == 1 else "iterations"
        raise FitNonConvergenceError(
            f"GEV likelihood did not converge: maximum number of {reason} reached "
            f"({n_iter} iterations, {n_calls} evaluations)"
        )
    return xopt


def fit_gev_distribution(
    annual_maxima: pd.Series | Iterable[float],
    min_years: int = 5,
) -> GEVParameters:
    """Fit a GEV distribution to annual maxima by maximum likelihood.

    Args:
        annual_maxima: One value per year (NaN entries are ignored).
        min_years: Minimum number of years needed for a stable fit.

    Returns:
        Fitted parameters with ``shape`` in the hydrological (xi) convention.

    Raises:
        EmptyInputError: No values were supplied.
        InsufficientDataError: Fewer than ``min_years`` values.
        FitNonConvergenceError: The optimizer gave up or returned unusable parameters.
    """
    sample = as_sample_array(annual_maxima)
    if sample.size == 0:
        raise EmptyInputError("Cannot fit a GEV distribution to an empty annual maxima series.")
    if sample.size < min_years:
        raise InsufficientDataError(
            f"Need at least {min_years} years of data to fit a stable GEV distribution, "
            f"got {sample.size}.",
            n_years=int(sample.size),
            min_years=min_years,
        )

    if np.ptp(sample) == 0:
        raise FitNonConvergenceError(
            f"Cannot fit a GEV distribution to {sample.size} identical annual maxima."
        )
    try:
        c, loc, scale = stats.genextreme.fit(sample, optimizer=_checked_fmin)
    except stats.FitError as exc:
        raise FitNonConvergenceError(f"GEV fit failed: {exc}") from exc
    if not all(np.isfinite([c, loc, scale])) or scale <= 0:
        raise FitNonConvergenceError(
            f"GEV fit returned unusable parameters (c={c}, loc={loc}, scale={scale})"
        )

    params = GEVParameters.from_scipy(c, loc, scale)
    logger.debug(
        "Fitted GEV",
        n_years=int(sample.size),
        location=params.location,
        scale=params.scale,
        shape=params.shape,
    )
    return params


def _validate(params: GEVParameters) -> None:
    values = (params.location, params.scale, params.shape)
    if not all(math.isfinite(v) for v in values):
        raise InvalidDistributionParametersError(f"Non-finite GEV parameters: {params}")
    if params.scale <= 0:
        raise InvalidDistributionParametersError(
            f"GEV scale must be strictly positive, got {params.scale}"
        )


def _reduced_exponent(x: float, params: GEVParameters) -> float:
    """Return t(x) such that F(x) = exp(-t); ``inf`` / ``0.0`` outside the support."""
    z = (x - params.location) / params.scale
    xi = params.shape
    if abs(xi) < GUMBEL_SHAPE_TOLERANCE:
        return _exp(-z)

    base = 1.0 + xi * z
    if base <= 0:
        # Outside the support: below the lower bound when xi > 0 (F = 0), at or above
        # the upper bound when xi < 0 (F = 1).
        return math.inf if xi > 0 else 0.0
    return _exp(-math.log1p(xi * z) / xi)


def gev_cdf(x: float, params: GEVParameters) -> float:
    """Probability that an annual maximum is at most ``x``."""
    _validate(params)
    return math.exp(-_reduced_exponent(float(x), params))


def gev_sf(x: float, params: GEVParameters) -> float:
    """Survival function (1 - CDF) for a threshold x."""
    _validate(params)
    return -math.expm1(-_reduced_exponent(float(x), params))


def gev_return_level(params: GEVParameters, return_period: float) -> float:
    """Discharge exceeded on average once every ``return_period`` years."""
    _validate(params)
    if return_period <= 1:
        raise ValueError(f"Return period must be greater than 1 year, got {return_period}")
    # y = -log(F) at F = 1 - 1/T
    y = -math.log1p(-1.0 / return_period)
    xi = params.shape
    if abs(xi) < GUMBEL_SHAPE_TOLERANCE:
        return params.location - params.scale * math.log(y)
    return params.location + params.scale * math.expm1(-xi * math.log(y)) / xi
