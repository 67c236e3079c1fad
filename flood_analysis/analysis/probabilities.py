"""Exceedance probability and return-interval calculations for discharge thresholds."""

from __future__ import annotations

import math
from typing import Dict, Iterable, Union

import numpy as np
import pandas as pd

from flood_analysis.analysis.gev_fit import as_sample_array, fit_gev_distribution, gev_sf
from flood_analysis.exceptions import EmptyInputError, FitNonConvergenceError
from flood_analysis.logging_config import get_logger
from flood_analysis.models import GEVParameters, ReturnIntervalEstimate, UndefinedExceedance

logger = get_logger(__name__)

ReturnIntervalResult = Union[ReturnIntervalEstimate, UndefinedExceedance]


def _invert(probability: float) -> float:
    return math.inf if probability <= 0 else 1.0 / float(probability)


def empirical_return_interval(
    annual_maxima: pd.Series | Iterable[float],
    threshold: float,
) -> ReturnIntervalResult:
    """Return interval from the fraction of years whose maximum exceeded ``threshold``.

    This cannot extrapolate: a threshold above the largest observed maximum has no
    exceedances and yields :class:`UndefinedExceedance`.
    """
    sample = as_sample_array(annual_maxima)
    if sample.size == 0:
        raise EmptyInputError("Empirical exceedance needs at least one annual maximum.")

    n_exceed = int((sample > threshold).sum())
    if n_exceed == 0:
        return UndefinedExceedance(
            threshold=float(threshold),
            method="empirical",
            reason=f"no annual maximum in {sample.size} years exceeded {threshold}",
        )

    fraction = n_exceed / sample.size
    return ReturnIntervalEstimate(
        threshold=float(threshold),
        exceedance_probability=fraction,
        return_interval=1.0 / fraction,
        method="empirical",
    )


def empirical_exceedance_table(annual_maxima: pd.Series | Iterable[float]) -> pd.DataFrame:
    """Rank annual maxima and attach Weibull plotting positions.

    The largest value gets rank 1, exceedance probability ``1 / (n + 1)`` and return
    interval ``n + 1``.
    """
    if isinstance(annual_maxima, pd.Series):
        series = annual_maxima.dropna().astype(float)
    else:
        series = pd.Series(as_sample_array(annual_maxima))
    if series.empty:
        raise EmptyInputError("Cannot rank an empty annual maxima series.")

    table = series.sort_values(ascending=False).rename("annual_max_cfs").to_frame()
    n = len(table)
    table["rank"] = np.arange(1, n + 1)
    table["exceedance_probability"] = table["rank"] / (n + 1)
    table["return_interval"] = (n + 1) / table["rank"]
    return table


def model_return_interval(params: GEVParameters, threshold: float) -> ReturnIntervalResult:
    """Return interval 1 / (1 - F(threshold)) under a fitted GEV."""
    p_exceed = gev_sf(threshold, params)
    if p_exceed <= 0.0:
        return UndefinedExceedance(
            threshold=float(threshold),
            method="gev",
            reason="threshold is at or beyond the upper bound of the fitted distribution",
        )
    return ReturnIntervalEstimate(
        threshold=float(threshold),
        exceedance_probability=p_exceed,
        return_interval=1.0 / p_exceed,
        method="gev",
    )


def return_interval_bootstrap(
    annual_maxima: pd.Series | Iterable[float],
    threshold: float,
    n_boot: int = 200,
    random_seed: int = 42,
    min_years: int = 5,
) -> Dict[str, float]:
    """Estimate GEV return-interval uncertainty by refitting resampled annual maxima.

    Resamples whose exceedance is undefined count as an infinite return interval, so the
    upper percentile can legitimately be ``inf``.
    """
    sample = as_sample_array(annual_maxima)
    if sample.size == 0:
        raise EmptyInputError("Bootstrap needs at least one annual maximum.")
    rng = np.random.default_rng(random_seed)

    probs: list[float] = []
    n_failed = 0
    n_undefined = 0
    for _ in range(n_boot):
        resample = rng.choice(sample, size=sample.size, replace=True)
        try:
            params = fit_gev_distribution(resample, min_years=min_years)
        except FitNonConvergenceError as exc:
            n_failed += 1
            logger.debug("Bootstrap resample did not converge", error=str(exc))
            continue
        result = model_return_interval(params, threshold)
        if result.is_defined:
            probs.append(result.exceedance_probability)
        else:
            n_undefined += 1
            probs.append(0.0)

    if not probs:
        raise FitNonConvergenceError(f"None of {n_boot} bootstrap resamples converged.")
    if n_failed:
        logger.warning("Skipped non-converged bootstrap resamples", failed=n_failed, n_boot=n_boot)

    boot_probs = np.array(probs)
    # Low exceedance probability means a long return interval, so the tails swap.
    return {
        "return_interval_p5": _invert(np.percentile(boot_probs, 95)),
        "return_interval_p50": _invert(np.percentile(boot_probs, 50)),
        "return_interval_p95": _invert(np.percentile(boot_probs, 5)),
        "n_used": len(probs),
        "n_failed": n_failed,
        "n_undefined": n_undefined,
    }
