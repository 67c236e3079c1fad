"""Exceptions raised by the analysis pipeline.

An exceedance probability of exactly zero is not an error; it is reported with the
``UndefinedExceedance`` result in :mod:`flood_analysis.models`.
"""


class FloodAnalysisError(Exception):
    """Base exception for flood frequency analysis errors."""

    pass


class EmptyInputError(FloodAnalysisError, ValueError):
    """No annual maxima were supplied to an estimator or fitter."""

    pass


class InsufficientDataError(FloodAnalysisError, ValueError):
    """Too few annual maxima to fit a stable distribution."""

    def __init__(self, message: str, n_years: int, min_years: int) -> None:
        super().__init__(message)
        self.n_years = n_years
        self.min_years = min_years


class InvalidDistributionParametersError(FloodAnalysisError, ValueError):
    """GEV parameters cannot describe a distribution (non-positive scale, NaN, inf)."""

    pass


class FitNonConvergenceError(FloodAnalysisError, RuntimeError):
    """The maximum-likelihood optimizer did not converge."""

    pass
