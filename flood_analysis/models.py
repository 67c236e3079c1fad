"""Record types shared across the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Observation:
    """One daily discharge value as exported from NWIS."""

    station_id: str
    timestamp: date
    discharge: float
    quality_code: str


@dataclass(frozen=True)
class AnnualMaximum:
    year: int
    discharge: float


@dataclass(frozen=True)
class GEVParameters:
    """Fitted GEV location, scale and shape.

    ``shape`` follows the hydrological convention (xi > 0 is heavy tailed, xi < 0 has
    a finite upper bound). SciPy's ``genextreme`` uses ``c = -xi``; use
    :meth:`to_scipy` / :meth:`from_scipy` when crossing that boundary.
    """

    location: float
    scale: float
    shape: float

    def to_scipy(self) -> dict:
        return {"c": -self.shape, "loc": self.location, "scale": self.scale}

    @classmethod
    def from_scipy(cls, c: float, loc: float, scale: float) -> "GEVParameters":
        return cls(location=float(loc), scale=float(scale), shape=float(-c))


@dataclass(frozen=True)
class ReturnIntervalEstimate:
    """Exceedance probability and return interval (years) for one threshold."""

    threshold: float
    exceedance_probability: float
    return_interval: float
    method: str

    @property
    def is_defined(self) -> bool:
        return True


@dataclass(frozen=True)
class UndefinedExceedance:
    """No exceedance at ``threshold``, so the return interval has no finite value."""

    threshold: float
    method: str
    reason: str

    @property
    def is_defined(self) -> bool:
        return False
