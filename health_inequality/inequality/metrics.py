"""Inequality metrics over a health distribution."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from health_inequality.exceptions import InsufficientGroupsError, InvalidGroupCountError


@dataclass(frozen=True)
class InequalityMetrics:
    """Absolute Difference (AD) and Inequality Gradient (IG) for one arm."""

    ad: float
    ig: float

    def to_dict(self) -> dict[str, float]:
        return {"ad": self.ad, "ig": self.ig}


def _as_values(health_distribution) -> np.ndarray:
    values = np.asarray(health_distribution, dtype=float)
    if values.ndim != 1 or values.size == 0:
        raise InvalidGroupCountError("health distribution must be a non-empty 1-D sequence")
    return values


def absolute_difference(health_distribution) -> float:
    """Spread between the best- and worst-off strata; 0.0 for a single group."""
    values = _as_values(health_distribution)
    if values.size == 1:
        return 0.0
    return float(values[-1] - values[0])


def inequality_gradient(health_distribution) -> float:
    """Least-squares slope of stratum value against 1-based stratum index.

    Closed form ``cov(index, value) / var(index)``. Index deviations are exact
    half-integers that sum to zero, so the covariance reduces to the sum of
    ``(index - mean_index) * value``; summing with ``math.fsum`` makes a flat
    distribution give exactly 0.
    """
    values = _as_values(health_distribution)
    n = values.size
    if n < 2:
        raise InsufficientGroupsError("inequality gradient needs at least 2 groups")
    deviations = np.arange(1, n + 1, dtype=float) - (n + 1) / 2.0
    covariance = math.fsum(deviations * values)
    variance = math.fsum(deviations * deviations)
    return covariance / variance


def compute_metrics(health_distribution) -> InequalityMetrics:
    return InequalityMetrics(
        ad=absolute_difference(health_distribution),
        ig=inequality_gradient(health_distribution),
    )


__all__ = ["InequalityMetrics", "absolute_difference", "compute_metrics", "inequality_gradient"]
