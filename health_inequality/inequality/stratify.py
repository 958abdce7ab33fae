"""Quantile stratification of a survival curve into a health distribution."""

from __future__ import annotations

import numbers

import numpy as np

from health_inequality.exceptions import InvalidGroupCountError, InvalidParameterError
from health_inequality.interfaces.distribution import SurvivalDistribution


def stratum_probabilities(n_groups: int) -> np.ndarray:
    """Mid-points ``(k - 0.5) / n_groups`` of ``n_groups`` equal-probability strata."""
    if isinstance(n_groups, bool) or not isinstance(n_groups, numbers.Integral) or n_groups < 1:
        raise InvalidGroupCountError(f"n_groups must be an integer >= 1, got {n_groups!r}")
    return (np.arange(1, int(n_groups) + 1) - 0.5) / int(n_groups)


def stratify(distribution: SurvivalDistribution, n_groups: int) -> np.ndarray:
    """Return the health distribution: one survival-time quantile per stratum.

    Each stratum is represented by its median member, so a zero lower bound at
    ``p = 0`` never enters the result. Values are non-decreasing in stratum order.
    Parameters whose quantiles overflow raise InvalidParameterError.
    """
    probabilities = stratum_probabilities(n_groups)
    with np.errstate(over="ignore"):
        values = distribution.quantile(probabilities)
    if not np.isfinite(values).all():
        raise InvalidParameterError(f"{distribution!r} has non-finite quantiles for n_groups={n_groups}")
    values.setflags(write=False)
    return values


__all__ = ["stratify", "stratum_probabilities"]
