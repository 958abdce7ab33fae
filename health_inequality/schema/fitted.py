"""Fitted survival model inputs (point estimate + covariance per arm)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from health_inequality.distributions.factory import get_distribution, get_family, normalize_family
from health_inequality.exceptions import SchemaError
from health_inequality.interfaces.distribution import SurvivalDistribution


def _frozen_array(values: Any, name: str, ndim: int) -> np.ndarray:
    try:
        arr = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise SchemaError(f"{name} must be numeric") from exc
    if arr.ndim != ndim:
        raise SchemaError(f"{name} must be {ndim}-dimensional, got shape {arr.shape}")
    if not np.isfinite(arr).all():
        raise SchemaError(f"{name} contains non-finite values")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class FittedDistribution:
    """Output of the external fitting step for one treatment arm.

    ``estimate`` is on the log scale; ``natural_parameters`` is its elementwise
    exponential, in the family's ``param_names`` order.
    """

    family: str
    estimate: np.ndarray
    covariance: np.ndarray
    label: Optional[str] = None

    def __post_init__(self) -> None:
        family = normalize_family(self.family)
        estimate = _frozen_array(self.estimate, "estimate", 1)
        covariance = _frozen_array(self.covariance, "covariance", 2)
        expected = len(get_family(family).param_names)
        if estimate.shape != (expected,):
            raise SchemaError(f"{family} estimate must have {expected} entries, got {estimate.shape[0]}")
        if covariance.shape != (expected, expected):
            raise SchemaError(f"covariance must be {expected}x{expected}, got {covariance.shape}")
        object.__setattr__(self, "family", family)
        object.__setattr__(self, "estimate", estimate)
        object.__setattr__(self, "covariance", covariance)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FittedDistribution):
            return NotImplemented
        return (
            self.family == other.family
            and np.array_equal(self.estimate, other.estimate)
            and np.array_equal(self.covariance, other.covariance)
        )

    @property
    def param_names(self) -> tuple[str, ...]:
        return get_family(self.family).param_names

    def natural_parameters(self) -> np.ndarray:
        return np.exp(self.estimate)

    def point_distribution(self) -> SurvivalDistribution:
        """Concrete distribution at the point estimate."""
        return get_distribution(self.family, self.natural_parameters())

    @classmethod
    def from_natural(
        cls,
        family: str,
        params: Sequence[float],
        covariance: Any = None,
        label: Optional[str] = None,
    ) -> "FittedDistribution":
        """Build from natural-scale parameters; covariance defaults to the zero matrix."""
        params_arr = np.asarray(params, dtype=float)
        if (params_arr <= 0).any():
            raise SchemaError("natural-scale parameters must be positive")
        if covariance is None:
            covariance = np.zeros((params_arr.size, params_arr.size))
        return cls(family=family, estimate=np.log(params_arr), covariance=covariance, label=label)

    @classmethod
    def from_dict(cls, data: dict, label: Optional[str] = None) -> "FittedDistribution":
        if not isinstance(data, dict):
            raise SchemaError("fitted distribution must be a mapping")
        missing = {"family", "estimate", "covariance"} - set(data)
        if missing:
            raise SchemaError(f"fitted distribution missing keys: {sorted(missing)}")
        return cls(
            family=data["family"],
            estimate=data["estimate"],
            covariance=data["covariance"],
            label=data.get("label", label),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {
            "family": self.family,
            "estimate": self.estimate.tolist(),
            "covariance": self.covariance.tolist(),
        }
        if self.label is not None:
            out["label"] = self.label
        return out


__all__ = ["FittedDistribution"]
