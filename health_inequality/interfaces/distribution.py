"""Distribution interface for parametric survival models."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar, Sequence

import numpy as np

from health_inequality.exceptions import InvalidParameterError


class SurvivalDistribution(ABC):
    """Base class for the closed set of two-parameter survival families.

    Parameters are given on the natural scale, in ``param_names`` order, and must
    all be strictly positive and finite.
    """

    name: ClassVar[str]
    param_names: ClassVar[tuple[str, ...]]

    def __init__(self, *params: float) -> None:
        if len(params) != len(self.param_names):
            raise InvalidParameterError(
                f"{self.name} expects {len(self.param_names)} parameters {self.param_names}, got {len(params)}"
            )
        values = tuple(float(p) for p in params)
        for label, value in zip(self.param_names, values):
            if not math.isfinite(value) or value <= 0:
                raise InvalidParameterError(f"{self.name} parameter {label} must be positive and finite, got {value}")
        self.params = values

    @classmethod
    def from_natural(cls, params: Sequence[float]) -> "SurvivalDistribution":
        return cls(*params)

    @property
    def param_dict(self) -> dict[str, float]:
        return dict(zip(self.param_names, self.params))

    @abstractmethod
    def _frozen(self):
        """Return the equivalent frozen scipy.stats distribution."""

    def quantile(self, p) -> np.ndarray:
        """Inverse CDF evaluated at cumulative probabilities ``p``."""
        return np.asarray(self._frozen().ppf(p), dtype=float)

    def survival(self, t) -> np.ndarray:
        return np.asarray(self._frozen().sf(t), dtype=float)

    def median(self) -> float:
        return float(self.quantile(0.5))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SurvivalDistribution):
            return NotImplemented
        return self.name == other.name and self.params == other.params

    def __hash__(self) -> int:
        return hash((self.name, self.params))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.param_dict.items())
        return f"{self.__class__.__name__}({args})"
