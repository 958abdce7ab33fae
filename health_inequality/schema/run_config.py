"""Run configuration schema and validation."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, fields
from typing import Literal, Optional

from health_inequality.exceptions import ConfigValidationError

FailurePolicy = Literal["strict", "lenient"]


@dataclass(slots=True)
class RunConfig:
    n_groups: int
    n_iterations: int = 1000
    confidence_level: float = 0.95
    seed: int = 0
    failure_policy: FailurePolicy = "strict"
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.n_groups, bool) or not isinstance(self.n_groups, numbers.Integral) or self.n_groups <= 0:
            raise ConfigValidationError("n_groups must be a positive integer")
        if isinstance(self.n_iterations, bool) or not isinstance(self.n_iterations, numbers.Integral) or self.n_iterations <= 0:
            raise ConfigValidationError("n_iterations must be a positive integer")
        if not 0.0 < self.confidence_level < 1.0:
            raise ConfigValidationError("confidence_level must be in (0, 1)")
        if isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral) or self.seed < 0:
            raise ConfigValidationError("seed must be a non-negative integer")
        if self.failure_policy not in {"strict", "lenient"}:
            raise ConfigValidationError("failure_policy must be 'strict' or 'lenient'")
        if self.max_workers is not None and self.max_workers <= 0:
            raise ConfigValidationError("max_workers must be positive when set")

    @property
    def tail_percentiles(self) -> tuple[float, float]:
        """Lower/upper percentiles (0-100) for the two-sided interval."""
        alpha = (1.0 - self.confidence_level) / 2.0
        return 100.0 * alpha, 100.0 * (1.0 - alpha)

    @classmethod
    def from_dict(cls, data: dict) -> "RunConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(f"unknown run configuration keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict:
        return {
            "n_groups": self.n_groups,
            "n_iterations": self.n_iterations,
            "confidence_level": self.confidence_level,
            "seed": self.seed,
            "failure_policy": self.failure_policy,
            "max_workers": self.max_workers,
        }
