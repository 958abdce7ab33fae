"""Impact of the intervention on inequality relative to the comparator."""

from __future__ import annotations

from dataclasses import dataclass

from health_inequality.exceptions import DivisionByZeroError
from health_inequality.inequality.metrics import InequalityMetrics


@dataclass(frozen=True)
class ImpactResult:
    ad_absolute: float
    ad_relative: float
    ig_absolute: float
    ig_relative: float

    def to_dict(self) -> dict[str, float]:
        return {
            "ad_absolute_change": self.ad_absolute,
            "ad_relative_change": self.ad_relative,
            "ig_absolute_change": self.ig_absolute,
            "ig_relative_change": self.ig_relative,
        }


def relative_change(absolute: float, comparator_value: float, metric: str = "metric") -> float:
    """``absolute / comparator_value``; a zero comparator is an error, not a sentinel."""
    if comparator_value == 0:
        raise DivisionByZeroError(f"relative change of {metric} undefined: comparator value is zero")
    return absolute / comparator_value


def compute_impact(comparator_metrics: InequalityMetrics, intervention_metrics: InequalityMetrics) -> ImpactResult:
    ad_abs = intervention_metrics.ad - comparator_metrics.ad
    ig_abs = intervention_metrics.ig - comparator_metrics.ig
    return ImpactResult(
        ad_absolute=ad_abs,
        ad_relative=relative_change(ad_abs, comparator_metrics.ad, "AD"),
        ig_absolute=ig_abs,
        ig_relative=relative_change(ig_abs, comparator_metrics.ig, "IG"),
    )


__all__ = ["ImpactResult", "compute_impact", "relative_change"]
