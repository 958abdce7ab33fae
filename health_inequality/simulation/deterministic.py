"""Deterministic base-case pipeline: stratify -> metrics -> impact."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from health_inequality.inequality.impact import ImpactResult, compute_impact
from health_inequality.inequality.metrics import InequalityMetrics, compute_metrics
from health_inequality.inequality.stratify import stratify
from health_inequality.interfaces.distribution import SurvivalDistribution
from health_inequality.schema.fitted import FittedDistribution
from health_inequality.utils.logging import get_logger

log = get_logger(__name__, component="simulation.deterministic")

OUTPUT_COLUMNS: tuple[str, ...] = (
    "ad_comparator",
    "ig_comparator",
    "ad_intervention",
    "ig_intervention",
    "ad_absolute_change",
    "ad_relative_change",
    "ig_absolute_change",
    "ig_relative_change",
)


def flatten_outputs(
    comparator: InequalityMetrics, intervention: InequalityMetrics, impact: ImpactResult
) -> tuple[float, ...]:
    """The 8 output scalars in ``OUTPUT_COLUMNS`` order."""
    return (
        comparator.ad,
        comparator.ig,
        intervention.ad,
        intervention.ig,
        impact.ad_absolute,
        impact.ad_relative,
        impact.ig_absolute,
        impact.ig_relative,
    )


def run_once(
    dist_comparator: SurvivalDistribution,
    dist_intervention: SurvivalDistribution,
    n_groups: int,
) -> tuple[InequalityMetrics, InequalityMetrics, ImpactResult]:
    """Compute both arms' inequality metrics and the intervention's impact.

    Errors from any stage propagate unchanged; the caller decides whether a
    failure aborts the analysis.
    """
    comparator = compute_metrics(stratify(dist_comparator, n_groups))
    intervention = compute_metrics(stratify(dist_intervention, n_groups))
    return comparator, intervention, compute_impact(comparator, intervention)


@dataclass(frozen=True)
class BaseCaseResult:
    comparator: InequalityMetrics
    intervention: InequalityMetrics
    impact: ImpactResult
    health_comparator: np.ndarray
    health_intervention: np.ndarray

    def to_dict(self) -> dict[str, float]:
        return dict(zip(OUTPUT_COLUMNS, flatten_outputs(self.comparator, self.intervention, self.impact)))


def run_base_case(
    fitted_comparator: FittedDistribution,
    fitted_intervention: FittedDistribution,
    n_groups: int,
) -> BaseCaseResult:
    """Run the deterministic pipeline at both arms' point estimates."""
    health_comparator = stratify(fitted_comparator.point_distribution(), n_groups)
    health_intervention = stratify(fitted_intervention.point_distribution(), n_groups)
    comparator = compute_metrics(health_comparator)
    intervention = compute_metrics(health_intervention)
    result = BaseCaseResult(
        comparator=comparator,
        intervention=intervention,
        impact=compute_impact(comparator, intervention),
        health_comparator=health_comparator,
        health_intervention=health_intervention,
    )
    log.info("base case complete", extra={"n_groups": n_groups, **result.to_dict()})
    return result


__all__ = ["BaseCaseResult", "OUTPUT_COLUMNS", "flatten_outputs", "run_base_case", "run_once"]
