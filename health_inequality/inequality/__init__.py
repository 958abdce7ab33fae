"""Health distribution, inequality metrics and impact calculations."""

from health_inequality.inequality.impact import ImpactResult, compute_impact
from health_inequality.inequality.metrics import (
    InequalityMetrics,
    absolute_difference,
    compute_metrics,
    inequality_gradient,
)
from health_inequality.inequality.stratify import stratify, stratum_probabilities

__all__ = [
    "ImpactResult",
    "InequalityMetrics",
    "absolute_difference",
    "compute_impact",
    "compute_metrics",
    "inequality_gradient",
    "stratify",
    "stratum_probabilities",
]
