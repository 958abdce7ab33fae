"""Health inequality impact of an intervention from parametric survival models.

Stratifies each arm's survival curve into equal-probability groups, measures
inequality (AD, IG) across the groups, compares intervention with comparator
and propagates parameter uncertainty by Monte Carlo resampling.
"""

from health_inequality.exceptions import (
    DivisionByZeroError,
    HealthInequalityError,
    InsufficientGroupsError,
    InvalidGroupCountError,
    InvalidParameterError,
    SingularCovarianceError,
)
from health_inequality.inequality import (
    ImpactResult,
    InequalityMetrics,
    compute_impact,
    compute_metrics,
    stratify,
)
from health_inequality.mc import (
    ProbabilisticReport,
    ProbabilisticRunResult,
    SummaryStatistic,
    resample,
    run_probabilistic_analysis,
)
from health_inequality.schema import FittedDistribution, RunConfig
from health_inequality.simulation import BaseCaseResult, run_base_case, run_once

__version__ = "0.1.0"

__all__ = [
    "BaseCaseResult",
    "DivisionByZeroError",
    "FittedDistribution",
    "HealthInequalityError",
    "ImpactResult",
    "InequalityMetrics",
    "InsufficientGroupsError",
    "InvalidGroupCountError",
    "InvalidParameterError",
    "ProbabilisticReport",
    "ProbabilisticRunResult",
    "RunConfig",
    "SingularCovarianceError",
    "SummaryStatistic",
    "compute_impact",
    "compute_metrics",
    "resample",
    "run_base_case",
    "run_once",
    "run_probabilistic_analysis",
    "stratify",
]
