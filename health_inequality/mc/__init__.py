"""Monte Carlo resampling and probabilistic sensitivity analysis."""

from health_inequality.mc.engine import (
    ProbabilisticReport,
    ProbabilisticRunResult,
    SummaryStatistic,
    run_from_config,
    run_iteration,
    run_probabilistic_analysis,
    summarize,
)
from health_inequality.mc.resampler import resample, sample_parameters, validate_covariance

__all__ = [
    "ProbabilisticReport",
    "ProbabilisticRunResult",
    "SummaryStatistic",
    "resample",
    "run_from_config",
    "run_iteration",
    "run_probabilistic_analysis",
    "sample_parameters",
    "summarize",
    "validate_covariance",
]
