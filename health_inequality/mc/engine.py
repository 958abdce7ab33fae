"""Monte Carlo engine for probabilistic sensitivity analysis (PSA).

Each iteration resamples both arms' parameters from their fitted multivariate
normal, runs the deterministic pipeline and writes its 8 outputs into a
pre-allocated row. Seeds are assigned per iteration before dispatch, so the
results table is identical whether iterations run inline or on a thread pool.
"""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Literal, Optional

import numpy as np
import pandas as pd

from health_inequality.exceptions import ConfigValidationError, HealthInequalityError, SimulationError
from health_inequality.inequality.impact import ImpactResult
from health_inequality.inequality.metrics import InequalityMetrics
from health_inequality.inequality.stratify import stratum_probabilities
from health_inequality.mc.resampler import resample, validate_covariance
from health_inequality.schema.fitted import FittedDistribution
from health_inequality.schema.run_config import RunConfig
from health_inequality.simulation.deterministic import OUTPUT_COLUMNS, flatten_outputs, run_once
from health_inequality.utils.logging import get_logger
from health_inequality.utils.seeds import SeedManager

log = get_logger(__name__, component="mc.engine")

FailurePolicy = Literal["strict", "lenient"]
ARMS: tuple[str, str] = ("comparator", "intervention")

_NOT_RUN, _OK, _FAILED = 0, 1, 2


@dataclass(frozen=True)
class ProbabilisticRunResult:
    """Outputs of a single Monte Carlo iteration."""

    iteration: int
    comparator: InequalityMetrics
    intervention: InequalityMetrics
    impact: ImpactResult

    def as_row(self) -> tuple[float, ...]:
        return flatten_outputs(self.comparator, self.intervention, self.impact)


@dataclass(frozen=True)
class SummaryStatistic:
    mean: float
    lower: float
    upper: float

    def to_dict(self) -> dict[str, float]:
        return {"mean": self.mean, "lower": self.lower, "upper": self.upper}


@dataclass(eq=False)
class ProbabilisticReport(Mapping[str, SummaryStatistic]):
    """Aggregated PSA outputs plus bookkeeping on successful and skipped iterations.

    Behaves as a read-only mapping from output name to SummaryStatistic.
    """

    summaries: dict[str, SummaryStatistic]
    results: pd.DataFrame
    confidence_level: float
    n_requested: int
    n_successful: int
    n_skipped: int
    skipped: dict[int, str] = field(default_factory=dict)
    cancelled: bool = False

    @property
    def n_not_run(self) -> int:
        return self.n_requested - self.n_successful - self.n_skipped

    def __getitem__(self, name: str) -> SummaryStatistic:
        return self.summaries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.summaries)

    def __len__(self) -> int:
        return len(self.summaries)

    def to_frame(self) -> pd.DataFrame:
        frame = pd.DataFrame.from_dict({k: v.to_dict() for k, v in self.summaries.items()}, orient="index")
        frame.index.name = "output"
        return frame[["mean", "lower", "upper"]]

    def to_dict(self) -> dict:
        return {
            "confidence_level": self.confidence_level,
            "n_requested": self.n_requested,
            "n_successful": self.n_successful,
            "n_skipped": self.n_skipped,
            "cancelled": self.cancelled,
            "skipped": {str(k): v for k, v in self.skipped.items()},
            "summaries": {k: v.to_dict() for k, v in self.summaries.items()},
        }


def run_iteration(
    fitted_comparator: FittedDistribution,
    fitted_intervention: FittedDistribution,
    n_groups: int,
    iteration: int,
    seeds: tuple[int, int],
) -> ProbabilisticRunResult:
    """Resample both arms with their iteration seeds and run the deterministic pipeline.

    Covariances are assumed validated by the caller.
    """
    dist_comparator = resample(fitted_comparator, int(seeds[0]), validate=False)
    dist_intervention = resample(fitted_intervention, int(seeds[1]), validate=False)
    comparator, intervention, impact = run_once(dist_comparator, dist_intervention, n_groups)
    return ProbabilisticRunResult(
        iteration=iteration,
        comparator=comparator,
        intervention=intervention,
        impact=impact,
    )


def summarize(results: pd.DataFrame, confidence_level: float = 0.95) -> dict[str, SummaryStatistic]:
    """Mean and two-sided percentile interval (linear interpolation) per output column."""
    if not 0.0 < confidence_level < 1.0:
        raise ConfigValidationError("confidence_level must be in (0, 1)")
    if results.empty:
        raise SimulationError("cannot summarize an empty results table")
    alpha = (1.0 - confidence_level) / 2.0
    values = results[list(OUTPUT_COLUMNS)].to_numpy(dtype=float)
    means = values.mean(axis=0)
    lower, upper = np.percentile(values, [100.0 * alpha, 100.0 * (1.0 - alpha)], axis=0, method="linear")
    return {
        name: SummaryStatistic(mean=float(means[j]), lower=float(lower[j]), upper=float(upper[j]))
        for j, name in enumerate(OUTPUT_COLUMNS)
    }


def _clamp_workers(max_workers: Optional[int]) -> int:
    if max_workers is None:
        return 1
    cpu_count = os.cpu_count() or 1
    return max(1, min(int(max_workers), cpu_count))


def run_probabilistic_analysis(
    fitted_comparator: FittedDistribution,
    fitted_intervention: FittedDistribution,
    n_groups: int,
    n_iterations: int,
    *,
    confidence_level: float = 0.95,
    seed: int = 0,
    failure_policy: FailurePolicy = "strict",
    max_workers: Optional[int] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ProbabilisticReport:
    """Propagate parameter uncertainty through the inequality pipeline.

    Args:
        fitted_comparator: Fitted model for the comparator arm.
        fitted_intervention: Fitted model for the intervention arm.
        n_groups: Number of equal-probability strata per arm.
        n_iterations: Number of Monte Carlo iterations.
        confidence_level: Two-sided interval coverage for the summaries.
        seed: Master seed; iteration ``i`` uses seeds derived from (seed, arm, i).
        failure_policy: ``strict`` re-raises the first failing iteration's error;
            ``lenient`` records it and excludes the iteration from aggregation.
        max_workers: Thread pool size; ``None`` or 1 runs iterations inline.
        cancel_event: Checked before each iteration; once set, remaining
            iterations are not started and the report is marked cancelled.

    Returns:
        ProbabilisticReport whose ``summaries`` map each output name to a
        SummaryStatistic.
    """
    stratum_probabilities(n_groups)  # InvalidGroupCountError ahead of config validation
    config = RunConfig(
        n_groups=n_groups,
        n_iterations=n_iterations,
        confidence_level=confidence_level,
        seed=seed,
        failure_policy=failure_policy,
        max_workers=max_workers,
    )
    validate_covariance(fitted_comparator.covariance)
    validate_covariance(fitted_intervention.covariance)
    seed_table = SeedManager(config.seed).iteration_seeds(ARMS, config.n_iterations)
    table = np.full((config.n_iterations, len(OUTPUT_COLUMNS)), np.nan)
    status = np.zeros(config.n_iterations, dtype=np.int8)
    errors: dict[int, HealthInequalityError] = {}
    stop = threading.Event()

    def _execute(iteration: int) -> None:
        if stop.is_set() or (cancel_event is not None and cancel_event.is_set()):
            return
        slot = iteration - 1
        try:
            result = run_iteration(
                fitted_comparator,
                fitted_intervention,
                config.n_groups,
                iteration,
                (seed_table[slot, 0], seed_table[slot, 1]),
            )
        except HealthInequalityError as exc:
            errors[iteration] = exc
            status[slot] = _FAILED
            if config.failure_policy == "strict":
                stop.set()
            return
        table[slot, :] = result.as_row()
        status[slot] = _OK

    workers = _clamp_workers(config.max_workers)
    log.info(
        "starting probabilistic analysis",
        extra={"n_iterations": config.n_iterations, "n_groups": config.n_groups, "workers": workers},
    )
    started = time.perf_counter()
    iterations = range(1, config.n_iterations + 1)
    if workers == 1:
        for iteration in iterations:
            _execute(iteration)
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            list(executor.map(_execute, iterations))
    duration_ms = (time.perf_counter() - started) * 1000.0

    if errors and config.failure_policy == "strict":
        first = min(errors)
        log.error(
            "iteration failed; aborting run",
            extra={"iteration": first, "error": str(errors[first]), "duration_ms": duration_ms},
        )
        raise errors[first]

    for iteration in sorted(errors):
        log.warning("iteration skipped", extra={"iteration": iteration, "error": str(errors[iteration])})

    ok = status == _OK
    results = pd.DataFrame(table[ok], columns=list(OUTPUT_COLUMNS), index=pd.Index(np.flatnonzero(ok) + 1, name="iteration"))
    cancelled = bool(cancel_event is not None and cancel_event.is_set() and (status == _NOT_RUN).any())
    if results.empty:
        raise SimulationError(
            f"no successful iterations out of {config.n_iterations} (skipped={len(errors)}, cancelled={cancelled})"
        )

    report = ProbabilisticReport(
        summaries=summarize(results, config.confidence_level),
        results=results,
        confidence_level=config.confidence_level,
        n_requested=config.n_iterations,
        n_successful=int(ok.sum()),
        n_skipped=len(errors),
        skipped={i: str(errors[i]) for i in sorted(errors)},
        cancelled=cancelled,
    )
    log.info(
        "probabilistic analysis complete",
        extra={
            "n_successful": report.n_successful,
            "n_skipped": report.n_skipped,
            "cancelled": report.cancelled,
            "duration_ms": duration_ms,
        },
    )
    return report


def run_from_config(
    fitted_comparator: FittedDistribution,
    fitted_intervention: FittedDistribution,
    config: RunConfig,
    cancel_event: Optional[threading.Event] = None,
) -> ProbabilisticReport:
    return run_probabilistic_analysis(
        fitted_comparator,
        fitted_intervention,
        config.n_groups,
        config.n_iterations,
        confidence_level=config.confidence_level,
        seed=config.seed,
        failure_policy=config.failure_policy,
        max_workers=config.max_workers,
        cancel_event=cancel_event,
    )


__all__ = [
    "ProbabilisticReport",
    "ProbabilisticRunResult",
    "SummaryStatistic",
    "run_from_config",
    "run_iteration",
    "run_probabilistic_analysis",
    "summarize",
]
