"""Probabilistic sensitivity analysis CLI command."""

from __future__ import annotations

import signal
import threading
import uuid
from pathlib import Path
from typing import Optional

import typer

from health_inequality.cli.output import console, echo_json, psa_table, write_artifacts
from health_inequality.config.loader import load_config_with_precedence
from health_inequality.data.loader import load_fitted_models
from health_inequality.mc.engine import run_from_config
from health_inequality.schema.run_config import RunConfig
from health_inequality.schema.run_meta import RunMeta
from health_inequality.utils.logging import get_logger

log = get_logger(__name__, component="cli.psa")

DEFAULTS = {
    "groups": 5,
    "iterations": 1000,
    "confidence": 0.95,
    "seed": 0,
    "policy": "strict",
    "workers": None,
}

CASTERS = {
    "groups": int,
    "iterations": int,
    "confidence": float,
    "seed": int,
    "policy": lambda v: str(v).lower(),
    "workers": int,
}


def _install_cancel_handler(cancel: threading.Event):
    """Route SIGINT to ``cancel`` so completed iterations are still summarized."""
    if threading.current_thread() is not threading.main_thread():
        return None

    def _handler(signum, frame):  # noqa: ARG001
        log.warning("cancellation requested; finishing in-flight iterations")
        cancel.set()

    return signal.signal(signal.SIGINT, _handler)


def psa(
    fitted: Path = typer.Option(..., "--fitted", help="JSON/YAML file with comparator and intervention fits"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON run configuration"),
    groups: Optional[int] = typer.Option(None, "--groups", help="Number of equal-probability strata"),
    iterations: Optional[int] = typer.Option(None, "--iterations", help="Number of Monte Carlo iterations"),
    confidence: Optional[float] = typer.Option(None, "--confidence", help="Two-sided interval level"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Master seed for per-iteration streams"),
    policy: Optional[str] = typer.Option(None, "--policy", help="Iteration failure policy: strict|lenient"),
    workers: Optional[int] = typer.Option(None, "--workers", help="Thread pool size (default: inline)"),
    as_json: bool = typer.Option(False, "--json", help="Print machine-readable JSON instead of a table"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Directory for CSV/JSON artifacts"),
) -> None:
    """Propagate parameter uncertainty and report mean and interval per output."""

    cfg = load_config_with_precedence(
        config_path=config,
        env_prefix="HIE_",
        cli_values={
            "groups": groups,
            "iterations": iterations,
            "confidence": confidence,
            "seed": seed,
            "policy": policy,
            "workers": workers,
        },
        defaults=DEFAULTS,
        casters=CASTERS,
        section="psa",
    )
    run_config = RunConfig(
        n_groups=cfg["groups"],
        n_iterations=cfg["iterations"],
        confidence_level=cfg["confidence"],
        seed=cfg["seed"],
        failure_policy=cfg["policy"],
        max_workers=cfg["workers"],
    )
    comparator, intervention = load_fitted_models(fitted)

    cancel = threading.Event()
    previous = _install_cancel_handler(cancel)
    try:
        report = run_from_config(comparator, intervention, run_config, cancel_event=cancel)
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)

    payload = report.to_dict()
    if output_dir is not None:
        meta = RunMeta.capture_context(
            run_id=uuid.uuid4().hex,
            mode="psa",
            config=run_config.to_dict(),
            inputs={"fitted": str(fitted), "config": str(config) if config else None},
            seed=run_config.seed,
            n_successful=report.n_successful,
            n_skipped=report.n_skipped,
            cancelled=report.cancelled,
        )
        payload["artifacts"] = write_artifacts(
            output_dir, meta, {"iterations": report.results, "summary": report.to_frame()}
        )

    if as_json:
        echo_json(payload)
    else:
        console.print(psa_table(report))
        console.print(
            f"Iterations: {report.n_successful} successful, {report.n_skipped} skipped"
            + (f", {report.n_not_run} not run (cancelled)" if report.cancelled else "")
        )
    log.info(
        "psa command completed",
        extra={"n_successful": report.n_successful, "n_skipped": report.n_skipped},
    )
