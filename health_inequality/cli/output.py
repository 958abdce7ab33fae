"""Console rendering and artifact writing for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd
import typer
from rich.console import Console
from rich.table import Table

from health_inequality.mc.engine import ProbabilisticReport
from health_inequality.schema.run_meta import RunMeta
from health_inequality.simulation.deterministic import BaseCaseResult

console = Console()


def base_case_table(result: BaseCaseResult) -> Table:
    table = Table(title="Base-case inequality impact")
    table.add_column("Metric")
    table.add_column("Comparator", justify="right")
    table.add_column("Intervention", justify="right")
    table.add_column("Absolute change", justify="right")
    table.add_column("Relative change", justify="right")
    table.add_row(
        "AD",
        f"{result.comparator.ad:.4f}",
        f"{result.intervention.ad:.4f}",
        f"{result.impact.ad_absolute:.4f}",
        f"{result.impact.ad_relative:.2%}",
    )
    table.add_row(
        "IG",
        f"{result.comparator.ig:.4f}",
        f"{result.intervention.ig:.4f}",
        f"{result.impact.ig_absolute:.4f}",
        f"{result.impact.ig_relative:.2%}",
    )
    return table


def psa_table(report: ProbabilisticReport) -> Table:
    pct = round(report.confidence_level * 100, 2)
    table = Table(title=f"Probabilistic sensitivity analysis ({pct:g}% interval)")
    table.add_column("Output")
    table.add_column("Mean", justify="right")
    table.add_column("Lower", justify="right")
    table.add_column("Upper", justify="right")
    for name, stat in report.summaries.items():
        table.add_row(name, f"{stat.mean:.4f}", f"{stat.lower:.4f}", f"{stat.upper:.4f}")
    return table


def write_artifacts(
    output_dir: Path,
    meta: RunMeta,
    frames: dict[str, pd.DataFrame],
) -> dict[str, str]:
    """Write ``<name>.csv`` for each frame plus run_meta.json; return written paths."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written: dict[str, str] = {}
    for name, frame in frames.items():
        path = output_dir / f"{name}.csv"
        frame.to_csv(path)
        written[name] = str(path)
    meta_path = output_dir / "run_meta.json"
    meta.write_atomic(meta_path)
    written["run_meta"] = str(meta_path)
    return written


def echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, default=float))
