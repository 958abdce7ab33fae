"""Base-case (deterministic) CLI command."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Optional

import pandas as pd
import typer

from health_inequality.cli.output import base_case_table, console, echo_json, write_artifacts
from health_inequality.cli.validation import require_positive
from health_inequality.data.loader import load_fitted_models
from health_inequality.schema.run_meta import RunMeta
from health_inequality.simulation.deterministic import run_base_case
from health_inequality.utils.logging import get_logger

log = get_logger(__name__, component="cli.base_case")


def base_case(
    fitted: Path = typer.Option(..., "--fitted", help="JSON/YAML file with comparator and intervention fits"),
    groups: int = typer.Option(5, "--groups", help="Number of equal-probability strata"),
    as_json: bool = typer.Option(False, "--json", help="Print machine-readable JSON instead of a table"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Directory for CSV/JSON artifacts"),
) -> None:
    """Compute AD/IG per arm and the intervention's impact at the point estimates."""

    require_positive("groups", groups)
    comparator, intervention = load_fitted_models(fitted)
    result = run_base_case(comparator, intervention, groups)

    payload = {
        "n_groups": groups,
        "outputs": result.to_dict(),
        "health_distribution": {
            "comparator": result.health_comparator.tolist(),
            "intervention": result.health_intervention.tolist(),
        },
    }
    if output_dir is not None:
        meta = RunMeta.capture_context(
            run_id=uuid.uuid4().hex,
            mode="base_case",
            config={"n_groups": groups},
            inputs={"fitted": str(fitted)},
            seed=None,
        )
        health = pd.DataFrame(
            {"comparator": result.health_comparator, "intervention": result.health_intervention},
            index=pd.RangeIndex(1, groups + 1, name="group"),
        )
        outputs = pd.Series(result.to_dict(), name="value").rename_axis("output").to_frame()
        payload["artifacts"] = write_artifacts(output_dir, meta, {"health_distribution": health, "base_case": outputs})

    if as_json:
        echo_json(payload)
    else:
        console.print(base_case_table(result))
    log.info("base-case command completed", extra={"n_groups": groups})
