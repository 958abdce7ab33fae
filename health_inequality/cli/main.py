"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from health_inequality.cli.commands.base_case import base_case
from health_inequality.cli.commands.psa import psa
from health_inequality.exceptions import (
    ConfigError,
    DivisionByZeroError,
    InsufficientGroupsError,
    InvalidGroupCountError,
    InvalidParameterError,
    SchemaError,
    SimulationError,
    SingularCovarianceError,
)
from health_inequality.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Health inequality impact with probabilistic sensitivity analysis")

app.command("base-case")(base_case)
app.command("psa")(psa)

log = get_logger(__name__, component="cli")

EXIT_CODES: tuple[tuple[type[Exception], int, str], ...] = (
    (ConfigError, 1, "Configuration invalid"),
    (SchemaError, 2, "Fitted model input invalid"),
    (InvalidParameterError, 3, "Distribution parameters invalid"),
    (SingularCovarianceError, 3, "Covariance matrix invalid"),
    (InvalidGroupCountError, 4, "Group count invalid"),
    (InsufficientGroupsError, 4, "Metric undefined"),
    (DivisionByZeroError, 4, "Relative change undefined"),
    (SimulationError, 5, "Simulation failed"),
)


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except KeyboardInterrupt:
        log.info("Shutdown requested.")
        raise SystemExit(130)
    except Exception as exc:
        for exc_type, code, label in EXIT_CODES:
            if isinstance(exc, exc_type):
                log.error(f"{label}: {exc}")
                raise SystemExit(code) from exc
        log.exception("Unhandled exception")
        raise SystemExit(255) from exc


if __name__ == "__main__":
    sys.exit(main())
