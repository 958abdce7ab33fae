"""Deterministic inequality pipeline."""

from health_inequality.simulation.deterministic import (
    OUTPUT_COLUMNS,
    BaseCaseResult,
    flatten_outputs,
    run_base_case,
    run_once,
)

__all__ = ["BaseCaseResult", "OUTPUT_COLUMNS", "flatten_outputs", "run_base_case", "run_once"]
