"""Load fitted per-arm survival models from JSON/YAML files."""

from __future__ import annotations

from pathlib import Path

from health_inequality.config.loader import load_mapping
from health_inequality.exceptions import ConfigError, SchemaError
from health_inequality.schema.fitted import FittedDistribution
from health_inequality.utils.logging import get_logger

log = get_logger(__name__, component="data.loader")

ARM_KEYS = ("comparator", "intervention")


def parse_fitted_models(data: dict) -> tuple[FittedDistribution, FittedDistribution]:
    missing = [arm for arm in ARM_KEYS if arm not in data]
    if missing:
        raise SchemaError(f"fitted model input missing arms: {missing}")
    comparator, intervention = (FittedDistribution.from_dict(data[arm], label=arm) for arm in ARM_KEYS)
    return comparator, intervention


def load_fitted_models(path: Path | str) -> tuple[FittedDistribution, FittedDistribution]:
    """Return (comparator, intervention) fitted models from ``path``."""
    try:
        data = load_mapping(path)
    except ConfigError as exc:
        raise SchemaError(str(exc)) from exc
    comparator, intervention = parse_fitted_models(data)
    log.info(
        "fitted models loaded",
        extra={"path": str(path), "comparator": comparator.family, "intervention": intervention.family},
    )
    return comparator, intervention


def dump_fitted_models(comparator: FittedDistribution, intervention: FittedDistribution) -> dict:
    return {"comparator": comparator.to_dict(), "intervention": intervention.to_dict()}


__all__ = ["dump_fitted_models", "load_fitted_models", "parse_fitted_models"]
