"""Factory for survival distribution families."""

from __future__ import annotations

from typing import Sequence

from health_inequality.distributions.gamma import GammaDistribution
from health_inequality.distributions.loglogistic import LogLogisticDistribution
from health_inequality.distributions.weibull import WeibullDistribution
from health_inequality.exceptions import SchemaError
from health_inequality.interfaces.distribution import SurvivalDistribution

FAMILIES: dict[str, type[SurvivalDistribution]] = {
    "weibull": WeibullDistribution,
    "loglogistic": LogLogisticDistribution,
    "gamma": GammaDistribution,
}

_ALIASES = {
    "log-logistic": "loglogistic",
    "log_logistic": "loglogistic",
    "llogis": "loglogistic",
}


def normalize_family(name: str) -> str:
    key = str(name).strip().lower()
    key = _ALIASES.get(key, key)
    if key not in FAMILIES:
        raise SchemaError(f"Unknown distribution family: {name!r}. Supported: {sorted(FAMILIES)}")
    return key


def get_family(name: str) -> type[SurvivalDistribution]:
    return FAMILIES[normalize_family(name)]


def get_distribution(name: str, params: Sequence[float]) -> SurvivalDistribution:
    """Build a concrete distribution from natural-scale parameters."""
    return get_family(name).from_natural(params)


__all__ = ["FAMILIES", "get_distribution", "get_family", "normalize_family"]
