"""Parametric survival distribution families."""

from health_inequality.distributions.factory import FAMILIES, get_distribution, get_family, normalize_family
from health_inequality.distributions.gamma import GammaDistribution
from health_inequality.distributions.loglogistic import LogLogisticDistribution
from health_inequality.distributions.weibull import WeibullDistribution

__all__ = [
    "FAMILIES",
    "GammaDistribution",
    "LogLogisticDistribution",
    "WeibullDistribution",
    "get_distribution",
    "get_family",
    "normalize_family",
]
