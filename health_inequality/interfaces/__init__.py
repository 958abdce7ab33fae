"""Abstract interfaces shared across the engine."""

from health_inequality.interfaces.distribution import SurvivalDistribution

__all__ = ["SurvivalDistribution"]
