"""Gamma survival model (shape/rate parameterisation)."""

from __future__ import annotations

from scipy.stats import gamma

from health_inequality.interfaces.distribution import SurvivalDistribution


class GammaDistribution(SurvivalDistribution):
    name = "gamma"
    param_names = ("shape", "rate")

    @property
    def shape(self) -> float:
        return self.params[0]

    @property
    def rate(self) -> float:
        return self.params[1]

    def _frozen(self):
        return gamma(a=self.shape, scale=1.0 / self.rate)
