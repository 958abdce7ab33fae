"""Weibull survival model."""

from __future__ import annotations

from scipy.stats import weibull_min

from health_inequality.interfaces.distribution import SurvivalDistribution


class WeibullDistribution(SurvivalDistribution):
    """Weibull with S(t) = exp(-(t / scale) ** shape)."""

    name = "weibull"
    param_names = ("shape", "scale")

    @property
    def shape(self) -> float:
        return self.params[0]

    @property
    def scale(self) -> float:
        return self.params[1]

    def _frozen(self):
        return weibull_min(c=self.shape, scale=self.scale)
