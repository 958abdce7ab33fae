"""Log-logistic survival model."""

from __future__ import annotations

from scipy.stats import fisk

from health_inequality.interfaces.distribution import SurvivalDistribution


class LogLogisticDistribution(SurvivalDistribution):
    """Log-logistic with S(t) = 1 / (1 + (t / scale) ** shape)."""

    name = "loglogistic"
    param_names = ("shape", "scale")

    @property
    def shape(self) -> float:
        return self.params[0]

    @property
    def scale(self) -> float:
        return self.params[1]

    def _frozen(self):
        return fisk(c=self.shape, scale=self.scale)
