import math

import numpy as np
import pytest

from health_inequality.distributions import (
    GammaDistribution,
    LogLogisticDistribution,
    WeibullDistribution,
    get_distribution,
    normalize_family,
)
from health_inequality.exceptions import InvalidParameterError, SchemaError


def test_weibull_quantile_matches_closed_form():
    dist = WeibullDistribution(3.0, 10.0)
    p = np.array([0.1, 0.5, 0.9])
    expected = [10.0 * (-math.log(1 - q)) ** (1 / 3.0) for q in p]
    assert dist.quantile(p) == pytest.approx(expected)
    assert dist.median() == pytest.approx(10.0 * math.log(2) ** (1 / 3.0))


def test_loglogistic_median_is_scale():
    dist = LogLogisticDistribution(2.5, 7.0)
    assert dist.median() == pytest.approx(7.0)
    assert float(dist.survival(7.0)) == pytest.approx(0.5)


def test_gamma_uses_rate_parameterisation():
    dist = GammaDistribution(1.0, 0.5)
    # shape 1 is exponential with mean 1 / rate
    assert float(dist.quantile(0.5)) == pytest.approx(2.0 * math.log(2))


@pytest.mark.parametrize("params", [(0.0, 1.0), (-1.0, 2.0), (1.0, float("inf")), (float("nan"), 1.0)])
def test_invalid_parameters_rejected(params):
    with pytest.raises(InvalidParameterError):
        WeibullDistribution(*params)


def test_wrong_parameter_count_rejected():
    with pytest.raises(InvalidParameterError):
        WeibullDistribution(1.0)


def test_factory_dispatch_and_aliases():
    assert isinstance(get_distribution("Weibull", [2.0, 3.0]), WeibullDistribution)
    assert normalize_family("log-logistic") == "loglogistic"
    assert get_distribution("llogis", [2.0, 3.0]) == LogLogisticDistribution(2.0, 3.0)


def test_factory_unknown_family():
    with pytest.raises(SchemaError):
        get_distribution("gompertz", [1.0, 1.0])
