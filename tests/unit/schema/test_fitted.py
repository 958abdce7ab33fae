import numpy as np
import pytest

from health_inequality.distributions import WeibullDistribution
from health_inequality.exceptions import SchemaError
from health_inequality.schema.fitted import FittedDistribution


def test_natural_parameters_are_exponentiated():
    fitted = FittedDistribution(family="weibull", estimate=[0.0, np.log(10.0)], covariance=np.eye(2))
    assert fitted.natural_parameters() == pytest.approx([1.0, 10.0])
    assert fitted.param_names == ("shape", "scale")
    assert fitted.point_distribution() == WeibullDistribution(*fitted.natural_parameters())


def test_fitted_is_immutable_and_copies_inputs():
    estimate = np.array([1.0, 2.0])
    fitted = FittedDistribution(family="weibull", estimate=estimate, covariance=np.zeros((2, 2)))
    estimate[0] = 99.0
    assert fitted.estimate[0] == 1.0
    with pytest.raises(ValueError):
        fitted.estimate[0] = 5.0
    with pytest.raises(AttributeError):
        fitted.family = "gamma"


def test_family_is_normalized():
    fitted = FittedDistribution(family="Log-Logistic", estimate=[0.1, 0.2], covariance=np.zeros((2, 2)))
    assert fitted.family == "loglogistic"


@pytest.mark.parametrize(
    "estimate,covariance",
    [
        ([1.0], np.zeros((2, 2))),
        ([1.0, 2.0], np.zeros((3, 3))),
        ([1.0, 2.0], [0.0, 0.0]),
        ([1.0, float("nan")], np.zeros((2, 2))),
        (["a", "b"], np.zeros((2, 2))),
    ],
)
def test_schema_errors(estimate, covariance):
    with pytest.raises(SchemaError):
        FittedDistribution(family="weibull", estimate=estimate, covariance=covariance)


def test_dict_round_trip_preserves_label():
    fitted = FittedDistribution.from_natural("weibull", [3.0, 10.0], label="comparator")
    restored = FittedDistribution.from_dict(fitted.to_dict())
    assert restored == fitted
    assert restored.label == "comparator"


def test_from_dict_missing_keys():
    with pytest.raises(SchemaError):
        FittedDistribution.from_dict({"family": "weibull", "estimate": [1.0, 1.0]})


def test_from_natural_defaults_to_zero_covariance():
    fitted = FittedDistribution.from_natural("gamma", [2.0, 0.5])
    assert np.array_equal(fitted.covariance, np.zeros((2, 2)))
    with pytest.raises(SchemaError):
        FittedDistribution.from_natural("weibull", [0.0, 1.0])
