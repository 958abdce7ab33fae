import numpy as np
import pytest

from health_inequality.distributions import LogLogisticDistribution, WeibullDistribution
from health_inequality.exceptions import InvalidGroupCountError, InvalidParameterError
from health_inequality.inequality.stratify import stratify, stratum_probabilities


def test_stratum_probabilities_are_midpoints():
    assert stratum_probabilities(5) == pytest.approx([0.1, 0.3, 0.5, 0.7, 0.9])
    assert stratum_probabilities(1) == pytest.approx([0.5])


@pytest.mark.parametrize("n_groups", [1, 2, 5, 10, 101])
@pytest.mark.parametrize(
    "dist",
    [WeibullDistribution(0.5, 2.0), WeibullDistribution(3.0, 10.0), LogLogisticDistribution(4.0, 1.5)],
)
def test_stratify_is_non_decreasing_with_exact_length(dist, n_groups):
    values = stratify(dist, n_groups)
    assert len(values) == n_groups
    assert np.all(np.diff(values) >= 0)
    assert np.all(values >= 0)


def test_stratify_single_group_is_median():
    dist = WeibullDistribution(3.0, 10.0)
    assert stratify(dist, 1) == pytest.approx([dist.median()])


@pytest.mark.parametrize("n_groups", [0, -3, 2.5, True])
def test_invalid_group_count(n_groups):
    with pytest.raises(InvalidGroupCountError):
        stratify(WeibullDistribution(3.0, 10.0), n_groups)


def test_stratify_result_is_read_only():
    values = stratify(WeibullDistribution(3.0, 10.0), 3)
    with pytest.raises(ValueError):
        values[0] = 0.0


def test_overflowing_quantiles_raise_invalid_parameter():
    # shape ~4.5e-5: upper strata overflow to inf while lower ones underflow to 0
    dist = WeibullDistribution(float(np.exp(-10.0)), 10.0)
    with pytest.raises(InvalidParameterError):
        stratify(dist, 5)
