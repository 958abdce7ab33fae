import numpy as np
import pytest

from health_inequality.distributions import WeibullDistribution
from health_inequality.exceptions import InvalidParameterError, SingularCovarianceError
from health_inequality.mc.resampler import resample, sample_parameters, validate_covariance
from health_inequality.schema.fitted import FittedDistribution


def _fitted(cov=None):
    cov = [[0.01, 0.002], [0.002, 0.02]] if cov is None else cov
    return FittedDistribution(family="weibull", estimate=np.log([3.0, 10.0]), covariance=cov)


def test_same_seed_same_draw():
    fitted = _fitted()
    assert np.array_equal(sample_parameters(fitted, 17), sample_parameters(fitted, 17))
    assert resample(fitted, 17) == resample(fitted, 17)


def test_draw_independent_of_prior_draws():
    fitted = _fitted()
    first = sample_parameters(fitted, 5)
    for seed in range(10):
        sample_parameters(fitted, seed)
    assert np.array_equal(first, sample_parameters(fitted, 5))


def test_different_seeds_differ():
    fitted = _fitted()
    assert not np.array_equal(sample_parameters(fitted, 1), sample_parameters(fitted, 2))


def test_zero_covariance_returns_point_estimate():
    fitted = _fitted(np.zeros((2, 2)))
    dist = resample(fitted, 99)
    assert isinstance(dist, WeibullDistribution)
    assert np.array_equal(np.asarray(dist.params), fitted.natural_parameters())


def test_draws_are_positive_on_natural_scale():
    fitted = _fitted([[4.0, 0.0], [0.0, 4.0]])
    for seed in range(20):
        assert (sample_parameters(fitted, seed) > 0).all()


def test_sample_moments_follow_covariance():
    cov = np.array([[0.04, 0.01], [0.01, 0.09]])
    fitted = _fitted(cov)
    draws = np.log([sample_parameters(fitted, seed) for seed in range(4000)])
    assert draws.mean(axis=0) == pytest.approx(fitted.estimate, abs=0.02)
    assert np.cov(draws.T) == pytest.approx(cov, abs=0.01)


@pytest.mark.parametrize(
    "cov",
    [
        [[1.0, 0.0], [0.0, -1.0]],
        [[1.0, 2.0], [2.0, 1.0]],
        [[1.0, 0.5], [0.1, 1.0]],
    ],
)
def test_non_psd_covariance_rejected(cov):
    with pytest.raises(SingularCovarianceError):
        resample(_fitted(cov), 1)


def test_validate_covariance_accepts_rank_deficient_psd():
    validate_covariance(np.array([[1.0, 1.0], [1.0, 1.0]]))


def test_overflowing_draw_raises_invalid_parameter():
    fitted = FittedDistribution(family="weibull", estimate=[1000.0, 1.0], covariance=np.zeros((2, 2)))
    with pytest.raises(InvalidParameterError):
        resample(fitted, 0)
