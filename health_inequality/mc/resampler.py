"""Parameter resampling from the fitted multivariate normal on the log scale."""

from __future__ import annotations

import numpy as np

from health_inequality.distributions.factory import get_distribution
from health_inequality.exceptions import SingularCovarianceError
from health_inequality.interfaces.distribution import SurvivalDistribution
from health_inequality.schema.fitted import FittedDistribution
from health_inequality.utils.seeds import make_generator

PSD_TOLERANCE = 1e-10


def validate_covariance(covariance: np.ndarray) -> None:
    """Raise SingularCovarianceError unless ``covariance`` is symmetric PSD."""
    cov = np.asarray(covariance, dtype=float)
    if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
        raise SingularCovarianceError(f"covariance must be square, got shape {cov.shape}")
    if not np.isfinite(cov).all():
        raise SingularCovarianceError("covariance contains non-finite values")
    if not np.allclose(cov, cov.T, rtol=1e-10, atol=1e-12):
        raise SingularCovarianceError("covariance is not symmetric")
    eigenvalues = np.linalg.eigvalsh(cov)
    scale = max(1.0, float(np.abs(eigenvalues).max(initial=0.0)))
    if eigenvalues.min(initial=0.0) < -PSD_TOLERANCE * scale:
        raise SingularCovarianceError(
            f"covariance is not positive semi-definite (min eigenvalue {eigenvalues.min():.3e})"
        )


def sample_parameters(fitted: FittedDistribution, rng_seed: int, *, validate: bool = True) -> np.ndarray:
    """Draw one natural-scale parameter vector using a generator private to ``rng_seed``.

    ``validate=False`` skips the PSD check for callers that validated the
    covariance once up front.
    """
    if validate:
        validate_covariance(fitted.covariance)
    rng = make_generator(rng_seed)
    draw = rng.multivariate_normal(fitted.estimate, fitted.covariance, check_valid="ignore")
    return np.exp(draw)


def resample(fitted_distribution: FittedDistribution, rng_seed: int, *, validate: bool = True) -> SurvivalDistribution:
    """Concrete distribution for one Monte Carlo draw.

    With a zero covariance matrix the draw equals the point estimate exactly.
    Draws that overflow to non-finite parameters raise InvalidParameterError.
    """
    params = sample_parameters(fitted_distribution, rng_seed, validate=validate)
    return get_distribution(fitted_distribution.family, params)


__all__ = ["resample", "sample_parameters", "validate_covariance"]
