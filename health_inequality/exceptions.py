"""Project-wide exception types."""

class HealthInequalityError(Exception):
    """Base exception for all engine errors."""


class InvalidParameterError(HealthInequalityError):
    """Raised when distribution parameters are non-positive or non-finite."""


class InvalidGroupCountError(HealthInequalityError):
    """Raised when a health distribution is requested with fewer than one group."""


class InsufficientGroupsError(HealthInequalityError):
    """Raised when a metric needs at least two groups to be defined."""


class DivisionByZeroError(HealthInequalityError):
    """Raised when a relative change has a comparator value of exactly zero."""


class SingularCovarianceError(HealthInequalityError):
    """Raised when a covariance matrix is not symmetric positive semi-definite."""


class SchemaError(HealthInequalityError):
    """Raised when fitted-model input fails schema checks."""


class ConfigError(HealthInequalityError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""


class SimulationError(HealthInequalityError):
    """Raised when a probabilistic run produces no usable iterations."""
