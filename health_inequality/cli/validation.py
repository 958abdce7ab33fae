"""CLI validation helpers."""

from __future__ import annotations

from health_inequality.exceptions import ConfigValidationError


def require_positive(name: str, value: int | float) -> None:
    if value is None or value <= 0:
        raise ConfigValidationError(f"{name} must be > 0")

