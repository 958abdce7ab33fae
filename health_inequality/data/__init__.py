"""Fitted-model input loading."""

from health_inequality.data.loader import dump_fitted_models, load_fitted_models, parse_fitted_models

__all__ = ["dump_fitted_models", "load_fitted_models", "parse_fitted_models"]
