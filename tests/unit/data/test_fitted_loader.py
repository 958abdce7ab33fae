import json

import pytest

from health_inequality.data.loader import dump_fitted_models, load_fitted_models
from health_inequality.exceptions import SchemaError
from health_inequality.schema.fitted import FittedDistribution


def test_load_fitted_models_json(tmp_path):
    comparator = FittedDistribution.from_natural("weibull", [3.5, 8.0], covariance=[[0.01, 0.0], [0.0, 0.02]])
    intervention = FittedDistribution.from_natural("weibull", [3.0, 10.0])
    path = tmp_path / "fits.json"
    path.write_text(json.dumps(dump_fitted_models(comparator, intervention)))
    loaded_c, loaded_i = load_fitted_models(path)
    assert loaded_c == comparator
    assert loaded_i == intervention
    assert loaded_c.label == "comparator"
    assert loaded_i.label == "intervention"


def test_load_fitted_models_yaml(tmp_path):
    path = tmp_path / "fits.yaml"
    path.write_text(
        "comparator:\n"
        "  family: weibull\n"
        "  estimate: [1.25, 2.08]\n"
        "  covariance: [[0.01, 0.0], [0.0, 0.01]]\n"
        "intervention:\n"
        "  family: loglogistic\n"
        "  estimate: [1.1, 2.3]\n"
        "  covariance: [[0.0, 0.0], [0.0, 0.0]]\n"
    )
    comparator, intervention = load_fitted_models(path)
    assert comparator.family == "weibull"
    assert intervention.family == "loglogistic"


def test_missing_arm_is_schema_error(tmp_path):
    path = tmp_path / "fits.json"
    path.write_text(json.dumps({"comparator": {"family": "weibull", "estimate": [1, 1], "covariance": [[0, 0], [0, 0]]}}))
    with pytest.raises(SchemaError):
        load_fitted_models(path)


def test_missing_file_is_schema_error(tmp_path):
    with pytest.raises(SchemaError):
        load_fitted_models(tmp_path / "nope.json")
