import json

import pytest

from health_inequality.config.loader import load_config_with_precedence, load_mapping
from health_inequality.exceptions import ConfigError, ConfigValidationError

DEFAULTS = {"groups": 5, "iterations": 1000, "policy": "strict"}
CASTERS = {"groups": int, "iterations": int, "policy": str}


def _load(**kwargs):
    params = {
        "config_path": None,
        "env_prefix": "HIE_",
        "cli_values": {},
        "defaults": DEFAULTS,
        "casters": CASTERS,
        "environ": {},
    }
    params.update(kwargs)
    return load_config_with_precedence(**params)


def test_defaults_only():
    assert _load() == DEFAULTS


def test_precedence_cli_over_env_over_file(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("psa:\n  groups: 7\n  iterations: 50\n  policy: lenient\n")
    cfg = _load(
        config_path=path,
        section="psa",
        environ={"HIE_ITERATIONS": "80"},
        cli_values={"policy": "strict", "groups": None},
    )
    assert cfg == {"groups": 7, "iterations": 80, "policy": "strict"}


def test_json_config_and_casting(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"groups": "9"}))
    assert _load(config_path=path)["groups"] == 9


def test_bad_cast_raises_validation_error():
    with pytest.raises(ConfigValidationError):
        _load(environ={"HIE_GROUPS": "many"})


def test_load_mapping_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_mapping(tmp_path / "missing.yaml")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ConfigError):
        load_mapping(bad)
    scalar = tmp_path / "scalar.yaml"
    scalar.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_mapping(scalar)
