"""Configuration loading with CLI > ENV > file > defaults precedence."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

import yaml

from health_inequality.exceptions import ConfigError, ConfigValidationError
from health_inequality.utils.logging import get_logger

log = get_logger(__name__, component="config")

Caster = Callable[[Any], Any]


def _load_yaml(path: Path) -> dict:
    try:
        content = yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    return content or {}


def load_mapping(path: Path | str) -> dict:
    """Read a YAML or JSON mapping from ``path``."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    if path.suffix.lower() in {".yml", ".yaml"}:
        data = _load_yaml(path)
    else:
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _env_values(env_prefix: str, keys: list[str], environ: Mapping[str, str]) -> dict[str, str]:
    out = {}
    for key in keys:
        name = f"{env_prefix}{key.upper()}"
        if name in environ and environ[name] != "":
            out[key] = environ[name]
    return out


def load_config_with_precedence(
    *,
    config_path: Optional[Path],
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Mapping[str, Caster],
    section: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, Any]:
    """Merge configuration sources; later sources in defaults < file < env < CLI win.

    ``None`` CLI values mean "not supplied". Values from every source pass through
    ``casters[key]`` so environment strings and file scalars end up typed.
    """
    keys = list(defaults)
    merged: dict[str, Any] = dict(defaults)
    sources = {key: "default" for key in keys}

    if config_path is not None:
        file_values = load_mapping(config_path)
        if section is not None:
            file_values = file_values.get(section, {}) or {}
        for key in keys:
            if key in file_values and file_values[key] is not None:
                merged[key] = file_values[key]
                sources[key] = "file"

    for key, value in _env_values(env_prefix, keys, os.environ if environ is None else environ).items():
        merged[key] = value
        sources[key] = "env"

    for key, value in cli_values.items():
        if value is not None:
            merged[key] = value
            sources[key] = "cli"

    for key, value in list(merged.items()):
        caster = casters.get(key)
        if caster is None or value is None:
            continue
        try:
            merged[key] = caster(value)
        except (TypeError, ValueError) as exc:
            raise ConfigValidationError(f"Invalid value for {key}: {value!r} ({sources[key]})") from exc

    log.debug("configuration resolved", extra={"sources": sources})
    return merged


__all__ = ["load_config_with_precedence", "load_mapping"]
