from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from goldbach_pair.usecases.config_models import AppConfig


# ConfigError is raised for invalid configuration (fail fast at startup).
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> AppConfig:
    # YAML loader returning the validated typed config.
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file {path} is not valid YAML") from exc

    # An empty file means "all defaults".
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    return parse_config(raw)


def parse_config(raw: dict[str, Any]) -> AppConfig:
    _validate_top_level(raw)
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Unknown top-level keys get a readable message before pydantic sees them.
    allowed = {"version", "search", "logging"}
    unknown = set(raw.keys()) - allowed
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(str(key) for key in unknown)}")
