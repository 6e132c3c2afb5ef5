from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from line_reader.config.models import AppConfig

SUPPORTED_VERSIONS = {1}
_TOP_LEVEL_KEYS = {"version", "input", "output", "logging"}


# ConfigError is raised for invalid configuration (fail fast, no partial defaults).
class ConfigError(ValueError):
    pass


def default_config() -> AppConfig:
    # Used when the CLI is run without --config.
    return AppConfig(version=1)


def load_config(path: Path) -> AppConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc.strerror or exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config {path} is not valid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    _validate_top_level(raw)

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path}: {exc}") from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Unknown keys are reported by name before model validation for a clearer message.
    unknown = set(raw.keys()) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")

    if "version" not in raw:
        raise ConfigError("Missing required top-level key: version")
    version = raw["version"]
    if not isinstance(version, int) or version not in SUPPORTED_VERSIONS:
        raise ConfigError(f"Unsupported config version: {version!r}")
