"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance
from a sibling ``base.yaml``.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from dataextractor.config.settings import ExtractorConfig

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """

    def replacer(match: re.Match[str]) -> str:
        default = match.group(2)
        return os.environ.get(match.group(1), default if default is not None else "")

    return _ENV_VAR_PATTERN.sub(replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively interpolate environment variables in config values."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping and interpolate environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must contain a mapping at top level: {path}"
        raise ValueError(msg)
    return _process_config_values(data)


def load_config(config_path: Path, base_path: Path | None = None) -> ExtractorConfig:
    """
    Load extractor configuration from YAML file(s).

    A relative ``data_root`` is resolved against the directory of the
    main config file.

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional base configuration; defaults to ``base.yaml``
            next to the main file when present.

    Returns:
        Validated ExtractorConfig instance.
    """
    if base_path is None:
        potential_base = config_path.parent / "base.yaml"
        if potential_base.exists() and potential_base.resolve() != config_path.resolve():
            base_path = potential_base
    base_data = load_yaml(base_path) if base_path is not None else {}

    merged = _deep_merge(base_data, load_yaml(config_path))

    data_root = Path(merged.get("data_root", "."))
    if not data_root.is_absolute():
        data_root = config_path.parent / data_root
    merged["data_root"] = data_root

    if not merged.get("tables"):
        msg = f"Config must declare at least one entry under 'tables': {config_path}"
        raise ValueError(msg)

    return ExtractorConfig.model_validate(merged)
