"""
Configuration loading utilities.

Supports environment variable interpolation in YAML values.
An empty or missing section falls back to the model defaults.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from radarsheet.config.settings import LoggingConfig, RadarConfig


def _interpolate_env_vars(value: str) -> str:
    """Replace ${VAR} and ${VAR:default} references with environment values."""
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Apply env var substitution to every string nested in a YAML document."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def load_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping with env var references already substituted."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config root must be a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return _process_config_values(data)


def load_config(config_path: Path | None = None) -> RadarConfig:
    """
    Load radar configuration from a YAML file.

    Recognized keys: ``max_rings``, ``placeholder_prefix``, ``sheet_name``
    and a ``logging`` section with ``level`` and ``json_output``.

    Args:
        config_path: Path to the configuration file. Defaults are used
            when omitted.

    Returns:
        Fully validated RadarConfig instance.
    """
    if config_path is None:
        return RadarConfig()

    data = load_yaml(config_path)

    # Interpolated values arrive as strings; empty means "use default"
    values: dict[str, Any] = {
        key: data[key]
        for key in ("max_rings", "placeholder_prefix", "sheet_name")
        if data.get(key) not in (None, "")
    }

    logging_data = data.get("logging") or {}
    logging_config = LoggingConfig(
        **{k: v for k, v in logging_data.items() if v not in (None, "")}
    )

    return RadarConfig(logging=logging_config, **values)
