"""Configuration getter functions."""

import os
from typing import Any

from credprobe.modules.probe.models import (
    DEFAULT_JITTER,
    DEFAULT_USER_AGENT,
    DEFAULT_WAIT,
    MAX_REDIRECTS,
    ProbeConfig,
)

from .env_loader import load_global_config, load_local_config

_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Local .env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check local .env file
    local_config = load_local_config()
    if key in local_config:
        return local_config[key]

    # 3. Check global config
    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    # 4. Return default
    return default


def get_float(key: str, default: float) -> float:
    """Get a numeric setting; malformed values raise ValueError."""
    value = get_config(key, default)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be a number, got {value!r}") from exc


def get_int(key: str, default: int) -> int:
    value = get_config(key, default)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be an integer, got {value!r}") from exc


def get_bool(key: str, default: bool = False) -> bool:
    value = get_config(key, default)
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def load_probe_config(**overrides: Any) -> ProbeConfig:
    """Build a ProbeConfig from configuration sources.

    Keyword overrides (typically CLI options) win over every source; None
    values are ignored so unset options fall through.
    """
    values: dict[str, Any] = {
        "wait": get_float("CREDPROBE_WAIT", DEFAULT_WAIT),
        "jitter": get_float("CREDPROBE_JITTER", DEFAULT_JITTER),
        "verbose": get_bool("CREDPROBE_VERBOSE"),
        "max_redirects": get_int("CREDPROBE_MAX_REDIRECTS", MAX_REDIRECTS),
        "user_agent": get_config("CREDPROBE_USER_AGENT", DEFAULT_USER_AGENT),
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    return ProbeConfig(**values)
