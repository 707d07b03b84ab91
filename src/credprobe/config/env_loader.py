"""Environment variable and configuration file loading."""

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_ENV_FILENAME = ".credprobe.env"


def get_global_config_path() -> Path:
    """Return the path of the global ~/.credprobe/config.yml file."""
    return Path.home() / ".credprobe" / "config.yml"


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.credprobe/config.yml."""
    config_path = get_global_config_path()
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}


def get_env_file_path() -> Path:
    """Return the local .env file: CREDPROBE_ENV_FILE or ./.credprobe.env."""
    override = os.environ.get("CREDPROBE_ENV_FILE")
    if override:
        return Path(override).expanduser()
    return Path.cwd() / DEFAULT_ENV_FILENAME


def load_local_config() -> dict[str, str]:
    """Load the local .env file, if present."""
    return load_env_file(get_env_file_path())
