"""
Configuration management for credprobe.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Local .env file (CREDPROBE_ENV_FILE or ./.credprobe.env)
3. Global config file (~/.credprobe/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_env_file_path,
    get_global_config_path,
    load_env_file,
    load_global_config,
    load_local_config,
)
from .getters import get_bool, get_config, get_float, get_int, load_probe_config

__all__ = [
    "get_bool",
    "get_config",
    "get_env_file_path",
    "get_float",
    "get_global_config_path",
    "get_int",
    "load_env_file",
    "load_global_config",
    "load_local_config",
    "load_probe_config",
]
