"""
Config Module
Configuration management.
"""

from .settings import (
    Config,
    ConfigManager,
    build_providers,
    config_from_env,
    get_minds_dirs,
    get_minds_home,
    parse_conflict_strategy,
    parse_script_timeout,
)

__all__ = [
    "Config",
    "ConfigManager",
    "build_providers",
    "config_from_env",
    "get_minds_dirs",
    "get_minds_home",
    "parse_conflict_strategy",
    "parse_script_timeout",
]
