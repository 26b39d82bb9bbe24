"""
Configuration management for the creational pattern demos.
"""
from .config_manager import (
    DEFAULT_CONFIG,
    ENV_PREFIX,
    Config,
    ConfigManager,
    get_config_manager,
    load_config,
    get_config,
    set_config
)

__all__ = [
    'DEFAULT_CONFIG',
    'ENV_PREFIX',
    'Config',
    'ConfigManager',
    'get_config_manager',
    'load_config',
    'get_config',
    'set_config',
]
