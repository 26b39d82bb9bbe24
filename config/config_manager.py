"""
Configuration management for the demo driver.

Sources are layered: built-in defaults, then an optional YAML/JSON file,
then ``CREATIONAL_*`` environment variables.
"""
import os
import json
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from copy import deepcopy
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError

logger = get_logger(__name__)

ENV_PREFIX = "CREATIONAL_"

DEFAULT_CONFIG: Dict[str, Any] = {
    'builder': {
        'variants': ['hawaiian', 'spicy'],
    },
    'application': {
        'capacity': 10,
        'documents': ['foo', 'bar'],
    },
    'factory': {
        'variant': 'simple',
    },
    'logging': {
        'level': 'WARNING',
        'structured': False,
    },
}


class Config:
    """Configuration container with dot notation access."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = data or {}

    def __getattr__(self, key: str) -> Any:
        """Get config value using dot notation."""
        if key.startswith('_'):
            return object.__getattribute__(self, key)

        if key not in self._data:
            raise AttributeError(f"Config has no attribute '{key}'")

        value = self._data[key]
        if isinstance(value, dict):
            return Config(value)
        return value

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any):
        self._data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dotted key, with default."""
        try:
            keys = key.split('.')
            value = self._data
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """Set config value by dotted key."""
        keys = key.split('.')
        data = self._data
        for i, k in enumerate(keys[:-1]):
            if k not in data:
                data[k] = {}
            data = data[k]
            if not isinstance(data, dict):
                section = '.'.join(keys[:i + 1])
                raise ConfigurationError(
                    f"Cannot set '{key}': '{section}' is not a section",
                    details={'key': key, 'conflict': section}
                )
        data[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        return deepcopy(self._data)

    def update(self, other: Dict[str, Any]):
        """Update configuration with another dict."""
        self._deep_update(self._data, other)

    @staticmethod
    def _deep_update(base: Dict, update: Dict):
        """Recursively update nested dictionaries."""
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                Config._deep_update(base[key], value)
            else:
                base[key] = value


class ConfigManager:
    """
    Centralized configuration management with multiple sources.
    """

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        self._config = Config(deepcopy(DEFAULT_CONFIG if defaults is None else defaults))
        self.logger = get_logger(self.__class__.__name__)

    def load_from_file(self, filepath: str):
        """
        Load configuration from file (JSON or YAML).

        Args:
            filepath: Path to configuration file
        """
        path = Path(filepath)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {filepath}",
                details={'filepath': str(path)}
            )

        if path.suffix not in ('.yaml', '.yml', '.json'):
            raise ConfigurationError(
                f"Unsupported file format: {path.suffix}",
                details={'filepath': str(path)}
            )

        try:
            with open(path, 'r') as f:
                if path.suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration in {filepath} must be a mapping",
                details={'filepath': str(path), 'type': type(data).__name__}
            )

        self._config.update(data)
        self.logger.info(f"Loaded configuration from {filepath}")

    def load_from_env(self, prefix: str = ENV_PREFIX, environ: Optional[Dict[str, str]] = None) -> int:
        """
        Load configuration from environment variables.

        ``CREATIONAL_FACTORY_VARIANT=robust`` sets ``factory.variant``.
        Values are parsed as JSON when possible.

        Args:
            prefix: Prefix for environment variables
            environ: Mapping to read instead of os.environ

        Returns:
            Number of values loaded
        """
        environ = os.environ if environ is None else environ
        loaded = 0

        for key, value in environ.items():
            if not key.startswith(prefix):
                continue

            config_key = key[len(prefix):].lower()

            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                parsed_value = value

            # CREATIONAL_FACTORY_VARIANT -> factory.variant
            self._config.set(config_key.replace('_', '.'), parsed_value)
            loaded += 1

        self.logger.info(f"Loaded {loaded} configuration values from environment")
        return loaded

    def load_from_dict(self, data: Dict[str, Any]):
        self._config.update(data)
        self.logger.info("Loaded configuration from dictionary")

    def save_to_file(self, filepath: str, format: str = 'yaml'):
        """
        Save configuration to file.

        Args:
            filepath: Path to save configuration
            format: File format ('yaml' or 'json')
        """
        if format not in ('yaml', 'json'):
            raise ConfigurationError(f"Unsupported format: {format}")

        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(path, 'w') as f:
                if format == 'yaml':
                    yaml.dump(self._config.to_dict(), f, default_flow_style=False)
                else:
                    json.dump(self._config.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration to {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        self.logger.info(f"Saved configuration to {filepath}")

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def get_list(self, key: str, default: Optional[List[Any]] = None) -> List[Any]:
        """
        Get a list-valued setting.

        A plain string (e.g. from ``CREATIONAL_BUILDER_VARIANTS=hawaiian,spicy``)
        is split on commas.
        """
        value = self._config.get(key, default)
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(',') if item.strip()]
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]

    def set(self, key: str, value: Any):
        self._config.set(key, value)
        self.logger.debug(f"Set config: {key} = {value}")

    def get_config(self) -> Config:
        """Get the full configuration object."""
        return self._config


# Global configuration manager instance
_global_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager, seeded from DEFAULT_CONFIG."""
    global _global_config_manager
    if _global_config_manager is None:
        _global_config_manager = ConfigManager()
    return _global_config_manager


def load_config(filepath: str):
    """Load configuration from file into global manager."""
    get_config_manager().load_from_file(filepath)


def get_config(key: str, default: Any = None) -> Any:
    """Get configuration value from global manager."""
    return get_config_manager().get(key, default)


def set_config(key: str, value: Any):
    """Set configuration value in global manager."""
    get_config_manager().set(key, value)
