"""
Configuration management for the goniometry command line.
Provides centralized access to output and logging settings.
"""

import yaml
import logging
from pathlib import Path
from typing import Any, Optional


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""
    pass


class Config:
    """
    Singleton configuration manager.

    Loads configuration parameters from a YAML file.
    Supports nested configuration access via dot notation.

    Example:
        >>> config = Config()
        >>> config.get('logging.level', default='WARNING')
        'WARNING'
    """

    _instance = None
    _config_data = None

    def __new__(cls, config_path: str = "goniometry.yaml"):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._load_config(config_path)
        return cls._instance

    def _load_config(self, config_path: str) -> None:
        """Load configuration from YAML file."""
        config_file = Path(config_path)

        if not config_file.exists():
            logging.debug(f"Config file {config_path} not found. Using defaults.")
            self._config_data = self._get_default_config()
            return

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing config file: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading config file: {e}")

        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")

        self._config_data = self._merge(self._get_default_config(), loaded)
        logging.info(f"Configuration loaded from {config_path}")

    @staticmethod
    def _merge(defaults: dict, overrides: dict) -> dict:
        """Merge loaded values over the defaults, section by section."""
        merged = dict(defaults)
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = {**merged[key], **value}
            else:
                merged[key] = value
        return merged

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            path: Dot-separated path to config value (e.g., 'logging.level')
            default: Default value if path not found

        Returns:
            Configuration value or default
        """
        if self._config_data is None:
            return default

        keys = path.split('.')
        value = self._config_data

        for key in keys:
            if isinstance(value, dict):
                value = value.get(key)
                if value is None:
                    return default
            else:
                return default

        return value

    def get_section(self, section: str) -> dict:
        """Get entire configuration section."""
        if self._config_data is None:
            return {}
        return self._config_data.get(section, {})

    def _get_default_config(self) -> dict:
        """Return default configuration if file not found."""
        return {
            'output': {
                'decimal_precision': None,
                'radian_precision': None
            },
            'logging': {
                'level': 'WARNING',
                'json': False
            }
        }

    def reload(self, config_path: str = "goniometry.yaml") -> None:
        """Reload configuration from file."""
        self._load_config(config_path)

    def validate(self) -> bool:
        """
        Validate configuration values.

        Returns:
            True if configuration is valid

        Raises:
            ConfigurationError: If configuration is invalid
        """
        for field in ('output.decimal_precision', 'output.radian_precision'):
            precision = self.get(field)
            if precision is None:
                continue
            if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
                raise ConfigurationError(f"Invalid precision for '{field}': {precision}")

        level = self.get('logging.level', 'WARNING')
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ConfigurationError(f"Invalid logging level: {level}")

        if not isinstance(self.get('logging.json', False), bool):
            raise ConfigurationError("Option 'logging.json' must be true or false")

        return True

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded instance so the next Config() reads again."""
        global _config_instance
        cls._instance = None
        _config_instance = None


# Convenience function for direct access
_config_instance: Optional[Config] = None


def get_config(config_path: Optional[str] = None) -> Config:
    """Get global configuration instance."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config(config_path) if config_path else Config()
    return _config_instance
