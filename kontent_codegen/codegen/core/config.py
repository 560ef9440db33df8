"""
Configuration management for model generation.

Handles loading and merging configuration from JSON files and overrides,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .naming import InvalidConfiguration, Resolver, as_resolver
from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://deliver.kontent.ai"
DEFAULT_SDK_MODULE = "@kentico/kontent-delivery"
DEFAULT_FORMAT_OPTIONS: Dict[str, Any] = {"parser": "typescript", "singleQuote": True}

FORMATTERS = ("prettier", "basic")


class ConfigError(InvalidConfiguration):
    """Exception raised for configuration file errors."""

    pass


@dataclass(frozen=True)
class GenerationConfig:
    """Settings for one generator run."""

    # Delivery API access
    project_id: Optional[str] = None
    secure_access_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: int = 30

    # Naming
    element_resolver: Optional[Resolver] = None
    file_resolver: Optional[Resolver] = None

    # Output
    add_timestamp: bool = False
    output_dir: str = "."
    sdk_module: str = DEFAULT_SDK_MODULE

    # Formatting
    formatter: str = "prettier"
    format_options: Optional[Dict[str, Any]] = None

    # Raise instead of skipping elements of unknown type
    strict_element_kinds: bool = False

    def __post_init__(self):
        """Normalise resolver settings and validate the formatter."""
        object.__setattr__(self, "element_resolver", as_resolver(self.element_resolver))
        object.__setattr__(self, "file_resolver", as_resolver(self.file_resolver))

        if self.formatter not in FORMATTERS:
            raise InvalidConfiguration(
                f"Invalid formatter '{self.formatter}'. "
                f"Available options are: {', '.join(FORMATTERS)}"
            )

    def effective_format_options(self) -> Dict[str, Any]:
        """Options handed to the formatter."""
        if self.format_options:
            return dict(self.format_options)
        return dict(DEFAULT_FORMAT_OPTIONS)


# camelCase keys used by existing generator configs
_KEY_ALIASES = {
    "projectId": "project_id",
    "secureAccessKey": "secure_access_key",
    "baseUrl": "base_url",
    "addTimestamp": "add_timestamp",
    "elementResolver": "element_resolver",
    "fileResolver": "file_resolver",
    "formatOptions": "format_options",
    "outputDir": "output_dir",
    "sdkModule": "sdk_module",
    "strictElementKinds": "strict_element_kinds",
}


class ConfigManager:
    """Manages configuration loading and merging."""

    def get_config(
        self,
        config_file: Optional[Union[str, Path]] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> GenerationConfig:
        """
        Build a configuration from defaults, a file and overrides.

        Args:
            config_file: Path to JSON configuration file
            overrides: Values that take precedence over the file

        Returns:
            Merged configuration
        """
        merged: Dict[str, Any] = {}

        if config_file:
            merged.update(self._normalize_keys(self._load_config_file(config_file)))

        if overrides:
            merged.update(
                {k: v for k, v in self._normalize_keys(overrides).items() if v is not None}
            )

        return self._dict_to_config(merged)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _normalize_keys(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        return {_KEY_ALIASES.get(key, key): value for key, value in config_dict.items()}

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GenerationConfig:
        """Convert dictionary to GenerationConfig instance."""
        known_fields = {f.name for f in fields(GenerationConfig)}

        config_args = {}
        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                logger.warning("Ignoring unknown configuration key '%s'", key)

        return GenerationConfig(**config_args)


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> GenerationConfig:
    """
    Convenience function to load configuration.

    Args:
        config_file: Path to JSON configuration file
        overrides: Values that take precedence over the file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(config_file, overrides)
