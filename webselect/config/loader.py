"""
Configuration file loader for webselect.

This module provides functions to load configuration from JSON, YAML and TOML
files, merged with environment variables and programmatic overrides.
"""

import json
import tomllib
from pathlib import Path
from typing import Any, Optional, Union

from .defaults import (
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import WebselectConfig


class ConfigurationError(Exception):
    """Configuration loading or parsing error."""

    pass


def _load_json(path: Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        import yaml
    except ImportError:
        raise ConfigurationError(
            "PyYAML is required to load YAML config files. "
            "Install with: pip install webselect[yaml]"
        )

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Load configuration from file based on extension.

    Args:
        path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file is missing, malformed or of an
            unsupported format
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()

    try:
        if suffix == ".json":
            data = _load_json(path)
        elif suffix in (".yaml", ".yml"):
            data = _load_yaml(path)
        elif suffix == ".toml":
            data = _load_toml(path)
        else:
            raise ConfigurationError(f"Unsupported configuration format: {suffix}")
    except (ValueError, OSError) as e:
        raise ConfigurationError(f"Failed to parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration in {path} must be a mapping")

    return data


def find_config_file(
    filename: str = DEFAULT_CONFIG_FILENAME,
    search_paths: Optional[list[str]] = None,
    extensions: Optional[list[str]] = None,
) -> Optional[Path]:
    """Find configuration file in search paths.

    Args:
        filename: Base filename without extension
        search_paths: Directories to search
        extensions: File extensions to try

    Returns:
        Path to config file or None if not found
    """
    if search_paths is None:
        search_paths = DEFAULT_CONFIG_SEARCH_PATHS

    if extensions is None:
        extensions = DEFAULT_CONFIG_EXTENSIONS

    for search_path in search_paths:
        search_dir = Path(search_path).expanduser()

        for ext in extensions:
            config_path = search_dir / f"{filename}{ext}"
            if config_path.exists():
                return config_path

    return None


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Deep merge multiple configuration dictionaries.

    Later configs take precedence over earlier ones.
    """
    result: dict[str, Any] = {}

    for config in configs:
        _deep_merge(result, config)

    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        elif isinstance(value, dict):
            base[key] = {}
            _deep_merge(base[key], value)
        else:
            base[key] = value


class ConfigLoader:
    """Configuration loader with support for multiple sources.

    Priority (highest to lowest):
    1. Programmatic overrides
    2. Environment variables
    3. Configuration file
    4. Default values
    """

    def __init__(
        self,
        config_file: Optional[Union[str, Path]] = None,
        search_paths: Optional[list[str]] = None,
        load_env: bool = True,
        auto_find: bool = True,
    ):
        """Initialize configuration loader.

        Args:
            config_file: Explicit path to configuration file
            search_paths: Directories to search for config files
            load_env: Whether to load environment variables
            auto_find: Whether to auto-find config files
        """
        self.config_file = Path(config_file) if config_file else None
        self.search_paths = search_paths or DEFAULT_CONFIG_SEARCH_PATHS
        self.load_env = load_env
        self.auto_find = auto_find
        self._file_config: Optional[dict[str, Any]] = None
        self._env_config: Optional[dict[str, Any]] = None

    def load(self, overrides: Optional[dict[str, Any]] = None) -> WebselectConfig:
        """Load configuration from all sources.

        Args:
            overrides: Programmatic configuration overrides

        Returns:
            Loaded configuration

        Raises:
            ConfigurationError: If an explicit config file cannot be loaded
                or the merged values fail validation
        """
        configs = [self._load_file_config()]

        if self.load_env:
            configs.append(self._load_env_config())

        if overrides:
            configs.append(overrides)

        merged = merge_configs(*configs)

        try:
            return WebselectConfig.from_dict(merged)
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _load_file_config(self) -> dict[str, Any]:
        if self._file_config is not None:
            return self._file_config

        config_path = self.config_file

        if config_path is None and self.auto_find:
            config_path = find_config_file(search_paths=self.search_paths)

        self._file_config = load_file(config_path) if config_path is not None else {}
        return self._file_config

    def _load_env_config(self) -> dict[str, Any]:
        if self._env_config is None:
            self._env_config = load_env_config()
        return self._env_config

    def reload(self) -> WebselectConfig:
        """Reload configuration from all sources."""
        self._file_config = None
        self._env_config = None
        return self.load()


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
) -> WebselectConfig:
    """Convenience function to load configuration.

    Args:
        config_file: Path to configuration file
        overrides: Programmatic overrides
        load_env: Whether to load environment variables

    Returns:
        Loaded configuration
    """
    loader = ConfigLoader(config_file=config_file, load_env=load_env)
    return loader.load(overrides=overrides)


def save_config(
    config: WebselectConfig,
    path: Union[str, Path],
    format: str = "json",
) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save
        path: Output file path
        format: Output format (json, yaml)

    Raises:
        ConfigurationError: If format is not supported
    """
    path = Path(path)
    data = config.to_dict()

    if format == "json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, default=str)

    elif format in ("yaml", "yml"):
        try:
            import yaml
        except ImportError:
            raise ConfigurationError(
                "PyYAML is required to save YAML config files. "
                "Install with: pip install webselect[yaml]"
            )
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False)

    else:
        raise ConfigurationError(f"Unsupported output format: {format}")
