"""
Configuration module for webselect.

This module provides:
- Strongly-typed option classes (DocumentOptions, LoggingOptions)
- Configuration file loading (JSON, YAML, TOML)
- Environment variable support
- Validation and type checking via Pydantic

Example usage:
    from webselect.config import configure_logging, load_config

    # Load from file with environment overrides
    config = load_config("webselect.config.json")
    configure_logging(config)

    # Create programmatically
    config = WebselectConfig(
        document=DocumentOptions(base_url="https://example.com/"),
        logging=LoggingOptions(level="debug"),
    )

Environment variables:
    WEBSELECT_DOCUMENT_BASE_URL=https://example.com/
    WEBSELECT_DOCUMENT_HIDDEN_STYLES=display:none,visibility:hidden,opacity:0
    WEBSELECT_LOGGING_LEVEL=DEBUG
"""

from .defaults import (
    DEFAULT_HIDDEN_STYLES,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    ENV_PREFIX,
)
from .env import (
    ENV_MAPPINGS,
    get_env,
    get_env_bool,
    get_env_int,
    get_env_key,
    get_env_list,
    load_env_config,
)
from .loader import (
    ConfigLoader,
    ConfigurationError,
    find_config_file,
    load_config,
    load_file,
    merge_configs,
    save_config,
)
from .logs import configure_logging
from .options import DocumentOptions, LoggingOptions, WebselectConfig

__all__ = [
    # Main configuration class
    "WebselectConfig",
    # Option classes
    "DocumentOptions",
    "LoggingOptions",
    # Loader functions
    "load_config",
    "load_file",
    "save_config",
    "find_config_file",
    "merge_configs",
    "ConfigLoader",
    "ConfigurationError",
    "configure_logging",
    # Environment functions
    "get_env",
    "get_env_bool",
    "get_env_int",
    "get_env_list",
    "get_env_key",
    "load_env_config",
    "ENV_MAPPINGS",
    "ENV_PREFIX",
    # Default values
    "DEFAULT_HIDDEN_STYLES",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_FORMAT",
]
