"""
Default configuration values for webselect.

This module contains all default values used throughout the configuration system.
"""

# Document defaults
DEFAULT_BASE_URL = None
DEFAULT_LINK_TEXT_NORMALIZE = True

# Inline style declarations that hide an element, compared with whitespace removed
DEFAULT_HIDDEN_STYLES: list[str] = [
    "display:none",
    "visibility:hidden",
]

# Logging defaults
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# File config defaults
DEFAULT_CONFIG_FILENAME = "webselect.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".yaml", ".yml", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/webselect",
]

# Environment variable prefix
ENV_PREFIX = "WEBSELECT_"
