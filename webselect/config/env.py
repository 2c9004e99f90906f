"""
Environment variable support for webselect configuration.

This module provides functions to load configuration values from environment
variables with support for type conversion and nested keys.
"""

import os
from typing import Any, Optional, TypeVar, Union, get_args, get_origin

from .defaults import ENV_PREFIX

T = TypeVar("T")


def get_env_key(key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a configuration key to environment variable name.

    Args:
        key: Configuration key (e.g., "document.base_url")
        prefix: Environment variable prefix

    Returns:
        Environment variable name (e.g., "WEBSELECT_DOCUMENT_BASE_URL")
    """
    return f"{prefix}{key.upper().replace('.', '_').replace('-', '_')}"


def parse_bool(value: str) -> bool:
    """Parse string to boolean."""
    return value.strip().lower() in ("true", "1", "yes", "on", "enabled")


def parse_list(value: str, item_type: type = str) -> list[Any]:
    """Parse a comma-separated string to a list.

    Args:
        value: Comma-separated string value
        item_type: Type of list items

    Returns:
        List of parsed values
    """
    if not value:
        return []

    items = [item.strip() for item in value.split(",")]

    if item_type == int:
        return [int(item) for item in items]
    elif item_type == bool:
        return [parse_bool(item) for item in items]

    return items


def parse_value(value: str, target_type: Any) -> Any:
    """Parse string value to target type.

    Args:
        value: String value
        target_type: Target type, ``Optional[...]`` and ``list[...]`` included

    Returns:
        Parsed value
    """
    origin = get_origin(target_type)

    if origin is Union:
        non_none_types = [t for t in get_args(target_type) if t is not type(None)]
        if non_none_types:
            return parse_value(value, non_none_types[0])
        return value

    if origin is list:
        item_type = get_args(target_type)[0] if get_args(target_type) else str
        return parse_list(value, item_type)

    if target_type == bool:
        return parse_bool(value)

    if target_type == int:
        return int(value)

    if target_type == float:
        return float(value)

    return value


def get_env(
    key: str,
    default: Optional[T] = None,
    target_type: Optional[Any] = None,
    prefix: str = ENV_PREFIX,
) -> Optional[Union[T, str]]:
    """Get configuration value from environment variable.

    Args:
        key: Configuration key (e.g., "logging.level")
        default: Default value if not set
        target_type: Target type for parsing
        prefix: Environment variable prefix

    Returns:
        Parsed value or default
    """
    value = os.environ.get(get_env_key(key, prefix))

    if value is None:
        return default

    if target_type is not None:
        return parse_value(value, target_type)

    # Infer type from default
    if default is not None:
        return parse_value(value, type(default))

    return value


def get_env_bool(key: str, default: bool = False, prefix: str = ENV_PREFIX) -> bool:
    """Get boolean value from environment variable."""
    result = get_env(key, default, bool, prefix)
    return result if isinstance(result, bool) else default


def get_env_int(key: str, default: int = 0, prefix: str = ENV_PREFIX) -> int:
    """Get integer value from environment variable."""
    result = get_env(key, default, int, prefix)
    return result if isinstance(result, int) else default


def get_env_list(
    key: str,
    default: Optional[list[str]] = None,
    item_type: type = str,
    prefix: str = ENV_PREFIX,
) -> list[Any]:
    """Get list value from environment variable.

    Args:
        key: Configuration key
        default: Default value
        item_type: Type of list items
        prefix: Environment variable prefix

    Returns:
        List value
    """
    value = os.environ.get(get_env_key(key, prefix))

    if value is None:
        return default if default is not None else []

    return parse_list(value, item_type)


# Predefined environment variable mappings
ENV_MAPPINGS: dict[str, tuple[str, Any]] = {
    "document.base_url": ("WEBSELECT_DOCUMENT_BASE_URL", str),
    "document.hidden_styles": ("WEBSELECT_DOCUMENT_HIDDEN_STYLES", list[str]),
    "document.link_text_normalize": ("WEBSELECT_DOCUMENT_LINK_TEXT_NORMALIZE", bool),
    "logging.level": ("WEBSELECT_LOGGING_LEVEL", str),
    "logging.format": ("WEBSELECT_LOGGING_FORMAT", str),
}


def load_env_config() -> dict[str, Any]:
    """Load configuration from predefined environment variables.

    Returns:
        Nested dictionary of configuration values, sections without any
        variable set are omitted
    """
    result: dict[str, Any] = {}

    for key, (env_var, target_type) in ENV_MAPPINGS.items():
        value = os.environ.get(env_var)
        if value is not None:
            section, option = key.split(".", 1)
            result.setdefault(section, {})[option] = parse_value(value, target_type)

    return result
