"""
Configuration options classes for webselect.

This module provides strongly-typed option classes for the document client
and for logging, with validation and type checking.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    DEFAULT_BASE_URL,
    DEFAULT_HIDDEN_STYLES,
    DEFAULT_LINK_TEXT_NORMALIZE,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
)


class DocumentOptions(BaseModel):
    """Options for the document-backed client."""

    base_url: Optional[str] = Field(
        DEFAULT_BASE_URL, description="Base URL for resolving relative links"
    )
    hidden_styles: list[str] = Field(
        default_factory=lambda: DEFAULT_HIDDEN_STYLES.copy(),
        description="Inline style declarations that hide an element",
    )
    link_text_normalize: bool = Field(
        DEFAULT_LINK_TEXT_NORMALIZE,
        description="Collapse whitespace when matching link text",
    )

    @field_validator("hidden_styles", mode="before")
    @classmethod
    def parse_hidden_styles(cls, v: Any) -> Any:
        """Accept a comma-separated string and normalize declarations."""
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            return ["".join(str(item).split()).lower() for item in v if str(item).strip()]
        return v

    def merge(self, other: "DocumentOptions") -> "DocumentOptions":
        """Merge with another DocumentOptions, other takes precedence."""
        data = self.model_dump(exclude_none=True)
        data.update(other.model_dump(exclude_unset=True, exclude_none=True))
        return DocumentOptions(**data)


class LoggingOptions(BaseModel):
    """Logging configuration options."""

    level: str = Field(DEFAULT_LOG_LEVEL, description="Log level name")
    format: str = Field(DEFAULT_LOG_FORMAT, description="Log record format")

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, v: Any) -> Any:
        """Accept level names in any case and numeric levels."""
        if isinstance(v, int):
            return logging.getLevelName(v)
        if isinstance(v, str):
            name = v.strip().upper()
            if not isinstance(logging.getLevelName(name), int):
                raise ValueError(f"Unknown log level: {v}")
            return name
        return v

    @property
    def level_number(self) -> int:
        """Numeric log level."""
        return logging.getLevelName(self.level)

    def merge(self, other: "LoggingOptions") -> "LoggingOptions":
        """Merge with another LoggingOptions, other takes precedence."""
        data = self.model_dump(exclude_none=True)
        data.update(other.model_dump(exclude_unset=True, exclude_none=True))
        return LoggingOptions(**data)


class WebselectConfig(BaseModel):
    """Main configuration class combining all options."""

    document: DocumentOptions = Field(
        default_factory=DocumentOptions, description="Document client options"
    )
    logging: LoggingOptions = Field(
        default_factory=LoggingOptions, description="Logging options"
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WebselectConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def merge(self, other: "WebselectConfig") -> "WebselectConfig":
        """Merge with another WebselectConfig, other takes precedence."""
        return WebselectConfig(
            document=self.document.merge(other.document),
            logging=self.logging.merge(other.logging),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(exclude_none=True)
