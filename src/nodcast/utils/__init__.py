"""Utility functions and helpers for Nodcast."""

from nodcast.utils.errors import (
    CategoryNotFoundError,
    ConfigError,
    DataError,
    DataLoadError,
    DurationParseError,
    InvalidConfigError,
    NodcastError,
    RenderError,
)

__all__ = [
    "NodcastError",
    "ConfigError",
    "InvalidConfigError",
    "DataError",
    "DataLoadError",
    "RenderError",
    "DurationParseError",
    "CategoryNotFoundError",
]
