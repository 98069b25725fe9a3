"""Custom exceptions for Nodcast."""


class NodcastError(Exception):
    """Base exception for all Nodcast errors."""

    pass


class ConfigError(NodcastError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class DataError(NodcastError):
    """Site data document errors."""

    pass


class DataLoadError(DataError):
    """Data document could not be fetched or parsed."""

    def __init__(self, message: str, source: str) -> None:
        super().__init__(message)
        self.source = source


class RenderError(NodcastError):
    """Page rendering errors."""

    pass


class DurationParseError(RenderError):
    """Episode duration string has no leading number of minutes."""

    def __init__(self, duration: str) -> None:
        super().__init__(f"Cannot parse minutes from duration {duration!r}")
        self.duration = duration


class CategoryNotFoundError(RenderError):
    """Category key not present in the data document."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Category '{key}' not found")
        self.key = key
