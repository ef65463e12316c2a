"""Logger error types."""


class LoggerError(Exception):
    """Base class for errors raised by the build logger."""


class ConfigurationError(LoggerError):
    """Required configuration missing or invalid."""


class LoggerInitializationError(LoggerError):
    """Log destination could not be opened."""
