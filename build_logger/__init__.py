"""Build event file logger."""

from .errors import LoggerError, ConfigurationError, LoggerInitializationError
from .file_logger import FileLogger
from .interfaces import (
    Importance,
    Verbosity,
    BuildEvent,
    ProjectStartedEvent,
    ProjectFinishedEvent,
    TaskStartedEvent,
    MessageEvent,
    WarningEvent,
    ErrorEvent,
)
from .main import create_logger

__all__ = [
    'LoggerError',
    'ConfigurationError',
    'LoggerInitializationError',
    'FileLogger',
    'Importance',
    'Verbosity',
    'BuildEvent',
    'ProjectStartedEvent',
    'ProjectFinishedEvent',
    'TaskStartedEvent',
    'MessageEvent',
    'WarningEvent',
    'ErrorEvent',
    'create_logger',
]
