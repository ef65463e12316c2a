"""Interface definitions for build logger adapters."""

from .i_event_source import (
    IEventSource,
    BuildEvent,
    ProjectStartedEvent,
    ProjectFinishedEvent,
    TaskStartedEvent,
    MessageEvent,
    WarningEvent,
    ErrorEvent,
    Importance,
    Verbosity,
)
from .i_log_destination import ILogDestination
from .i_log_sink import ILogSink

__all__ = [
    'IEventSource',
    'BuildEvent',
    'ProjectStartedEvent',
    'ProjectFinishedEvent',
    'TaskStartedEvent',
    'MessageEvent',
    'WarningEvent',
    'ErrorEvent',
    'Importance',
    'Verbosity',
    'ILogDestination',
    'ILogSink',
]
