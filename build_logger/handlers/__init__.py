"""Event handlers for the build logger."""

from ..interfaces import (
    ProjectStartedEvent,
    ProjectFinishedEvent,
    TaskStartedEvent,
    MessageEvent,
    WarningEvent,
    ErrorEvent,
)
from .project_handler import ProjectStartedHandler, ProjectFinishedHandler
from .task_handler import TaskStartedHandler
from .message_handler import MessageHandler
from .diagnostic_handler import DiagnosticHandler, WarningHandler, ErrorHandler

# Table-driven dispatch, in host subscription order
EVENT_HANDLERS = {
    'project_started': ProjectStartedHandler,
    'task_started': TaskStartedHandler,
    'message_raised': MessageHandler,
    'warning_raised': WarningHandler,
    'error_raised': ErrorHandler,
    'project_finished': ProjectFinishedHandler,
}

EVENT_TYPES = {
    ProjectStartedEvent: 'project_started',
    TaskStartedEvent: 'task_started',
    MessageEvent: 'message_raised',
    WarningEvent: 'warning_raised',
    ErrorEvent: 'error_raised',
    ProjectFinishedEvent: 'project_finished',
}

__all__ = [
    'EVENT_HANDLERS',
    'EVENT_TYPES',
    'ProjectStartedHandler',
    'ProjectFinishedHandler',
    'TaskStartedHandler',
    'MessageHandler',
    'DiagnosticHandler',
    'WarningHandler',
    'ErrorHandler',
]
