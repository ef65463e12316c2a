"""Handlers for project started/finished events."""

from ..formatter import IndentedLineWriter
from ..interfaces import ProjectStartedEvent, ProjectFinishedEvent


class ProjectStartedHandler:
    """Logs the project start, then nests following lines one level."""

    def __init__(self, writer: IndentedLineWriter):
        self.writer = writer

    def handle(self, event: ProjectStartedEvent) -> None:
        """Handle project started event."""
        self.writer.write("", event)
        self.writer.enter_scope()


class ProjectFinishedHandler:
    """Closes one nesting level, then logs the project finish."""

    def __init__(self, writer: IndentedLineWriter):
        self.writer = writer

    def handle(self, event: ProjectFinishedEvent) -> None:
        """Handle project finished event."""
        self.writer.exit_scope()
        self.writer.write("", event)
