"""Handler for task started events."""

from ..formatter import IndentedLineWriter
from ..interfaces import TaskStartedEvent


class TaskStartedHandler:
    """Ignores task starts to keep the log readable."""

    def __init__(self, writer: IndentedLineWriter):
        self.writer = writer

    def handle(self, event: TaskStartedEvent) -> None:
        """Handle task started event."""
        return
