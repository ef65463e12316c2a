"""Handler for informational message events."""

from ..formatter import IndentedLineWriter, should_emit
from ..interfaces import MessageEvent, Verbosity


class MessageHandler:
    """Logs messages whose importance passes the configured verbosity."""

    def __init__(self, writer: IndentedLineWriter, verbosity: Verbosity):
        self.writer = writer
        self.verbosity = verbosity

    def handle(self, event: MessageEvent) -> None:
        """Handle message raised event."""
        if not should_emit(event.importance, self.verbosity):
            return

        self.writer.write_with_sender("", event)
