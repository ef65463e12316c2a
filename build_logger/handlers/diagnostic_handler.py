"""Handlers for warning and error events."""

from typing import Optional, Union
from .. import config
from ..formatter import IndentedLineWriter, location_prefix
from ..interfaces import WarningEvent, ErrorEvent


class DiagnosticHandler:
    """Logs a diagnostic with its source location."""

    def __init__(self, writer: IndentedLineWriter, label: str):
        self.writer = writer
        self.label = label

    def handle(self, event: Union[WarningEvent, ErrorEvent]) -> None:
        """Handle diagnostic event."""
        prefix = location_prefix(
            self.label, event.file, event.line_number, event.column_number
        )
        self.writer.write_with_sender(prefix, event)


class WarningHandler(DiagnosticHandler):
    """Handler for warnings.

    The label defaults to "ERROR" to keep existing log output unchanged;
    set BUILD_LOG_WARNING_LABEL to change it.
    """

    def __init__(
        self, writer: IndentedLineWriter, label: Optional[str] = None
    ):
        super().__init__(
            writer, label if label is not None else config.WARNING_LABEL
        )


class ErrorHandler(DiagnosticHandler):
    """Handler for errors."""

    def __init__(
        self, writer: IndentedLineWriter, label: Optional[str] = None
    ):
        super().__init__(
            writer, label if label is not None else config.ERROR_LABEL
        )
