"""Event line formatting.

Every logged line has the shape::

    <TAB * indent>Time: <timestamp>  <kind prefix><sender prefix><message>

The sender prefix is dropped for events raised by the host engine itself.
"""

from datetime import datetime
from typing import Callable, Optional
from . import config
from .interfaces import (
    BuildEvent,
    ILogDestination,
    ILogSink,
    Importance,
    Verbosity,
)


# Minimum verbosity at which a message of each importance is logged
IMPORTANCE_THRESHOLDS = {
    Importance.HIGH: Verbosity.MINIMAL,
    Importance.NORMAL: Verbosity.NORMAL,
    Importance.LOW: Verbosity.DETAILED,
}


def should_emit(importance: Importance, verbosity: Verbosity) -> bool:
    """Check whether a message passes the configured verbosity."""
    threshold = IMPORTANCE_THRESHOLDS.get(importance)
    if threshold is None:
        return False
    return verbosity >= threshold


def sender_prefix(sender_name: Optional[str], host_name: str) -> str:
    """Return "<sender>: ", or "" for the host engine itself."""
    if (sender_name or "").casefold() == (host_name or "").casefold():
        return ""
    return f"{sender_name or ''}: "


def location_prefix(label: str, file: str, line: int, column: int) -> str:
    """Return "<label> <file>(<line>,<col>): "."""
    return f"{label} {file}({line},{column}): "


def format_timestamp(moment: datetime) -> str:
    return moment.isoformat(sep=" ", timespec="seconds")


def format_line(indent: int, timestamp: str, prefix: str, message: str) -> str:
    return "\t" * indent + f"Time: {timestamp}  " + prefix + message


class IndentedLineWriter:
    """Writes formatted lines to a destination and tracks project nesting."""

    def __init__(
        self,
        destination: ILogDestination,
        logger: ILogSink,
        host_name: Optional[str] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.destination = destination
        self.logger = logger
        self.host_name = (
            host_name if host_name is not None else config.HOST_SENDER_NAME
        )
        self.clock = clock
        self.indent = 0

    def enter_scope(self) -> None:
        self.indent += 1

    def exit_scope(self) -> None:
        # Unbalanced finish events must not drive the indent negative
        if self.indent == 0:
            self.logger.log("warn", "Project finished without matching start")
            return
        self.indent -= 1

    def write(self, prefix: str, event: BuildEvent) -> None:
        """Write prefix and event message at the current indent."""
        line = format_line(
            self.indent,
            format_timestamp(self.clock()),
            prefix,
            event.message
        )
        self.destination.write_line(line)

    def write_with_sender(self, prefix: str, event: BuildEvent) -> None:
        """Write like write(), adding the sender label after prefix."""
        self.write(
            prefix + sender_prefix(event.sender_name, self.host_name),
            event
        )
