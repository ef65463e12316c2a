"""File logger plug-in: lifecycle and event dispatch."""

from datetime import datetime
from typing import Callable, Optional
from . import config
from .adapters import ConsoleAdapter, LogFileAdapter
from .errors import ConfigurationError, LoggerInitializationError
from .formatter import IndentedLineWriter
from .handlers import EVENT_HANDLERS, EVENT_TYPES
from .interfaces import (
    BuildEvent,
    IEventSource,
    ILogDestination,
    ILogSink,
    Verbosity,
)


class FileLogger:
    """Writes build events as indented, timestamped lines to a file.

    The host calls configure() (or passes path/verbosity to the
    constructor), then initialize() once, delivers events, and finally
    calls shutdown() once.
    """

    def __init__(
        self,
        path: str = "",
        verbosity: Verbosity = Verbosity.NORMAL,
        logger: Optional[ILogSink] = None,
        host_name: Optional[str] = None,
        clock: Callable[[], datetime] = datetime.now,
        destination_factory: Callable[[str], ILogDestination] = LogFileAdapter
    ):
        self.path = path
        self.verbosity = verbosity
        self.logger = logger or ConsoleAdapter()
        self.host_name = (
            host_name if host_name is not None else config.HOST_SENDER_NAME
        )
        self.clock = clock
        self.destination_factory = destination_factory
        self.destination: Optional[ILogDestination] = None
        self.writer: Optional[IndentedLineWriter] = None
        self.handlers = {}

    @property
    def indent(self) -> int:
        return self.writer.indent if self.writer else 0

    def configure(self, path: str, verbosity: Verbosity) -> None:
        """Store destination path and verbosity."""
        self.path = path
        self.verbosity = verbosity

    def _build_handlers(self) -> dict:
        """Instantiate one handler per event kind."""
        handlers = {}
        for kind, handler_class in EVENT_HANDLERS.items():
            if kind == 'message_raised':
                handlers[kind] = handler_class(self.writer, self.verbosity)
            else:
                handlers[kind] = handler_class(self.writer)
        return handlers

    def initialize(self, event_source: IEventSource) -> None:
        """Open the log file and subscribe to the host's events.

        Raises ConfigurationError when no path is configured and
        LoggerInitializationError when the file cannot be opened.
        Must be called at most once per instance.
        """
        if not self.path:
            self.logger.log("error", "Log file path not set")
            raise ConfigurationError("log file path not set")

        if self.destination is not None:
            raise RuntimeError("logger already initialized")

        destination = self.destination_factory(self.path)
        try:
            destination.open()
        except (OSError, ValueError) as e:
            self.logger.log("error", f"Failed to create log file: {e}")
            raise LoggerInitializationError(
                f"Failed to create log file: {e}"
            ) from e

        self.destination = destination
        self.writer = IndentedLineWriter(
            destination, self.logger, self.host_name, self.clock
        )
        self.handlers = self._build_handlers()

        for kind, handler in self.handlers.items():
            event_source.subscribe(kind, handler.handle)

        self.logger.log(
            "info",
            f"Logging to {self.path} (verbosity: {self.verbosity.name.lower()})"
        )

    def handle(self, event: BuildEvent) -> None:
        """Dispatch one event to its handler."""
        if self.writer is None:
            raise RuntimeError("logger not initialized")

        kind = EVENT_TYPES.get(type(event))
        if kind is None:
            raise TypeError(f"unsupported event: {type(event).__name__}")

        self.handlers[kind].handle(event)

    def shutdown(self) -> None:
        """Flush and close the log file."""
        if self.destination is None:
            raise RuntimeError("logger not initialized")

        # A failed write leaves the buffer dirty, so close() flushes and
        # fails again; the handle is released either way.
        try:
            self.destination.flush()
        except OSError as e:
            self.logger.log("error", f"Flush failed during shutdown: {e}")

        try:
            self.destination.close()
        except OSError as e:
            self.logger.log("error", f"Close failed during shutdown: {e}")

        self.logger.log("info", f"Closed log file {self.path}")
