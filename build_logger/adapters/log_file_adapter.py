"""Append-mode log file adapter."""

from typing import Optional, TextIO
from ..interfaces import ILogDestination


class LogFileAdapter:
    """Adapter for a plain text log file opened in append mode."""

    def __init__(self, path: str, encoding: str = "utf-8"):
        self.path = path
        self.encoding = encoding
        self.stream: Optional[TextIO] = None

    @property
    def is_open(self) -> bool:
        return self.stream is not None and not self.stream.closed

    def open(self) -> None:
        """Open the file, keeping prior contents.

        Line buffered so every line reaches the file as it is written.
        """
        self.stream = open(
            self.path, "a", encoding=self.encoding, buffering=1
        )

    def write_line(self, line: str) -> None:
        """Append one line.

        Raises ValueError once the file is closed.
        """
        if self.stream is None:
            raise ValueError(f"log file not open: {self.path}")
        self.stream.write(line + "\n")

    def flush(self) -> None:
        if self.is_open:
            self.stream.flush()

    def close(self) -> None:
        if self.stream is not None:
            self.stream.close()
