"""Diagnostic logging interface (adapter pattern)."""

from typing import Protocol


class ILogSink(Protocol):
    """Interface for the logger's own diagnostic output."""

    def log(self, level: str, message: str) -> None:
        """Write log entry."""
        ...
