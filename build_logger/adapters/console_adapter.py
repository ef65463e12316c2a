"""Console diagnostics adapter."""

import sys
from datetime import datetime
from ..interfaces import ILogSink


class ConsoleAdapter:
    """Adapter for diagnostic logging to stderr."""

    def __init__(self, stream=None):
        self.stream = stream

    def log(self, level: str, message: str) -> None:
        """Write log entry to stderr."""
        timestamp = datetime.now().isoformat()
        print(
            f"[{timestamp}] {level.upper()}: {message}",
            file=self.stream or sys.stderr
        )
