"""Log destination interface (adapter pattern)."""

from typing import Protocol


class ILogDestination(Protocol):
    """Interface for the text sink build events are written to."""

    def open(self) -> None:
        """Acquire the underlying resource."""
        ...

    def write_line(self, line: str) -> None:
        """Append one line."""
        ...

    def flush(self) -> None:
        """Push buffered output to the resource."""
        ...

    def close(self) -> None:
        """Release the underlying resource."""
        ...
