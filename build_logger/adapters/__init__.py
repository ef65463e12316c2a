"""Adapter implementations for the build logger."""

from .console_adapter import ConsoleAdapter
from .log_file_adapter import LogFileAdapter

__all__ = [
    'ConsoleAdapter',
    'LogFileAdapter',
]
