"""Build logger plug-in entry point."""

from typing import Optional
from . import config
from .file_logger import FileLogger
from .interfaces import ILogSink


def create_logger(
    parameters: str = "",
    verbosity: Optional[str] = None,
    logger: Optional[ILogSink] = None
) -> FileLogger:
    """Create a FileLogger configured from host parameters.

    Values from the parameter string win over the host's verbosity
    argument, which wins over the BUILD_LOG_* environment defaults.
    """
    params = config.parse_parameters(parameters)

    path = params.get("logfile") or config.LOG_FILE
    verbosity_name = (
        params.get("verbosity") or verbosity or config.LOG_VERBOSITY
    )

    plugin = FileLogger(logger=logger)
    plugin.configure(path, config.parse_verbosity(verbosity_name))
    return plugin
