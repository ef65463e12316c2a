"""Configuration management."""

import os
from typing import Optional
from .errors import ConfigurationError
from .interfaces import Verbosity


# Log file configuration
LOG_FILE = os.getenv("BUILD_LOG_FILE", "")
LOG_VERBOSITY = os.getenv("BUILD_LOG_VERBOSITY", "normal")

# Events from the host engine itself are written without a sender label
HOST_SENDER_NAME = os.getenv("BUILD_LOG_HOST_NAME", "MSBuild")

# Label written in front of warning locations. Historically "ERROR".
WARNING_LABEL = os.getenv("BUILD_LOG_WARNING_LABEL", "ERROR")
ERROR_LABEL = "ERROR"

# Host short forms (/verbosity:q, /v:diag, ...)
VERBOSITY_ALIASES = {
    'q': Verbosity.QUIET,
    'm': Verbosity.MINIMAL,
    'n': Verbosity.NORMAL,
    'd': Verbosity.DETAILED,
    'diag': Verbosity.DIAGNOSTIC,
}


def parse_verbosity(name: str) -> Verbosity:
    """Map a verbosity name or short form to Verbosity."""
    key = (name or "").strip().lower()
    if key in VERBOSITY_ALIASES:
        return VERBOSITY_ALIASES[key]

    try:
        return Verbosity[key.upper()]
    except KeyError:
        raise ConfigurationError(f"unknown verbosity: {name!r}") from None


def parse_parameters(text: Optional[str]) -> dict:
    """Parse the host's logger parameter string.

    Accepts either a bare path (``build.log``) or ``;``-separated
    ``key=value`` pairs (``logfile=build.log;verbosity=detailed``).
    Keys are case-insensitive. Returns a dict with ``logfile`` and/or
    ``verbosity`` keys.
    """
    params = {}
    if not text or not text.strip():
        return params

    for part in text.split(";"):
        part = part.strip()
        if not part:
            continue

        if "=" not in part:
            if "logfile" in params:
                raise ConfigurationError(
                    f"unexpected logger parameter: {part!r}"
                )
            params["logfile"] = part
            continue

        key, value = part.split("=", 1)
        key = key.strip().lower()
        if key not in ("logfile", "verbosity"):
            raise ConfigurationError(f"unknown logger parameter: {key!r}")
        params[key] = value.strip()

    return params
