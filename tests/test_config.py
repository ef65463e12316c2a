"""Unit tests for configuration parsing."""

import pytest
from build_logger import config, create_logger
from build_logger.errors import ConfigurationError
from build_logger.interfaces import Verbosity


@pytest.mark.parametrize("name,expected", [
    ("q", Verbosity.QUIET),
    ("minimal", Verbosity.MINIMAL),
    ("Normal", Verbosity.NORMAL),
    ("d", Verbosity.DETAILED),
    ("diag", Verbosity.DIAGNOSTIC),
    (" DIAGNOSTIC ", Verbosity.DIAGNOSTIC),
])
def test_parse_verbosity(name, expected):
    assert config.parse_verbosity(name) is expected


def test_parse_verbosity_unknown():
    """Unknown verbosity names are configuration errors."""
    with pytest.raises(ConfigurationError):
        config.parse_verbosity("loud")


def test_parse_parameters_bare_path():
    assert config.parse_parameters("build.log") == {"logfile": "build.log"}


def test_parse_parameters_pairs():
    """Key/value pairs are split on ';' with case-insensitive keys."""
    params = config.parse_parameters("LogFile=out/build.log; verbosity=d")
    assert params == {"logfile": "out/build.log", "verbosity": "d"}


def test_parse_parameters_empty():
    assert config.parse_parameters("") == {}
    assert config.parse_parameters(None) == {}


def test_parse_parameters_unknown_key():
    with pytest.raises(ConfigurationError):
        config.parse_parameters("color=red")


def test_create_logger_from_parameters():
    """Parameter string configures path and verbosity."""
    plugin = create_logger("logfile=build.log;verbosity=detailed")

    assert plugin.path == "build.log"
    assert plugin.verbosity is Verbosity.DETAILED


def test_create_logger_falls_back_to_environment_defaults(monkeypatch):
    """Missing parameters come from BUILD_LOG_* defaults."""
    monkeypatch.setattr(config, "LOG_FILE", "env.log")
    monkeypatch.setattr(config, "LOG_VERBOSITY", "minimal")

    plugin = create_logger("")

    assert plugin.path == "env.log"
    assert plugin.verbosity is Verbosity.MINIMAL


def test_create_logger_host_verbosity():
    """Host verbosity applies when the parameters name none."""
    plugin = create_logger("build.log", verbosity="q")
    assert plugin.verbosity is Verbosity.QUIET
