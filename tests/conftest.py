"""Pytest configuration and fixtures."""

import logging

import pytest

from unitlane.assertions.library import AssertionLibrary
from unitlane.engine import TestEngine
from unitlane.reporting.base import MemorySink
from unitlane.verbose import close_logger


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset unitlane loggers after each test to prevent handler leaks.

    Module-level loggers keep their objects, so handlers and levels are
    reset in place instead of removing the registry entries.
    """
    yield

    loggers_to_reset = [
        name
        for name in list(logging.Logger.manager.loggerDict.keys())
        if name.startswith("unitlane")
    ]

    for name in loggers_to_reset:
        close_logger(name)
        logger = logging.getLogger(name)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


@pytest.fixture
def unit():
    return AssertionLibrary(name="tests")


@pytest.fixture
def sink():
    return MemorySink()


@pytest.fixture
def engine(unit, sink):
    return TestEngine(assertions=unit, sinks=[sink], name="EngineTests")


@pytest.fixture
def write_suite(tmp_path):
    """Write a suite module into tmp_path and return its directory."""

    def _write(module_name: str, source: str):
        (tmp_path / f"{module_name}.py").write_text(source)
        return tmp_path

    return _write
