"""Tests for verbose logging."""

import logging
from pathlib import Path

from unitlane.verbose import close_logger, setup_logger


def test_verbose_logger_creates_debug_log(tmp_path: Path):
    """Logger should always create debug.log file."""
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_verbose_logger_writes_to_file(tmp_path: Path):
    """Logger should write messages to debug file."""
    debug_file = tmp_path / "logs" / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert "[" in content  # timestamp


def test_child_loggers_reach_debug_file(tmp_path: Path):
    """Library modules log to children of the configured logger."""
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False, logger_name="unitlane")

    logging.getLogger("unitlane.assertions").debug("from a child")

    assert "from a child" in debug_file.read_text()


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    """Logger should have stderr handler when verbose=True."""
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=True)

    assert len(logger.handlers) == 2
    handler_types = [type(h).__name__ for h in logger.handlers]
    assert "StreamHandler" in handler_types
    assert "FileHandler" in handler_types


def test_non_verbose_mode_only_file_handler(tmp_path: Path):
    """Logger should only have file handler when verbose=False."""
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=False)

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.FileHandler)


def test_setup_twice_replaces_handlers(tmp_path: Path):
    """Calling setup again for the same name must not stack handlers."""
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    setup_logger(first, verbose=False, logger_name="unitlane_replace")
    logger = setup_logger(second, verbose=False, logger_name="unitlane_replace")

    logger.debug("only in second")

    assert len(logger.handlers) == 1
    assert "only in second" in second.read_text()
    assert "only in second" not in first.read_text()


def test_unique_logger_names_are_isolated(tmp_path: Path):
    log1 = tmp_path / "run1.log"
    log2 = tmp_path / "run2.log"

    logger1 = setup_logger(log1, verbose=False, logger_name="unitlane_run1")
    logger2 = setup_logger(log2, verbose=False, logger_name="unitlane_run2")

    logger1.debug("Message from run1")
    logger2.debug("Message from run2")

    assert "Message from run2" not in log1.read_text()
    assert "Message from run1" not in log2.read_text()


def test_records_carry_level_and_logger_name(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file, verbose=False)

    logging.getLogger("unitlane.reporting").warning("sink wrote nothing")

    assert "WARNING unitlane.reporting: sink wrote nothing" in debug_file.read_text()


def test_silenced_child_logger_is_routed_again(tmp_path: Path):
    child = logging.getLogger("unitlane.assertions")
    child.setLevel(logging.CRITICAL)
    child.propagate = False

    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file, verbose=False)
    child.debug("Debug: for Equal. mismatch")

    assert child.level == logging.NOTSET
    assert child.propagate is True
    assert "Debug: for Equal. mismatch" in debug_file.read_text()


def test_debug_msg_reaches_debug_file(tmp_path: Path):
    from unitlane.assertions.library import AssertionLibrary

    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file, verbose=False)
    AssertionLibrary(debug=True).debug_msg("checking totals")

    assert "unitlane.assertions: Debug: checking totals" in debug_file.read_text()


def test_close_logger_detaches_and_closes_handlers(tmp_path: Path):
    logger = setup_logger(tmp_path / "debug.log", verbose=True)
    handlers = list(logger.handlers)

    close_logger("unitlane")

    assert logger.handlers == []
    file_handler = next(h for h in handlers if isinstance(h, logging.FileHandler))
    assert file_handler.stream is None
