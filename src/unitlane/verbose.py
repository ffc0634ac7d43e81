"""Debug-log configuration for the ``unitlane`` logger tree.

Library modules log to children of one root logger (``unitlane.assertions``
for ``debug_msg``, ``unitlane.reporting`` for the file sinks,
``unitlane.suites`` for suite loading). ``setup_logger`` points the whole
tree at a run's debug file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
CHILD_LOGGERS = ("assertions", "reporting", "suites")


def close_logger(logger_name: str = "unitlane") -> None:
    """Detach and close every handler on ``logger_name``."""
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logger(
    debug_file: Path, verbose: bool = False, logger_name: str = "unitlane"
) -> logging.Logger:
    """
    Route ``logger_name`` and its library children to a debug file.

    Handlers from an earlier call are closed first, so running the CLI
    twice in one process never writes to a stale file.

    Args:
        debug_file: Path to debug log file (always created)
        verbose: Also echo every record to stderr.
        logger_name: Root of the logger tree to configure.

    Returns:
        The configured root logger.
    """
    close_logger(logger_name)
    logger = logging.getLogger(logger_name)
    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    # children defer to the root's level and handlers
    for child in CHILD_LOGGERS:
        child_logger = logging.getLogger(f"{logger_name}.{child}")
        child_logger.disabled = False
        child_logger.setLevel(logging.NOTSET)
        child_logger.propagate = True

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [
        logging.FileHandler(debug_file, mode="a", encoding="utf-8")
    ]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Debug log opened: {debug_file}")
    return logger
