"""Resolve explicitly named suite functions (``module:function``)."""

from __future__ import annotations

import importlib
import logging
import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from unitlane.errors import SuiteLoadError

if TYPE_CHECKING:
    from unitlane.engine import TestEngine

Suite = Callable[["TestEngine"], None]

logger = logging.getLogger("unitlane.suites")


def load_suite(ref: str, search_path: Path | None = None) -> Suite:
    """Import ``module:function`` and return the suite callable.

    ``search_path`` (usually the config file's directory) is put on the
    import path so suites can live next to the config.
    """
    module_name, sep, func_name = ref.partition(":")
    if not sep or not module_name or not func_name:
        raise SuiteLoadError(f"Suite reference '{ref}' must look like 'module:function'")

    if search_path is not None:
        entry = str(Path(search_path).resolve())
        if entry not in sys.path:
            sys.path.insert(0, entry)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise SuiteLoadError(f"Cannot import suite module '{module_name}': {e}") from e

    suite = getattr(module, func_name, None)
    if suite is None:
        raise SuiteLoadError(f"Module '{module_name}' has no attribute '{func_name}'")
    if not callable(suite):
        raise SuiteLoadError(f"Suite '{ref}' is not callable")
    return suite


def register_suites(
    engine: TestEngine, refs: Iterable[str], search_path: Path | None = None
) -> int:
    """Load each suite and let it register its tests. Returns tests added."""
    before = len(engine)
    for ref in refs:
        suite = load_suite(ref, search_path=search_path)
        logger.debug(f"Registering suite {ref}")
        suite(engine)
    return len(engine) - before
