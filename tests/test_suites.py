"""Tests for suite resolution and the built-in self-test suites."""

import pytest

from unitlane.engine import TestEngine
from unitlane.errors import SuiteLoadError
from unitlane.selftest import all_suite, library_suite, smoke_suite
from unitlane.suites import load_suite, register_suites


def test_load_suite_from_search_path(write_suite):
    directory = write_suite(
        "suites_load_ok",
        "def suite(engine):\n    engine.register(lambda: None)\n",
    )
    suite = load_suite("suites_load_ok:suite", search_path=directory)
    assert callable(suite)


def test_load_suite_missing_module():
    with pytest.raises(SuiteLoadError, match="Cannot import"):
        load_suite("no_such_module_anywhere:suite")


def test_load_suite_missing_function(write_suite):
    directory = write_suite("suites_no_func", "x = 1\n")
    with pytest.raises(SuiteLoadError, match="has no attribute"):
        load_suite("suites_no_func:suite", search_path=directory)


def test_load_suite_not_callable(write_suite):
    directory = write_suite("suites_not_callable", "suite = 1\n")
    with pytest.raises(SuiteLoadError, match="not callable"):
        load_suite("suites_not_callable:suite", search_path=directory)


def test_load_suite_bad_reference():
    with pytest.raises(SuiteLoadError, match="module:function"):
        load_suite("just_a_module")


def test_register_suites_counts_added_tests(write_suite):
    directory = write_suite(
        "suites_register_two",
        "def suite(engine):\n"
        "    def test_one(unit):\n"
        "        unit.assert_true('', True)\n"
        "    def test_two():\n"
        "        pass\n"
        "    engine.register(test_one)\n"
        "    engine.register(test_two)\n",
    )
    engine = TestEngine()
    added = register_suites(engine, ["suites_register_two:suite"], search_path=directory)
    assert added == 2
    assert list(engine.list_registered()) == ["test_one()", "test_two()"]


def test_smoke_suite_classification(engine):
    smoke_suite(engine)
    summary = engine.run()
    assert (summary.passed, summary.failed, summary.errors) == (1, 2, 1)
    error = next(o for o in summary.outcomes if o.status.value == "Error")
    assert error.label == "test_asserts_error()"
    assert "AttributeError" in error.detail


def test_library_suite_passes(engine):
    library_suite(engine)
    summary = engine.run()
    assert summary.ok, [o.detail for o in summary.outcomes if o.detail]
    assert summary.passed == 4


def test_all_suite_combines_both(engine):
    all_suite(engine)
    summary = engine.run()
    assert (summary.passed, summary.failed, summary.errors) == (5, 2, 1)
