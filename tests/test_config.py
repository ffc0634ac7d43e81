"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from unitlane.config import RunConfig, build_sinks, load_config
from unitlane.reporting.console import ConsoleSink
from unitlane.reporting.html import HtmlSink
from unitlane.reporting.junit import JUnitSink


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "unitlane.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_load_minimal_config(tmp_yaml):
    path = tmp_yaml("""\
        suites:
          - my_tests:suite
    """)
    cfg = load_config(path)
    assert cfg.name == "UnitTests"
    assert cfg.debug is False
    assert cfg.show_default_message is True
    assert cfg.suites == ["my_tests:suite"]
    assert cfg.report.console is True
    assert cfg.report.show_pass is False
    assert cfg.report.junit is None
    assert cfg.report.colors.as_palette() == {
        "pass": "#bbffbb",
        "fail": "#ffbbbb",
        "error": "#bbbbff",
        "title": "#dddddd",
    }


def test_empty_file_gives_defaults(tmp_yaml):
    cfg = load_config(tmp_yaml(""))
    assert cfg == RunConfig()


def test_report_paths_resolved_relative_to_config(tmp_yaml, tmp_path):
    path = tmp_yaml("""\
        report:
          junit: reports/junit.xml
          html: /abs/report.html
    """)
    cfg = load_config(path)
    assert cfg.report.junit == str((tmp_path / "reports" / "junit.xml").resolve())
    assert cfg.report.html == "/abs/report.html"


def test_report_paths_expand_env(tmp_yaml, tmp_path, monkeypatch):
    monkeypatch.setenv("UNITLANE_OUT", "custom")
    path = tmp_yaml("""\
        report:
          junit: ${UNITLANE_OUT}/junit.xml
          html: ${UNITLANE_MISSING:-fallback}/report.html
    """)
    cfg = load_config(path)
    assert cfg.report.junit.endswith("custom/junit.xml")
    assert cfg.report.html.endswith("fallback/report.html")


def test_report_path_with_unset_variable_is_rejected(tmp_yaml, monkeypatch):
    monkeypatch.delenv("UNITLANE_UNSET", raising=False)
    path = tmp_yaml("""\
        report:
          junit: ${UNITLANE_UNSET}/junit.xml
    """)
    with pytest.raises(ValidationError, match="UNITLANE_UNSET"):
        load_config(path)


def test_colors_use_pass_alias(tmp_yaml):
    path = tmp_yaml("""\
        report:
          colors:
            pass: "#00ff00"
    """)
    cfg = load_config(path)
    assert cfg.report.colors.as_palette()["pass"] == "#00ff00"


def test_invalid_color_rejected(tmp_yaml):
    path = tmp_yaml("""\
        report:
          colors:
            fail: red
    """)
    with pytest.raises(ValidationError, match="#rrggbb"):
        load_config(path)


@pytest.mark.parametrize("ref", ["no_colon", "mod:", ":func", "mod:fn:extra", "1mod:fn"])
def test_bad_suite_reference_rejected(tmp_yaml, ref):
    path = tmp_yaml(f"""\
        suites:
          - "{ref}"
    """)
    with pytest.raises(ValidationError, match="module:function"):
        load_config(path)


def test_unknown_key_rejected(tmp_yaml):
    path = tmp_yaml("""\
        show_in_sheet: true
    """)
    with pytest.raises(ValidationError):
        load_config(path)


def test_blank_name_rejected(tmp_yaml):
    with pytest.raises(ValidationError, match="blank"):
        load_config(tmp_yaml('name: "  "\n'))


def test_build_sinks_from_report(tmp_yaml):
    path = tmp_yaml("""\
        report:
          console: true
          show_pass: true
          junit: out/junit.xml
          html: out/report.html
    """)
    cfg = load_config(path)
    sinks = build_sinks(cfg.report)
    assert [type(s) for s in sinks] == [ConsoleSink, JUnitSink, HtmlSink]
    assert sinks[0].show_pass is True
    assert sinks[2].colors["fail"] == "#ffbbbb"


def test_build_sinks_console_disabled():
    cfg = RunConfig(report={"console": False})
    assert build_sinks(cfg.report) == []


def test_top_level_list_rejected(tmp_yaml):
    path = tmp_yaml("""\
        - my_tests:suite
    """)
    with pytest.raises(ValidationError):
        load_config(path)
