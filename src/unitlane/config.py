from __future__ import annotations

import re
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator

from unitlane.reporting.base import ReportSink

_SUITE_REF_RE = re.compile(r"^[A-Za-z_][\w.]*:[A-Za-z_]\w*$")
_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


class ColorConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    pass_: str = Field("#bbffbb", alias="pass")
    fail: str = "#ffbbbb"
    error: str = "#bbbbff"
    title: str = "#dddddd"

    @field_validator("pass_", "fail", "error", "title")
    @classmethod
    def must_be_hex_color(cls, v: str) -> str:
        if not _COLOR_RE.match(v):
            raise ValueError(f"Color '{v}' must look like #rrggbb")
        return v

    def as_palette(self) -> dict[str, str]:
        return {
            "pass": self.pass_,
            "fail": self.fail,
            "error": self.error,
            "title": self.title,
        }


class ReportConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    console: bool = True
    show_pass: bool = False
    show_results: bool = True
    junit: str | None = None
    html: str | None = None
    colors: ColorConfig = Field(default_factory=ColorConfig)

    @field_validator("junit", "html")
    @classmethod
    def expand_env(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"Cannot expand output path '{v}': {e}") from e


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "UnitTests"
    debug: bool = False
    show_default_message: bool = True
    suites: list[str] = []
    report: ReportConfig = Field(default_factory=ReportConfig)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("suites")
    @classmethod
    def suites_must_be_references(cls, v: list[str]) -> list[str]:
        for ref in v:
            if not _SUITE_REF_RE.match(ref):
                raise ValueError(
                    f"Suite '{ref}' must be a 'module:function' reference"
                )
        return v


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = RunConfig.model_validate(raw)

    # Resolve relative report paths relative to config file location
    for key in ("junit", "html"):
        value = getattr(config.report, key)
        if value is not None and not Path(value).is_absolute():
            setattr(config.report, key, str((config_dir / value).resolve()))

    return config


def build_sinks(report: ReportConfig) -> list[ReportSink]:
    """Turn the report section into sink instances."""
    from unitlane.reporting.console import ConsoleSink
    from unitlane.reporting.html import HtmlSink
    from unitlane.reporting.junit import JUnitSink

    sinks: list[ReportSink] = []
    if report.console:
        sinks.append(
            ConsoleSink(show_pass=report.show_pass, show_results=report.show_results)
        )
    if report.junit:
        sinks.append(JUnitSink(Path(report.junit)))
    if report.html:
        sinks.append(
            HtmlSink(
                Path(report.html),
                colors=report.colors.as_palette(),
                show_pass=report.show_pass,
            )
        )
    return sinks
