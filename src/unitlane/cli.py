from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="unitlane", help="Run unit tests with the unitlane engine")
schema_app = typer.Typer(name="schema", help="Generate schema tooling for the config")
app.add_typer(schema_app, name="schema")


@schema_app.callback()
def schema_callback():
    """Schema tooling for the run config."""


# built-in smoke suites: expected (pass, fail, error)
_SMOKE_EXPECTED = {False: (1, 2, 1), True: (5, 2, 1)}


def _load_engine(config: str, suites: list[str] | None, output_dir: str, verbose: bool):
    """Load config, set up logging and register every suite."""
    import yaml
    from pydantic import ValidationError

    from unitlane.assertions.library import AssertionLibrary
    from unitlane.config import build_sinks, load_config
    from unitlane.engine import TestEngine
    from unitlane.errors import RegistrationError, SuiteLoadError
    from unitlane.suites import register_suites
    from unitlane.verbose import setup_logger

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        run_config = load_config(config_path)
    except (ValidationError, yaml.YAMLError) as e:
        typer.echo(f"Error: invalid config {config}:\n{e}", err=True)
        raise typer.Exit(1)

    debug_file = Path(output_dir) / "debug.log"
    logger = setup_logger(debug_file, verbose=verbose, logger_name="unitlane")
    logger.debug(f"Loaded config {config_path.resolve()}")

    assertions = AssertionLibrary(
        name=run_config.name,
        debug=run_config.debug,
        show_default_message=run_config.show_default_message,
    )
    engine = TestEngine(
        assertions=assertions,
        sinks=build_sinks(run_config.report),
        name=run_config.name,
        logger=logger,
    )

    refs = [*run_config.suites, *(suites or [])]
    try:
        register_suites(engine, refs, search_path=config_path.parent)
    except (SuiteLoadError, RegistrationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    return engine, debug_file


@app.command()
def run(
    config: str = typer.Argument(help="Path to run YAML config"),
    suite: list[str] | None = typer.Option(
        None, "--suite", "-s", help="Extra module:function suite to register"
    ),
    output_dir: str = typer.Option(
        ".unitlane", help="Directory for the debug log"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run every test registered by the configured suites."""
    engine, debug_file = _load_engine(config, suite, output_dir, verbose)

    if not len(engine):
        typer.echo("No tests registered.")

    summary = engine.run()

    if not verbose:
        typer.echo(f"Debug log: {debug_file}")

    # Exit with non-zero if any test failed or errored
    if not summary.ok:
        raise typer.Exit(1)


@app.command("list")
def list_tests(
    config: str = typer.Argument(help="Path to run YAML config"),
    suite: list[str] | None = typer.Option(
        None, "--suite", "-s", help="Extra module:function suite to register"
    ),
    output_dir: str = typer.Option(
        ".unitlane", help="Directory for the debug log"
    ),
):
    """List registered tests in run order without running them."""
    engine, _ = _load_engine(config, suite, output_dir, verbose=False)
    labels = engine.list_registered()
    typer.echo(f"List {len(labels)} tests:")
    for label in labels:
        typer.echo(f"  {label}")


@app.command()
def smoke(
    all_suites: bool = typer.Option(
        False, "--all", help="Also run the assertion library self-check"
    ),
    show_pass: bool = typer.Option(
        True, "--show-pass/--hide-pass", help="Print passing tests"
    ),
):
    """Run the built-in smoke suite and check the outcomes are classified."""
    from unitlane.engine import TestEngine
    from unitlane.reporting.console import ConsoleSink
    from unitlane.selftest import all_suite, smoke_suite

    engine = TestEngine(
        name="SmokeTests", sinks=[ConsoleSink(show_pass=show_pass)]
    )
    (all_suite if all_suites else smoke_suite)(engine)
    summary = engine.run()

    expected = _SMOKE_EXPECTED[all_suites]
    got = (summary.passed, summary.failed, summary.errors)
    if got != expected:
        typer.echo(
            f"Error: expected pass/fail/error {expected}, got {got}", err=True
        )
        raise typer.Exit(1)
    typer.echo("Smoke test outcomes classified as expected.")


@app.command()
def init(
    dir: str = typer.Option(
        ".", "--dir", help="Directory to initialize the test project in"
    ),
):
    """Initialize a test project with an example config and suite."""
    project_dir = Path(dir)

    # Create the project directory if it doesn't exist
    if not project_dir.exists():
        project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "unitlane.yaml"
    if example.exists():
        typer.echo(f"unitlane.yaml already exists in {dir}, skipping.")
        return

    example.write_text("""\
name: ExampleTests
debug: false
show_default_message: true
suites:
  - example_tests:example_suite
report:
  console: true
  show_pass: true
  junit: reports/junit.xml
  html: reports/report.html
""")

    suite_file = project_dir / "example_tests.py"
    if not suite_file.exists():
        suite_file.write_text('''\
def example_suite(engine):
    def test_addition(unit):
        unit.assert_equal("1 + 1", 1 + 1, 2, code="ex1")

    def test_greeting(unit):
        unit.assert_str_contains("greeting", "hello world", "world", code="ex2")

    engine.register(test_addition)
    engine.register(test_greeting)
''')

    typer.echo(f"Initialized test project in {dir}:")
    typer.echo("  unitlane.yaml     - example run config")
    typer.echo("  example_tests.py  - example suite")


@schema_app.command("generate")
def schema_generate(
    dir: str = typer.Option(
        ".", "--dir", help="Project directory for default schema/doc outputs"
    ),
    out: str | None = typer.Option(
        None,
        help="Output path for JSON Schema (defaults to <dir>/schemas/unitlane.schema.json)",
    ),
    doc: str | None = typer.Option(
        None, help="Output path for schema docs (defaults to <dir>/docs/schema.md)"
    ),
):
    """Generate JSON Schema and docs for the run config format."""
    from unitlane.schema import write_json_schema, write_schema_doc

    project_dir = Path(dir)
    out_path = (
        Path(out)
        if out is not None
        else project_dir / "schemas" / "unitlane.schema.json"
    )
    doc_path = Path(doc) if doc is not None else project_dir / "docs" / "schema.md"
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")
