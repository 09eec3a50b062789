from __future__ import annotations

from pathlib import Path

import typer
import yaml

from win11ready.config import CheckConfig, ProbeType

app = typer.Typer(
    name="win11ready", help="Check a host against the Windows 11 hardware minimums"
)
schema_app = typer.Typer(name="schema", help="Generate schema tooling")
app.add_typer(schema_app, name="schema")

EXAMPLE_CONFIG = """\
# Probe used to collect facts: windows (this host) or snapshot (a facts file)
probe: windows
# snapshot: facts.yaml
system_drive: ${SystemDrive:-C:}
powershell: powershell.exe
query_timeout: 30

thresholds:
  min_clock_ghz: 1.0
  min_logical_cores: 2
  min_memory_gb: 4
  min_free_storage_gb: 64
  tpm_version_pattern: '2\\.0'
  min_os_version: 10.0.19041
  min_os_build: 19041
"""


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(2)


def _load_check_config(
    config: str | None, probe: ProbeType | None = None, facts: str | None = None
) -> CheckConfig:
    from win11ready.config import load_config

    check_config = CheckConfig()
    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            raise _fail(f"config file not found: {config}")
        try:
            check_config = load_config(config_path)
        except (ValueError, OSError, yaml.YAMLError) as e:
            raise _fail(f"invalid config {config}: {e}")

    if facts is not None:
        facts_path = Path(facts)
        if not facts_path.exists():
            raise _fail(f"facts file not found: {facts}")
        check_config = check_config.model_copy(
            update={"probe": ProbeType.SNAPSHOT, "snapshot": str(facts_path.resolve())}
        )
    elif probe is not None:
        check_config = check_config.model_copy(update={"probe": probe})

    return check_config


def _build_probe(check_config: CheckConfig):
    from win11ready.probes import get_probe

    try:
        return get_probe(check_config.probe, check_config)
    except (ValueError, OSError, yaml.YAMLError) as e:
        raise _fail(str(e))


@app.command()
def check(
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to YAML config"
    ),
    probe: ProbeType | None = typer.Option(
        None, help="Probe to collect facts with (overrides config)"
    ),
    facts: str | None = typer.Option(
        None, help="Evaluate a facts snapshot instead of this host"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Also write the JSON document to this file"
    ),
    json_only: bool = typer.Option(
        False, "--json-only", help="Print only the JSON document"
    ),
    junit: str | None = typer.Option(None, help="Write a JUnit XML report here"),
    html: str | None = typer.Option(None, help="Write an HTML report here"),
    debug_log: str | None = typer.Option(None, help="Append debug logging to this file"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to stderr"
    ),
):
    """Evaluate the host against the minimums. Exit status is the returnCode."""
    from win11ready.evaluator import Evaluator
    from win11ready.reporting.console import render_console
    from win11ready.reporting.document import write_document
    from win11ready.verbose import setup_logger

    check_config = _load_check_config(config, probe=probe, facts=facts)
    logger = setup_logger(Path(debug_log) if debug_log else None, verbose=verbose)
    host_probe = _build_probe(check_config)

    result = Evaluator(host_probe, check_config.thresholds, logger=logger).execute()

    if not json_only:
        render_console(result)
    typer.echo(result.to_json())

    if output:
        write_document(Path(output), result)
    if junit:
        from win11ready.reporting.junit import write_junit

        write_junit(Path(junit), result)
    if html:
        from win11ready.reporting.html import generate_report

        generate_report(Path(html), result)

    raise typer.Exit(result.return_code)


@app.command("facts")
def facts_command(
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to YAML config"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Write the snapshot here instead of stdout"
    ),
    debug_log: str | None = typer.Option(None, help="Append debug logging to this file"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to stderr"
    ),
):
    """Collect host facts into a snapshot that `check --facts` can evaluate."""
    from win11ready.probes import dump_snapshot
    from win11ready.verbose import setup_logger

    check_config = _load_check_config(config)
    logger = setup_logger(Path(debug_log) if debug_log else None, verbose=verbose)
    host_probe = _build_probe(check_config)

    text = dump_snapshot(host_probe.collect(logger))
    if output is None:
        typer.echo(text, nl=False)
        return

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    typer.echo(f"Wrote facts: {output_path}")


@app.command()
def init(
    dir: str = typer.Option(".", "--dir", help="Directory to write win11ready.yaml in"),
):
    """Write an example config with the default thresholds."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "win11ready.yaml"
    if example.exists():
        typer.echo(f"win11ready.yaml already exists in {dir}, skipping.")
        return

    example.write_text(EXAMPLE_CONFIG)
    typer.echo(f"Wrote example config: {example}")


@schema_app.command("generate")
def schema_generate(
    dir: str = typer.Option(
        ".", "--dir", help="Project directory for default schema/doc outputs"
    ),
    out: str | None = typer.Option(
        None,
        help="Output path for JSON Schema (defaults to <dir>/schemas/win11ready.schema.json)",
    ),
    doc: str | None = typer.Option(
        None, help="Output path for schema docs (defaults to <dir>/docs/schema.md)"
    ),
):
    """Generate JSON Schema and docs for the config and snapshot formats."""
    from win11ready.schema import write_json_schema, write_schema_doc

    project_dir = Path(dir)
    out_path = (
        Path(out)
        if out is not None
        else project_dir / "schemas" / "win11ready.schema.json"
    )
    doc_path = Path(doc) if doc is not None else project_dir / "docs" / "schema.md"
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")
