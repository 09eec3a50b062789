from __future__ import annotations

import typer

from win11ready.evaluator import EvaluationResult

BANNER = "Windows 11 Compatibility Check"
SEPARATOR = "-" * 40


def render_console(result: EvaluationResult) -> None:
    """Print the banner, one coloured line per facet, and the overall status."""
    typer.echo(BANNER)
    typer.echo("=" * len(BANNER))
    for r in result.facets:
        colour = typer.colors.GREEN if r.passed else typer.colors.RED
        typer.secho(f"[{r.verdict.value}] ", fg=colour, bold=True, nl=False)
        typer.echo(f"{r.facet.display_name}: {r.detail}")
    typer.echo(SEPARATOR)
    typer.secho(
        f"Overall Status: {result.overall.label}",
        fg=typer.colors.GREEN if result.return_code == 0 else typer.colors.RED,
        bold=True,
    )
