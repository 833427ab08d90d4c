"""Typer CLI for text chart rendering."""

import typer

from textcharts.cli.commands import render_command, validate_command
from textcharts.domain import ChartKind
from textcharts.infrastructure import RendererRegistry

app = typer.Typer(
    name="textcharts",
    help="Render label/value data as monospace text charts.",
)

app.command(name="render")(render_command)
app.command(name="validate")(validate_command)


@app.command()
def kinds() -> None:
    """List the available chart kinds."""
    for name in RendererRegistry.available_kinds():
        typer.echo(f"{name:<14} {ChartKind(name).title}")


if __name__ == "__main__":
    app()
