"""Render command for drawing a chart from a delimited data file.

Exit codes:
    0 - Chart rendered
    1 - Input, configuration or chart kind error (nothing rendered)
    2 - Rendered an error artifact (missing or insufficient glyphs)
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from textcharts.application import (
    EmptyDatasetError,
    FormatError,
    RenderChartCommand,
)
from textcharts.application.config import (
    ChartConfiguration,
    ConfigError,
    config_to_kind,
    config_to_style,
    load_config,
    merge_config_with_cli,
)
from textcharts.cli.commands.validate import display_load_error
from textcharts.infrastructure import UnsupportedChartKindError

STDIN_MARKER = "-"


def _read_data(data_file: Path) -> str:
    if str(data_file) == STDIN_MARKER:
        return typer.get_text_stream("stdin").read()
    try:
        return data_file.read_text(encoding="utf-8")
    except FileNotFoundError:
        typer.echo(f"Error: Data file not found: {data_file}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not read data file {data_file}: {e}", err=True)
        raise typer.Exit(code=1)


def render_command(
    data_file: Annotated[
        Path,
        typer.Argument(help="Delimited label,value file ('-' reads stdin)"),
    ],
    kind: Annotated[
        str | None,
        typer.Option("--kind", "-k", help="Chart kind: bar, vertical_bar, area, pie"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    bar_char: Annotated[
        str | None,
        typer.Option("--bar-char", help="Glyph for bar charts"),
    ] = None,
    line_char: Annotated[
        str | None,
        typer.Option("--line-char", help="Line glyph for area charts"),
    ] = None,
    fill_char: Annotated[
        str | None,
        typer.Option("--fill-char", help="Fill glyph for area charts"),
    ] = None,
    pie_chars: Annotated[
        str | None,
        typer.Option("--pie-chars", help="Pie slice glyphs, one per character"),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option("--title", help="Heading override"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text or html"),
    ] = None,
    delimiter: Annotated[
        str | None,
        typer.Option("--delimiter", help="Field separator of the data file"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the chart to this file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Render a chart from a delimited data file.

    Example:
        textcharts render traffic.csv --kind pie --format html -o traffic.html
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        base = load_config(config_file) if config_file else ChartConfiguration()
        config = merge_config_with_cli(
            base,
            kind=kind,
            title=title,
            bar_char=bar_char,
            line_char=line_char,
            fill_char=fill_char,
            pie_chars=list(pie_chars) if pie_chars is not None else None,
            output_format=output_format,
            delimiter=delimiter,
        )
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    text = _read_data(data_file)
    command = RenderChartCommand()
    try:
        result = command.execute_text(
            text,
            config_to_kind(config),
            style=config_to_style(config),
            delimiter=config.output.delimiter,
        )
    except FormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except EmptyDatasetError:
        typer.echo("Nothing to render: no data rows found.", err=True)
        raise typer.Exit(code=1)
    except UnsupportedChartKindError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.text, encoding="utf-8")
        typer.echo(f"Wrote {result.kind.value} chart to {output}")
    else:
        typer.echo(result.text, nl=False)

    if not result.is_valid:
        for message in result.errors:
            typer.echo(f"Warning: {message}", err=True)
        raise typer.Exit(code=2)
