"""CLI command modules."""

from textcharts.cli.commands.render import render_command
from textcharts.cli.commands.validate import validate_command

__all__ = ["render_command", "validate_command"]
