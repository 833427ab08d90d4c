"""Loading chart configuration files.

A configuration is a JSON object validated against ``ChartConfiguration``.
Every failure, from a missing file to a bad glyph list, surfaces as a
``ConfigError`` whose ``details`` name the offending setting by its dotted
path (``style.area_chars``, ``chart.kind``) with a message phrased in chart
terms.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from textcharts.application.config.schema import ChartConfiguration

# Pydantic error types that mean "wrong number of items or characters".
_LENGTH_ERRORS = frozenset({"too_short", "too_long", "string_too_short", "string_too_long"})

_SETTING_HINTS: dict[str, str] = {
    "style.area_chars": "area charts take exactly two glyphs, a line glyph then a fill glyph",
    "style.pie_chars": "pie glyphs are a list of strings, one per slice",
    "style.bar_char": "the bar glyph is a single string",
    "output.delimiter": "the delimiter is exactly one character",
    "output.format": "the output format is 'text' or 'html'",
}


class ConfigError(Exception):
    """A chart configuration could not be loaded.

    Attributes:
        message: Summary shown to the user.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: Configuration file, when loading from disk.
        details: One entry per problem. Validation entries carry ``path``
            (dotted setting name), ``message``, ``value`` and ``error_type``.
            JSON entries carry ``line``, ``column`` and ``message``.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _setting_name(loc: tuple[str | int, ...]) -> str:
    """Dotted setting name, with list positions in brackets.

    Examples:
        >>> _setting_name(("style", "pie_chars", 2))
        'style.pie_chars[2]'
    """
    name = ""
    for part in loc:
        name += f"[{part}]" if isinstance(part, int) else f".{part}"
    return name.lstrip(".")


def _describe(err: dict[str, Any]) -> dict[str, Any]:
    """Turn one pydantic error into a chart-setting problem."""
    setting = _setting_name(err["loc"])
    base_setting = setting.split("[", 1)[0]
    message = err["msg"]

    if err["type"] == "value_error":
        # Our own validators; drop pydantic's "Value error, " prefix.
        message = str(err.get("ctx", {}).get("error", message))
    elif err["type"] == "extra_forbidden":
        message = "not a chart setting"
    elif base_setting in _SETTING_HINTS and (
        err["type"] in _LENGTH_ERRORS or base_setting != setting or err["type"].endswith("_type")
    ):
        message = _SETTING_HINTS[base_setting]
        if err["type"] in _LENGTH_ERRORS and isinstance(err.get("input"), (list, str)):
            message += f" (got {len(err['input'])})"
    elif base_setting in _SETTING_HINTS:
        message = f"{message}; {_SETTING_HINTS[base_setting]}"

    return {
        "path": setting,
        "message": message,
        "value": err.get("input"),
        "error_type": err["type"],
    }


def _validation_error(
    error: PydanticValidationError, source: Path | None
) -> ConfigError:
    details = [_describe(err) for err in error.errors()]
    where = f" in {source}" if source is not None else ""
    lines = [f"Invalid chart configuration{where}:"]
    lines.extend(f"  - {d['path']}: {d['message']}" for d in details)
    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=source,
        details=details,
    )


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config(path: Path) -> ChartConfiguration:
    """Load and validate a chart configuration from a JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not describe a valid chart configuration.

    Example:
        >>> config = load_config(Path("pie.json"))
        >>> config.chart.kind
        <ChartKind.PIE: 'pie'>
    """
    return load_config_from_dict(_read_json(path), source=path)


def load_config_from_dict(
    data: Any, source: Path | None = None
) -> ChartConfiguration:
    """Validate already decoded configuration data.

    Args:
        data: Decoded JSON; must be an object.
        source: File the data came from, used in messages.

    Raises:
        ConfigError: With error_type "validation" on any invalid setting.
    """
    if not isinstance(data, dict):
        raise ConfigError(
            message="A chart configuration must be a JSON object",
            error_type="validation",
            path=source,
            details=[
                {
                    "path": "<root>",
                    "message": "expected an object",
                    "value": data,
                    "error_type": "dict_type",
                }
            ],
        )
    try:
        return ChartConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, source)
