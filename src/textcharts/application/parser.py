"""Tabular parser turning delimited label/value text into records.

Input is one record per line, ``label<delimiter>value``. A first line whose
second field is not numeric is treated as a header and skipped:

    Category,Count
    External,14
    Internal,23
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from textcharts.domain import Record

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","

# Leading numeric prefix, so "12abc" reads as 12 and "1e3" as 1000.
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class FormatError(ValueError):
    """Raised when a data row's value field is not a number.

    Attributes:
        line: 1-based line number of the offending row.
        token: The text that failed to parse.
    """

    def __init__(self, line: int, token: str) -> None:
        self.line = line
        self.token = token
        super().__init__(f"Invalid number in row {line}: {token}")


def parse_number(token: str) -> float | None:
    """Parse the numeric prefix of ``token``.

    Returns:
        The parsed float, or None when ``token`` does not start with a number.
    """
    match = _NUMBER_PREFIX.match(token.strip())
    if match is None:
        return None
    return float(match.group(0))


def _is_header(line: str, delimiter: str) -> bool:
    if delimiter not in line:
        return False
    return parse_number(line.split(delimiter)[1]) is None


def parse_dataset(text: str, delimiter: str = DEFAULT_DELIMITER) -> list[Record]:
    """Parse delimited text into records, preserving input order.

    Args:
        text: Raw delimited text.
        delimiter: Field separator.

    Returns:
        Records in input order. Entirely blank input yields an empty list.

    Raises:
        FormatError: If a data row's value field is not numeric, or its
            label field is empty.
    """
    stripped = text.strip()
    if not stripped:
        return []

    lines = stripped.split("\n")
    start_index = 1 if _is_header(lines[0], delimiter) else 0
    if start_index:
        logger.debug(f"Skipping header row: {lines[0].strip()!r}")

    records: list[Record] = []
    for index in range(start_index, len(lines)):
        line = lines[index].strip()
        if not line:
            continue

        parts = [part.strip() for part in line.split(delimiter)]
        if len(parts) < 2:
            continue

        label, token = parts[0], parts[1]
        value = parse_number(token)
        if value is None:
            raise FormatError(line=index + 1, token=token)
        if not label:
            raise FormatError(line=index + 1, token=label)
        try:
            records.append(Record(label=label, value=value))
        except ValueError:
            raise FormatError(line=index + 1, token=token)

    logger.debug(f"Parsed {len(records)} records from {len(lines)} lines")
    return records


def parse_dataset_file(path: Path, delimiter: str = DEFAULT_DELIMITER) -> list[Record]:
    """Read a UTF-8 file and parse it with :func:`parse_dataset`."""
    return parse_dataset(path.read_text(encoding="utf-8"), delimiter=delimiter)
