"""Application commands (use cases) for chart rendering."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from textcharts.domain import ChartKind, Record, StyleParameters
from textcharts.infrastructure import pie_percentages, render

from .dtos import ChartOutput
from .parser import DEFAULT_DELIMITER, parse_dataset

logger = logging.getLogger(__name__)


class EmptyDatasetError(ValueError):
    """Raised when there is nothing to render.

    Distinct from a parse failure: blank input parses cleanly to an empty
    dataset, which callers should report as "nothing to render".
    """

    def __init__(self) -> None:
        super().__init__("Nothing to render: the dataset is empty")


class RenderChartCommand:
    """Command to parse tabular data and render it as a chart."""

    def __init__(self, style: StyleParameters | None = None) -> None:
        self.style = style or StyleParameters()

    def execute(
        self,
        records: Sequence[Record],
        kind: ChartKind | str,
        style: StyleParameters | None = None,
    ) -> ChartOutput:
        """Render an already parsed dataset.

        Args:
            records: Dataset in display order.
            kind: Chart kind or its name.
            style: Overrides the command's default style when given.

        Returns:
            ChartOutput carrying the artifact and any precondition errors.

        Raises:
            EmptyDatasetError: If ``records`` is empty.
            UnsupportedChartKindError: If no renderer handles ``kind``.
        """
        if not records:
            raise EmptyDatasetError()

        artifact = render(kind, records, style or self.style)
        resolved = artifact.kind

        output = ChartOutput(kind=resolved, records=list(records), artifact=artifact)
        if artifact.error is not None:
            output.errors.append(artifact.error.message)
        elif resolved is ChartKind.PIE:
            output.percentages = pie_percentages(records)

        logger.info(
            f"Rendered {resolved.value} chart for {len(records)} records"
            f"{' with errors' if output.errors else ''}"
        )
        return output

    def execute_text(
        self,
        text: str,
        kind: ChartKind | str,
        style: StyleParameters | None = None,
        delimiter: str = DEFAULT_DELIMITER,
    ) -> ChartOutput:
        """Parse delimited text and render it.

        Raises:
            FormatError: If a value field is not numeric.
            EmptyDatasetError: If the text holds no data rows.
            UnsupportedChartKindError: If no renderer handles ``kind``.
        """
        records = parse_dataset(text, delimiter=delimiter)
        return self.execute(records, kind, style)
