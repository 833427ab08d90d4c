"""Data transfer objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from textcharts.domain import Artifact, ChartKind, Record


@dataclass
class ChartOutput:
    """Result of a render command.

    Attributes:
        kind: Chart kind that was rendered.
        records: Dataset the chart was rendered from.
        artifact: The rendered artifact (possibly an error artifact).
        percentages: Share of the total per record, for pie charts.
        errors: Precondition messages reported by the renderer.
    """

    kind: ChartKind
    records: list[Record]
    artifact: Artifact
    percentages: list[float] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if the artifact is a chart rather than an error message."""
        return not self.errors

    @property
    def text(self) -> str:
        return self.artifact.text
