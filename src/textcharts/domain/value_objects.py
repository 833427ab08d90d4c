"""Value objects for the chart rendering domain."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

# Non-breaking space. Distinct from an ordinary space so clipboard and HTML
# consumers keep the grid whitespace verbatim.
BLANK = " "

DEFAULT_BAR_CHAR = "█"
DEFAULT_AREA_CHARS: tuple[str, str] = ("█", "▓")
DEFAULT_PIE_CHARS: tuple[str, ...] = (
    "█",
    "▓",
    "▒",
    "░",
    "▄",
    "▀",
    "▌",
    "▐",
    "■",
    "□",
    "▪",
    "▫",
)
DEFAULT_BACKGROUND_COLOR = "#1e293b"
DEFAULT_TEXT_COLOR = "#4ade80"


class ChartKind(str, Enum):
    """Kinds of chart the rendering engine can produce.

    Attributes:
        BAR: Horizontal bar graph, one row per record.
        VERTICAL_BAR: Vertical bar chart on a fixed 15 row canvas.
        AREA: Area chart with a line glyph and a fill glyph.
        PIE: Pie chart approximated on a 24x24 grid.
    """

    BAR = "bar"
    VERTICAL_BAR = "vertical_bar"
    AREA = "area"
    PIE = "pie"

    @property
    def title(self) -> str:
        """Default heading used for artifacts of this kind."""
        return _CHART_TITLES[self]

    @classmethod
    def parse(cls, value: str | ChartKind) -> ChartKind:
        """Resolve a chart kind from its name or a known alias.

        Args:
            value: Kind name such as "bar", "verticalBar" or "pie".

        Returns:
            The matching ChartKind.

        Raises:
            ValueError: If the name is not a known kind or alias.
        """
        if isinstance(value, ChartKind):
            return value
        key = value.strip()
        if key in _CHART_ALIASES:
            return _CHART_ALIASES[key]
        try:
            return cls(key.lower())
        except ValueError:
            valid = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unknown chart kind '{value}'. Valid kinds: {valid}")


_CHART_TITLES: dict[ChartKind, str] = {
    ChartKind.BAR: "Bar Graph",
    ChartKind.VERTICAL_BAR: "Vertical Bar Chart",
    ChartKind.AREA: "Area Chart",
    ChartKind.PIE: "Pie Chart",
}

_CHART_ALIASES: dict[str, ChartKind] = {
    "horizontal_bar": ChartKind.BAR,
    "verticalBar": ChartKind.VERTICAL_BAR,
    "vertical-bar": ChartKind.VERTICAL_BAR,
}


class OutputFormat(str, Enum):
    """Serialization used for a rendered artifact."""

    TEXT = "text"
    HTML = "html"


@dataclass(frozen=True)
class Record:
    """One labelled value from the input dataset.

    Attributes:
        label: Non-empty display label.
        value: Finite numeric value. Negative values are accepted but give
            an undefined visual scale.
    """

    label: str
    value: float

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("Record label must not be empty")
        if not math.isfinite(self.value):
            raise ValueError(f"Record value must be finite, got {self.value!r}")


@dataclass(frozen=True)
class StyleParameters:
    """Glyphs and colors controlling a single render call.

    Glyph presence is not checked here. Each renderer checks the glyphs it
    needs and answers with an error artifact instead.

    Attributes:
        bar_char: Glyph for horizontal and vertical bars.
        area_chars: (line glyph, fill glyph) for the area chart.
        pie_chars: Glyphs assigned to pie slices in record order.
        background_color: Opaque color string for markup output.
        text_color: Opaque color string for markup output.
        title: Heading override; None uses the chart kind's title.
        output_format: Plain text or HTML markup.
    """

    bar_char: str = DEFAULT_BAR_CHAR
    area_chars: tuple[str, str] = DEFAULT_AREA_CHARS
    pie_chars: tuple[str, ...] = DEFAULT_PIE_CHARS
    background_color: str = DEFAULT_BACKGROUND_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    title: str | None = None
    output_format: OutputFormat = OutputFormat.TEXT

    def __post_init__(self) -> None:
        # Accept lists from callers but keep the object hashable.
        object.__setattr__(self, "area_chars", tuple(self.area_chars))
        object.__setattr__(self, "pie_chars", tuple(self.pie_chars))
        object.__setattr__(self, "output_format", OutputFormat(self.output_format))
        if len(self.area_chars) != 2:
            raise ValueError("area_chars must hold exactly a line and a fill glyph")


@dataclass(frozen=True)
class PreconditionError:
    """Describes missing or insufficient glyphs for a render call.

    Renderers never raise this. It travels on the returned Artifact so the
    caller can display the message like any other render.

    Attributes:
        message: Human-readable description, without the "Error:" prefix.
        required: Number of glyphs needed, when a count applies.
        selected: Number of glyphs supplied, when a count applies.
    """

    message: str
    required: int | None = None
    selected: int | None = None


@dataclass(frozen=True)
class Artifact:
    """Finished output of a render call.

    Attributes:
        text: The rendered text, plain or with embedded markup.
        kind: Chart kind that produced it.
        output_format: Serialization of ``text``.
        error: Precondition failure this artifact reports, if any.
    """

    text: str
    kind: ChartKind
    output_format: OutputFormat = OutputFormat.TEXT
    error: PreconditionError | None = field(default=None)

    @property
    def is_error(self) -> bool:
        """Whether this artifact reports a precondition failure."""
        return self.error is not None

    def __str__(self) -> str:
        return self.text
