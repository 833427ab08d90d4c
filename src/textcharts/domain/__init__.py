"""Domain layer - records, canvas and layout primitives."""

from .canvas import Canvas
from .label_placement import LabelPolicy, LabelRow, LabelSpan, place_labels
from .numeric import (
    axis_value,
    format_fixed,
    format_legend_value,
    format_value,
    round_half_up,
    safe_ratio,
)
from .value_objects import (
    BLANK,
    DEFAULT_AREA_CHARS,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BAR_CHAR,
    DEFAULT_PIE_CHARS,
    DEFAULT_TEXT_COLOR,
    Artifact,
    ChartKind,
    OutputFormat,
    PreconditionError,
    Record,
    StyleParameters,
)

__all__ = [
    # Value objects
    "BLANK",
    "DEFAULT_AREA_CHARS",
    "DEFAULT_BACKGROUND_COLOR",
    "DEFAULT_BAR_CHAR",
    "DEFAULT_PIE_CHARS",
    "DEFAULT_TEXT_COLOR",
    "Artifact",
    "ChartKind",
    "OutputFormat",
    "PreconditionError",
    "Record",
    "StyleParameters",
    # Canvas
    "Canvas",
    # Label placement
    "LabelPolicy",
    "LabelRow",
    "LabelSpan",
    "place_labels",
    # Numeric helpers
    "axis_value",
    "format_fixed",
    "format_legend_value",
    "format_value",
    "round_half_up",
    "safe_ratio",
]
