"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field

from textcharts.domain import (
    DEFAULT_AREA_CHARS,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BAR_CHAR,
    DEFAULT_PIE_CHARS,
    DEFAULT_TEXT_COLOR,
    Record,
)


class RecordSchema(BaseModel):
    """One label/value pair."""

    label: str = Field(..., min_length=1, description="Display label")
    value: float = Field(..., allow_inf_nan=False, description="Numeric value")

    def to_domain(self) -> Record:
        return Record(label=self.label, value=self.value)


class StyleSchema(BaseModel):
    """Glyphs and colors for a render call."""

    bar_char: str = Field(default=DEFAULT_BAR_CHAR, description="Bar glyph")
    area_chars: tuple[str, str] = Field(
        default=DEFAULT_AREA_CHARS, description="Area line and fill glyphs"
    )
    pie_chars: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PIE_CHARS),
        description="Pie slice glyphs in record order",
    )
    background_color: str = Field(
        default=DEFAULT_BACKGROUND_COLOR, description="Background color for markup"
    )
    text_color: str = Field(default=DEFAULT_TEXT_COLOR, description="Text color for markup")
