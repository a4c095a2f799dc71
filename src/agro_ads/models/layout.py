"""Data model for laid-out ad text."""

from enum import Enum

from pydantic import BaseModel, Field


class Band(str, Enum):
    """Vertical region of the canvas a line is drawn in."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class LayoutLine(BaseModel):
    """A single wrapped line with its position on the canvas."""

    text: str
    band: Band
    x: int = Field(..., description="Horizontal centre of the line")
    y: int = Field(..., description="Baseline of the line")
    font_size: int = Field(..., description="Size the line is drawn at, after any shrink")


class TextLayout(BaseModel):
    """Result of laying out ad text on the canvas."""

    lines: list[LayoutLine] = Field(default_factory=list)
    font_size: int
    line_height: int
    max_width: int

    def in_band(self, band: Band) -> list[LayoutLine]:
        """Lines assigned to one band, top to bottom."""
        return [line for line in self.lines if line.band == band]
