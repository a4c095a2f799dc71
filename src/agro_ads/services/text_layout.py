"""Word wrapping and three-band placement of ad text on the canvas."""

import math
from collections.abc import Callable

from ..models.layout import Band, LayoutLine, TextLayout
from .fonts import Font, load_bold_font

CANVAS_WIDTH = 1080
MAX_TEXT_WIDTH = 950
BASE_FONT_SIZE = 52
SHRINK_STEP = 6
LINE_GAP = 14

# (max wrapped lines, font size); more lines than the last step use MIN_FONT_SIZE
FONT_SIZE_STEPS: tuple[tuple[int, int], ...] = ((6, 52), (9, 46), (12, 40))
MIN_FONT_SIZE = 36

BAND_ANCHORS: dict[Band, int] = {
    Band.TOP: 150,
    Band.MIDDLE: 480,
    Band.BOTTOM: 850,
}
BAND_ORDER = (Band.TOP, Band.MIDDLE, Band.BOTTOM)


def choose_font_size(line_count: int) -> int:
    """Coarse font size step for a number of wrapped lines."""
    for max_lines, size in FONT_SIZE_STEPS:
        if line_count <= max_lines:
            return size
    return MIN_FONT_SIZE


class TextLayoutEngine:
    """Lays out multi-line ad text over a square canvas."""

    def __init__(
        self,
        canvas_width: int = CANVAS_WIDTH,
        max_text_width: int = MAX_TEXT_WIDTH,
        font_loader: Callable[[int], Font] = load_bold_font,
    ):
        self.canvas_width = canvas_width
        self.max_text_width = max_text_width
        self.font_loader = font_loader

    def measure(self, text: str, font_size: int) -> float:
        """Advance width of text in pixels at the given size."""
        return self.font_loader(font_size).getlength(text)

    def fits(self, text: str, font_size: int) -> bool:
        return self.measure(text, font_size) <= self.max_text_width

    def break_word(self, word: str, font_size: int) -> list[str]:
        """Split a word that is wider than the budget on its own into fitting pieces."""
        pieces = []
        current = ""
        for ch in word:
            if current and not self.fits(current + ch, font_size):
                pieces.append(current)
                current = ch
            else:
                current += ch
        if current:
            pieces.append(current)
        return pieces

    def wrap_line(self, line: str, font_size: int = BASE_FONT_SIZE) -> list[str]:
        """Greedy word wrap of one line to the width budget."""
        words = []
        for word in line.split():
            if self.fits(word, font_size):
                words.append(word)
            else:
                words.extend(self.break_word(word, font_size))

        wrapped = []
        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else word
            if current and not self.fits(candidate, font_size):
                wrapped.append(current)
                current = word
            else:
                current = candidate
        if current:
            wrapped.append(current)
        return wrapped

    def wrap(self, ad_text: str) -> list[str]:
        """Wrap every non-blank line of the ad text at the base font size."""
        wrapped = []
        for line in ad_text.split("\n"):
            if line.strip():
                wrapped.extend(self.wrap_line(line.strip()))
        return wrapped

    def layout(self, ad_text: str) -> TextLayout:
        """Wrap ad text, pick a font size and distribute the lines over three bands.

        Lines are split into thirds of ceil(n / 3) lines each, top band first.
        A line still wider than the budget at the chosen size is drawn 6px smaller.
        """
        wrapped = self.wrap(ad_text)
        font_size = choose_font_size(len(wrapped))
        line_height = font_size + LINE_GAP
        per_band = math.ceil(len(wrapped) / 3) if wrapped else 0
        center_x = self.canvas_width // 2

        lines = []
        for band_index, band in enumerate(BAND_ORDER):
            start = band_index * per_band
            end = start + per_band if band != Band.BOTTOM else len(wrapped)
            for index, text in enumerate(wrapped[start:end]):
                size = font_size if self.fits(text, font_size) else font_size - SHRINK_STEP
                lines.append(
                    LayoutLine(
                        text=text,
                        band=band,
                        x=center_x,
                        y=BAND_ANCHORS[band] + index * line_height,
                        font_size=size,
                    )
                )

        return TextLayout(
            lines=lines,
            font_size=font_size,
            line_height=line_height,
            max_width=self.max_text_width,
        )
