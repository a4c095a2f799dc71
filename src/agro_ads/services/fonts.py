"""Font loading for the compositor."""

import logging
from functools import lru_cache

from PIL import ImageFont

from ..config import settings

logger = logging.getLogger(__name__)

BOLD_FONT_NAMES = (
    "DejaVuSans-Bold.ttf",
    "Arial Bold.ttf",
    "arialbd.ttf",
    "LiberationSans-Bold.ttf",
    "Helvetica.ttc",
)
EMOJI_FONT_NAMES = ("NotoColorEmoji.ttf", "seguiemj.ttf", "Apple Color Emoji.ttc")
# Bitmap colour-emoji fonts only render at their native strike size
EMOJI_NATIVE_SIZE = 109

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


@lru_cache(maxsize=32)
def load_bold_font(size: int) -> Font:
    """Bold sans-serif font at the given size, falling back to Pillow's default."""
    candidates = (settings.FONT_PATH,) if settings.FONT_PATH else ()
    for name in candidates + BOLD_FONT_NAMES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    logger.warning(f"No bold TrueType font found, using default font at {size}px")
    return ImageFont.load_default(size=size)


@lru_cache(maxsize=4)
def load_emoji_font(size: int) -> tuple[Font, bool]:
    """Colour emoji font if one is installed.

    Returns:
        (font, embedded_color) - embedded_color is False for the bold-font fallback
    """
    candidates = (settings.EMOJI_FONT_PATH,) if settings.EMOJI_FONT_PATH else ()
    for name in candidates + EMOJI_FONT_NAMES:
        for font_size in (size, EMOJI_NATIVE_SIZE):
            try:
                return ImageFont.truetype(name, font_size), True
            except OSError:
                continue
    return load_bold_font(size), False
