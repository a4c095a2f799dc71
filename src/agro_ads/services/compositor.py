"""Renders the final 1080x1080 ad image with Pillow."""

import base64
import io
import logging
from dataclasses import dataclass

from PIL import Image, ImageDraw, ImageFilter

from ..errors import CompositingFailure
from ..models.ad import AnimalCategory, ComposedImage, ImageSource
from .fonts import Font, load_bold_font, load_emoji_font
from .text_layout import CANVAS_WIDTH, TextLayoutEngine

logger = logging.getLogger(__name__)

CANVAS_SIZE = (CANVAS_WIDTH, CANVAS_WIDTH)
CENTER_X = CANVAS_WIDTH // 2
TEXT_COLOR = (255, 255, 255, 255)


@dataclass(frozen=True)
class GradientBand:
    """Vertical black gradient over a horizontal strip: (offset 0-1, opacity 0-1) stops."""

    top: int
    height: int
    stops: tuple[tuple[float, float], ...]


# Darkening bands behind the text, heaviest at the bottom
OVERLAY_BANDS: tuple[GradientBand, ...] = (
    GradientBand(top=0, height=300, stops=((0.0, 0.6), (0.5, 0.3), (1.0, 0.0))),
    GradientBand(top=350, height=400, stops=((0.0, 0.0), (0.5, 0.4), (1.0, 0.0))),
    GradientBand(
        top=650, height=430, stops=((0.0, 0.0), (0.2, 0.5), (0.5, 0.75), (1.0, 0.92))
    ),
)

SHADOW_BLUR = 15
SHADOW_OFFSET = (3, 3)
SHADOW_OPACITY = 0.9

# Fallback composition
FALLBACK_GRADIENT: tuple[tuple[float, tuple[int, int, int]], ...] = (
    (0.0, (0x16, 0xA3, 0x4A)),
    (0.5, (0x15, 0x80, 0x3D)),
    (1.0, (0x16, 0x65, 0x34)),
)
FALLBACK_TITLE_SIZE = 70
FALLBACK_TITLE_Y = 300
FALLBACK_SHADOW_BLUR = 10
FALLBACK_SHADOW_OPACITY = 0.5
FALLBACK_EMOJI_SIZE = 100
FALLBACK_EMOJI_POSITIONS = ((200, 500), (880, 500))
FALLBACK_TEXT_SIZE = 55
FALLBACK_TEXT_Y = 650
FALLBACK_LINE_HEIGHT = 80
FALLBACK_MAX_CHARS = 120

DEFAULT_EMOJIS = ("🌾", "🐥")
ANIMAL_EMOJIS: dict[AnimalCategory, tuple[str, str]] = {
    AnimalCategory.CATTLE: ("🐄", "🐮"),
    AnimalCategory.PIGS: ("🐷", "🐖"),
    AnimalCategory.GOATS_AND_SHEEP: ("🐐", "🐑"),
    AnimalCategory.FISH: ("🐟", "🐠"),
    AnimalCategory.DUCKS: ("🦆", "🦢"),
    AnimalCategory.RABBITS: ("🐰", "🐇"),
}


def emojis_for(animal_type: AnimalCategory) -> tuple[str, str]:
    return ANIMAL_EMOJIS.get(animal_type, DEFAULT_EMOJIS)


def clip(text: str, limit: int = FALLBACK_MAX_CHARS) -> str:
    return text if len(text) <= limit else text[: limit - 1] + "…"


def interpolate_stops(stops: tuple[tuple[float, float], ...], t: float) -> float:
    """Linear interpolation between sorted (offset, value) stops."""
    if t <= stops[0][0]:
        return stops[0][1]
    for (start, start_value), (end, end_value) in zip(stops, stops[1:]):
        if t <= end:
            ratio = (t - start) / (end - start) if end > start else 1.0
            return start_value + (end_value - start_value) * ratio
    return stops[-1][1]


def gradient_layer(band: GradientBand, size: tuple[int, int] = CANVAS_SIZE) -> Image.Image:
    """Transparent layer with one black gradient band drawn row by row."""
    layer = Image.new("RGBA", size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)
    width = size[0]
    for row in range(band.height):
        y = band.top + row
        if y >= size[1]:
            break
        t = row / max(band.height - 1, 1)
        alpha = round(interpolate_stops(band.stops, t) * 255)
        draw.line([(0, y), (width, y)], fill=(0, 0, 0, alpha))
    return layer


def fallback_background(size: tuple[int, int] = CANVAS_SIZE) -> Image.Image:
    """Opaque three-stop green vertical gradient."""
    image = Image.new("RGBA", size)
    draw = ImageDraw.Draw(image)
    width, height = size
    channel_stops = [
        tuple((offset, rgb[channel]) for offset, rgb in FALLBACK_GRADIENT) for channel in range(3)
    ]
    for y in range(height):
        t = y / max(height - 1, 1)
        r, g, b = (round(interpolate_stops(stops, t)) for stops in channel_stops)
        draw.line([(0, y), (width, y)], fill=(r, g, b, 255))
    return image


def draw_shadowed_text(
    canvas: Image.Image,
    items: list[tuple[tuple[int, int], str, Font]],
    blur: float,
    offset: tuple[int, int],
    opacity: float,
    embedded_color: bool = False,
) -> Image.Image:
    """Draw white centred text items over a single blurred drop-shadow layer.

    The shadow is cut from the alpha of the drawn text, so colour glyphs
    (emoji) cast the same soft shadow as plain text.

    Args:
        canvas: RGBA canvas
        items: ((x, baseline_y), text, font) per item
        blur: Shadow blur in canvas-style units (about twice the Gaussian sigma)
        offset: Shadow offset (dx, dy)
        opacity: Shadow opacity 0-1
        embedded_color: Render the font's colour glyphs

    Returns:
        New canvas with the shadows composited and the text drawn
    """
    text_layer = Image.new("RGBA", canvas.size, (255, 255, 255, 0))
    draw = ImageDraw.Draw(text_layer)
    for (x, y), text, font in items:
        draw.text(
            (x, y), text, font=font, fill=TEXT_COLOR, anchor="ms", embedded_color=embedded_color
        )

    shadow_alpha = Image.new("L", canvas.size, 0)
    shadow_alpha.paste(
        text_layer.getchannel("A").point(lambda a: round(a * opacity)), offset
    )
    shadow = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    shadow.putalpha(shadow_alpha)
    if blur:
        shadow = shadow.filter(ImageFilter.GaussianBlur(radius=blur / 2))

    result = Image.alpha_composite(canvas, shadow)
    return Image.alpha_composite(result, text_layer)


def to_png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.convert("RGB").save(buffer, "PNG")
    return buffer.getvalue()


def to_data_uri(png_bytes: bytes) -> str:
    """Encode PNG bytes as a data URI for inline JSON responses."""
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("utf-8")


class Compositor:
    """Draws ad text over a generated photo, or over a plain gradient when there is none."""

    def __init__(self, layout_engine: TextLayoutEngine | None = None):
        self.layout_engine = layout_engine or TextLayoutEngine()

    def render_primary(self, background: bytes, ad_text: str) -> Image.Image:
        """Background photo + darkening bands + three-band text.

        Raises:
            CompositingFailure: If the background cannot be decoded or drawing fails
        """
        try:
            with Image.open(io.BytesIO(background)) as photo:
                canvas = photo.convert("RGBA").resize(CANVAS_SIZE, Image.LANCZOS)

            for band in OVERLAY_BANDS:
                canvas = Image.alpha_composite(canvas, gradient_layer(band, canvas.size))

            layout = self.layout_engine.layout(ad_text)
            items = [
                ((line.x, line.y), line.text, load_bold_font(line.font_size))
                for line in layout.lines
            ]
            return draw_shadowed_text(canvas, items, SHADOW_BLUR, SHADOW_OFFSET, SHADOW_OPACITY)
        except Exception as e:
            raise CompositingFailure(f"Failed to process image with text overlay: {e}") from e

    def render_fallback(
        self, product: str, ad_text: str, animal_type: AnimalCategory
    ) -> Image.Image:
        """Green gradient, product name, two animal emojis and the raw ad lines.

        Text is drawn unwrapped, so each string is clipped and lines below the
        canvas are skipped.
        """
        canvas = fallback_background()

        title_font = load_bold_font(FALLBACK_TITLE_SIZE)
        text_font = load_bold_font(FALLBACK_TEXT_SIZE)
        items = [((CENTER_X, FALLBACK_TITLE_Y), clip(product.upper()), title_font)]
        lines = [line for line in ad_text.split("\n") if line.strip()]
        for index, line in enumerate(lines):
            y = FALLBACK_TEXT_Y + index * FALLBACK_LINE_HEIGHT
            if y >= canvas.height + FALLBACK_LINE_HEIGHT:
                break
            items.append(((CENTER_X, y), clip(line), text_font))
        canvas = draw_shadowed_text(
            canvas, items, FALLBACK_SHADOW_BLUR, (0, 0), FALLBACK_SHADOW_OPACITY
        )

        emoji_font, embedded_color = load_emoji_font(FALLBACK_EMOJI_SIZE)
        emoji_items = [
            (position, emoji, emoji_font)
            for position, emoji in zip(FALLBACK_EMOJI_POSITIONS, emojis_for(animal_type))
        ]
        return draw_shadowed_text(
            canvas,
            emoji_items,
            FALLBACK_SHADOW_BLUR,
            (0, 0),
            FALLBACK_SHADOW_OPACITY,
            embedded_color=embedded_color,
        )

    def compose(
        self,
        background: bytes | None,
        ad_text: str,
        product: str,
        animal_type: AnimalCategory,
    ) -> ComposedImage:
        """Compose the ad image, degrading to the gradient path when needed."""
        if background is not None:
            try:
                image = self.render_primary(background, ad_text)
                return ComposedImage(
                    png_bytes=to_png_bytes(image),
                    source=ImageSource.REMOTE_COMPOSITED,
                    animal_type=animal_type,
                )
            except CompositingFailure as e:
                logger.error(f"Compositing failed, using fallback gradient: {e}")

        image = self.render_fallback(product, ad_text, animal_type)
        return ComposedImage(
            png_bytes=to_png_bytes(image),
            source=ImageSource.FALLBACK_GRADIENT,
            animal_type=animal_type,
        )
