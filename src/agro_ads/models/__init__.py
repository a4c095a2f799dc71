"""Data models."""

from .ad import (
    AdFormat,
    AdRequest,
    AdText,
    AnimalCategory,
    ComposedImage,
    ImageCompositionRequest,
    ImageSource,
    TextSource,
)
from .layout import Band, LayoutLine, TextLayout

__all__ = [
    "AdFormat",
    "AdRequest",
    "AdText",
    "AnimalCategory",
    "ComposedImage",
    "ImageCompositionRequest",
    "ImageSource",
    "TextSource",
    "Band",
    "LayoutLine",
    "TextLayout",
]
