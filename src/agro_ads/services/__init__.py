"""Services for ad text and image generation."""

from .ad_service import AdService
from .animal_classifier import classify
from .compositor import Compositor, to_data_uri
from .image_fetcher import ImageFetcher, build_image_prompt
from .templates import pick_template
from .text_cleanup import clean, is_valid_length
from .text_layout import TextLayoutEngine
from .text_strategies import StrategyResult, TextStrategy, TextStrategyChain

__all__ = [
    "AdService",
    "classify",
    "Compositor",
    "to_data_uri",
    "ImageFetcher",
    "build_image_prompt",
    "pick_template",
    "clean",
    "is_valid_length",
    "TextLayoutEngine",
    "StrategyResult",
    "TextStrategy",
    "TextStrategyChain",
]
