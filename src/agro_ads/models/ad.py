"""Data model for ad requests and generated content."""

from enum import Enum

from pydantic import BaseModel, Field


class AdFormat(str, Enum):
    """Length class of the requested copy."""

    SHORT = "short"
    LONG = "long"

    @classmethod
    def parse(cls, value: "str | AdFormat | None") -> "AdFormat":
        """Anything other than "short" is treated as long."""
        if isinstance(value, AdFormat):
            return value
        return cls.SHORT if value == cls.SHORT.value else cls.LONG


class AnimalCategory(str, Enum):
    """Animal group a product is meant for. Values are used verbatim in prompts."""

    CHICKENS = "chickens"
    CATTLE = "cattle"
    PIGS = "pigs"
    GOATS_AND_SHEEP = "goats and sheep"
    FISH = "fish"
    RABBITS = "rabbits"
    DUCKS = "ducks"
    HORSES = "horses"
    FARM_ANIMALS = "farm animals"


class TextSource(str, Enum):
    REMOTE = "pollinations-ai"
    TEMPLATE = "template"


class ImageSource(str, Enum):
    REMOTE_COMPOSITED = "pollinations-ai"
    FALLBACK_GRADIENT = "fallback-gradient"


class AdRequest(BaseModel):
    """Request for ad copy."""

    product_name: str = Field(..., min_length=1, description="Product name as typed by the seller")
    format: AdFormat = Field(default=AdFormat.LONG)


class AdText(BaseModel):
    """Generated ad copy and where it came from."""

    body: str
    source: TextSource


class ImageCompositionRequest(BaseModel):
    """Request for an ad image."""

    product_name: str = Field(..., min_length=1)
    ad_text: str = Field(..., min_length=1)


class ComposedImage(BaseModel):
    """Rendered PNG plus the path that produced it."""

    png_bytes: bytes = Field(..., repr=False)
    source: ImageSource
    animal_type: AnimalCategory
    width: int = 1080
    height: int = 1080
