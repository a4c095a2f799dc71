"""API schemas for request/response models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Ad Text Schemas
# =============================================================================


class GenerateAdRequest(BaseModel):
    """Request to generate ad copy.

    Fields are optional so a missing product is reported as 400 by the route.
    """

    product: str | None = None
    format: str | None = None  # "short"; anything else is treated as long


class GenerateAdResponse(BaseModel):
    """Generated ad copy."""

    caption: str
    model: Literal["pollinations-ai", "template"]


# =============================================================================
# Ad Image Schemas
# =============================================================================


class GenerateImageRequest(BaseModel):
    """Request to generate an ad image."""

    model_config = ConfigDict(populate_by_name=True)

    product: str | None = None
    ad_text: str | None = Field(default=None, alias="adText")


class GenerateImageResponse(BaseModel):
    """Composed ad image as a PNG data URI."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    image_url: str = Field(..., alias="imageUrl")
    model: Literal["pollinations-ai", "fallback-gradient"]
    animal_type: str = Field(..., alias="animalType")


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses."""

    error: str
