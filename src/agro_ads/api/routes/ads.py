"""Ad text and image generation routes."""

import logging

from fastapi import APIRouter, HTTPException, status

from ...errors import InputValidationError
from ...services.compositor import to_data_uri
from ..dependencies import AdServiceDep
from ..schemas import (
    ErrorResponse,
    GenerateAdRequest,
    GenerateAdResponse,
    GenerateImageRequest,
    GenerateImageResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/generate-ad", response_model=GenerateAdResponse, responses=ERROR_RESPONSES)
async def generate_ad(request: GenerateAdRequest, service: AdServiceDep):
    """
    Generate ad copy for a product.

    Provider failures fall back to a template; only a missing product is an error.
    """
    try:
        ad_text = await service.generate_ad_text(request.product, request.format)
        return GenerateAdResponse(caption=ad_text.body, model=ad_text.source.value)

    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Error generating ad: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong. Please try again.",
        )


@router.post(
    "/generate-image",
    response_model=GenerateImageResponse,
    response_model_by_alias=True,
    responses=ERROR_RESPONSES,
)
async def generate_image(request: GenerateImageRequest, service: AdServiceDep):
    """
    Generate a 1080x1080 ad image with the ad text drawn over it.

    Returned inline as a PNG data URI. When the image provider fails the image
    is drawn over a green gradient instead.
    """
    try:
        image = await service.generate_ad_image(request.product, request.ad_text)
        return GenerateImageResponse(
            image_url=to_data_uri(image.png_bytes),
            model=image.source.value,
            animal_type=image.animal_type.value,
        )

    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Error generating image: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate image. Please try again.",
        )
