"""Orchestrates the two public operations: generate ad text and generate ad image."""

import asyncio
import logging
import random

import httpx
from pydantic import ValidationError

from ..config import Settings, settings as default_settings
from ..errors import FetchError, InputValidationError
from ..models.ad import (
    AdFormat,
    AdRequest,
    AdText,
    ComposedImage,
    ImageCompositionRequest,
    TextSource,
)
from .animal_classifier import classify
from .compositor import Compositor
from .image_fetcher import ImageFetcher, build_image_prompt
from .templates import pick_template
from .text_strategies import DEFAULT_STRATEGIES, TextStrategy, TextStrategyChain

logger = logging.getLogger(__name__)


class AdService:
    """Stateless ad generation service. One instance can serve any number of requests."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        strategies: tuple[TextStrategy, ...] = DEFAULT_STRATEGIES,
        compositor: Compositor | None = None,
        rng: random.Random | None = None,
    ):
        """
        Args:
            settings: Configuration (default: process-wide settings)
            transport: httpx transport shared by text and image clients
            strategies: Text strategies in priority order
            compositor: Image compositor
            rng: Random source for template selection
        """
        self.settings = settings or default_settings
        self.text_chain = TextStrategyChain(self.settings, strategies, transport)
        self.image_fetcher = ImageFetcher(self.settings, transport)
        self.compositor = compositor or Compositor()
        self.rng = rng

    async def generate_ad_text(
        self, product: str | None, ad_format: AdFormat | str | None
    ) -> AdText:
        """Ad copy from the text provider, or a template when every strategy fails.

        Raises:
            InputValidationError: If product is missing or blank
        """
        if not product or not product.strip():
            raise InputValidationError("Product description is required")

        try:
            request = AdRequest(product_name=product, format=AdFormat.parse(ad_format))
        except ValidationError as e:
            raise InputValidationError("Product description is invalid") from e
        logger.info(f"Generating {request.format.value} ad for: {request.product_name}")

        result = await self.text_chain.run(request.product_name, request.format)
        if result is not None and result.text:
            return AdText(body=result.text, source=TextSource.REMOTE)

        logger.info("Using fallback template")
        return pick_template(request.product_name, request.format, self.rng)

    async def fetch_background(self, prompt: str) -> bytes | None:
        """Background bytes, or None when the provider failed or the budget ran out."""
        try:
            return await asyncio.wait_for(
                self.image_fetcher.fetch_background(prompt),
                timeout=self.settings.IMAGE_REQUEST_BUDGET,
            )
        except FetchError as e:
            logger.error(f"Image provider error: {e}")
        except asyncio.TimeoutError:
            logger.error(
                f"Image generation exceeded {self.settings.IMAGE_REQUEST_BUDGET}s budget"
            )
        return None

    async def generate_ad_image(self, product: str | None, ad_text: str | None) -> ComposedImage:
        """Ad image composed over a generated photo, or the fallback gradient.

        Raises:
            InputValidationError: If product or ad text is missing or blank
        """
        if not product or not product.strip():
            raise InputValidationError("Product name is required")
        if not ad_text or not ad_text.strip():
            raise InputValidationError("Ad text is required")

        try:
            request = ImageCompositionRequest(product_name=product, ad_text=ad_text)
        except ValidationError as e:
            field = e.errors()[0]["loc"][0] if e.errors() and e.errors()[0]["loc"] else None
            label = "Ad text" if field == "ad_text" else "Product name"
            raise InputValidationError(f"{label} is invalid") from e
        animal_type = classify(request.product_name)
        logger.info(
            f"Generating ad image for: {request.product_name} (animal type: {animal_type.value})"
        )

        prompt = build_image_prompt(request.product_name, animal_type)
        background = await self.fetch_background(prompt)
        image = self.compositor.compose(
            background, request.ad_text, request.product_name, animal_type
        )

        logger.info(f"Image generated via {image.source.value} for {animal_type.value}")
        return image
