"""Tests for the ad service orchestration."""

import asyncio
import random

import httpx
import pytest

from agro_ads.config import Settings
from agro_ads.errors import InputValidationError
from agro_ads.models.ad import AdFormat, AnimalCategory, ImageSource, TextSource
from agro_ads.services.ad_service import AdService

GOOD_SHORT = "🐔 Premium Layer Mash for bigger eggs!\nOrder today and watch your flock thrive."


class TestGenerateAdText:
    """AdService.generate_ad_text tests."""

    def test_offline_uses_template(self, offline_service):
        ad = asyncio.run(offline_service.generate_ad_text("Premium Layer Mash", "short"))
        assert ad.source == TextSource.TEMPLATE
        assert "Premium Layer Mash" in ad.body

    def test_remote_text(self, settings, provider_transport):
        transport = provider_transport([httpx.Response(200, text=GOOD_SHORT)])
        service = AdService(settings=settings, transport=transport)

        ad = asyncio.run(service.generate_ad_text("Premium Layer Mash", AdFormat.SHORT))
        assert ad.source == TextSource.REMOTE
        assert ad.body == GOOD_SHORT

    def test_unknown_format_is_long(self, settings, unreachable_transport):
        service = AdService(
            settings=settings, transport=unreachable_transport, rng=random.Random(3)
        )

        ad = asyncio.run(service.generate_ad_text("Dairy Meal", None))
        assert "#" in ad.body  # long templates carry hashtags

    @pytest.mark.parametrize("product", [None, "", "   "])
    def test_blank_product_rejected(self, offline_service, product):
        with pytest.raises(InputValidationError, match="Product description is required"):
            asyncio.run(offline_service.generate_ad_text(product, "short"))

    def test_unencodable_product_rejected(self, offline_service):
        with pytest.raises(InputValidationError, match="Product description is invalid"):
            asyncio.run(offline_service.generate_ad_text("Layer \ud800 Mash", "short"))


class TestGenerateAdImage:
    """AdService.generate_ad_image tests."""

    def test_offline_uses_fallback_gradient(self, offline_service):
        image = asyncio.run(offline_service.generate_ad_image("Broiler Starter", "Grow fast!"))
        assert image.source == ImageSource.FALLBACK_GRADIENT
        assert image.animal_type == AnimalCategory.CHICKENS

    def test_remote_background(self, settings, provider_transport):
        transport = provider_transport()
        service = AdService(settings=settings, transport=transport)

        image = asyncio.run(service.generate_ad_image("Dairy Cow Feed", GOOD_SHORT))

        assert image.source == ImageSource.REMOTE_COMPOSITED
        assert image.animal_type == AnimalCategory.CATTLE
        (request,) = transport.calls
        assert "Dairy Cow Feed animal feed" in request.url.path
        assert "farm setting with healthy cattle" in request.url.path

    def test_provider_error_uses_fallback(self, settings, provider_transport):
        transport = provider_transport(image_response=httpx.Response(500))
        service = AdService(settings=settings, transport=transport)

        image = asyncio.run(service.generate_ad_image("Rabbit Pellets", GOOD_SHORT))
        assert image.source == ImageSource.FALLBACK_GRADIENT
        assert image.animal_type == AnimalCategory.RABBITS

    def test_budget_exceeded_uses_fallback(self, background_png):
        service = AdService(settings=Settings(IMAGE_REQUEST_BUDGET=0.05))

        async def slow_fetch(prompt, timeout=None):
            await asyncio.sleep(1)
            return background_png

        service.image_fetcher.fetch_background = slow_fetch

        image = asyncio.run(service.generate_ad_image("Fish Feed", GOOD_SHORT))
        assert image.source == ImageSource.FALLBACK_GRADIENT
        assert image.animal_type == AnimalCategory.FISH

    @pytest.mark.parametrize(
        "product, ad_text, message",
        [
            ("", "x", "Product name is required"),
            (None, "x", "Product name is required"),
            ("Layer Mash", "", "Ad text is required"),
            ("Layer Mash", "  \n ", "Ad text is required"),
        ],
    )
    def test_missing_fields_rejected(self, offline_service, product, ad_text, message):
        with pytest.raises(InputValidationError, match=message):
            asyncio.run(offline_service.generate_ad_image(product, ad_text))

    @pytest.mark.parametrize(
        "product, ad_text, message",
        [
            ("Layer \ud800 Mash", "Buy now", "Product name is invalid"),
            ("Layer Mash", "Buy \ud800 now", "Ad text is invalid"),
        ],
    )
    def test_unencodable_fields_rejected(self, offline_service, product, ad_text, message):
        with pytest.raises(InputValidationError, match=message):
            asyncio.run(offline_service.generate_ad_image(product, ad_text))
