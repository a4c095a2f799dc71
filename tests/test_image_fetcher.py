"""Tests for the background image fetcher."""

import asyncio

import httpx
import pytest

from agro_ads.errors import FetchError, UpstreamUnavailable
from agro_ads.models.ad import AnimalCategory
from agro_ads.services.image_fetcher import ImageFetcher, build_image_prompt


def fetch(settings, handler, timeout=None):
    fetcher = ImageFetcher(settings, transport=httpx.MockTransport(handler))
    return asyncio.run(fetcher.fetch_background("healthy chickens on a farm", timeout))


class TestBuildImagePrompt:
    """build_image_prompt tests."""

    def test_includes_product_animal_and_style(self):
        prompt = build_image_prompt("Premium Layer Mash", AnimalCategory.CHICKENS)
        assert "Premium Layer Mash animal feed" in prompt
        assert "farm setting with healthy chickens" in prompt
        assert "bright natural lighting" in prompt
        assert prompt.endswith("4K, realistic")


class TestFetchBackground:
    """fetch_background tests."""

    def test_returns_image_bytes(self, settings, background_png):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, content=background_png)

        assert fetch(settings, handler) == background_png

        request = requests[0]
        assert request.url.host == "image.pollinations.ai"
        assert request.url.path == "/prompt/healthy chickens on a farm"
        assert request.url.params["width"] == "1080"
        assert request.url.params["height"] == "1080"
        assert request.url.params["nologo"] == "true"
        assert request.url.params["model"] == "flux"

    def test_http_error_raises_fetch_error(self, settings):
        with pytest.raises(FetchError) as exc_info:
            fetch(settings, lambda request: httpx.Response(502))
        assert exc_info.value.status_code == 502

    def test_network_error_raises_fetch_error(self, settings):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(FetchError):
            fetch(settings, handler)

    def test_timeout_raises_fetch_error(self, settings):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(FetchError, match="timed out after 5"):
            fetch(settings, handler, timeout=5)

    def test_empty_body_raises_fetch_error(self, settings):
        with pytest.raises(FetchError):
            fetch(settings, lambda request: httpx.Response(200, content=b""))

    def test_fetch_error_is_upstream_unavailable(self):
        assert issubclass(FetchError, UpstreamUnavailable)

    def test_overall_timeout_raises_fetch_error(self, settings, background_png):
        async def handler(request):
            await asyncio.sleep(1)
            return httpx.Response(200, content=background_png)

        with pytest.raises(FetchError, match="timed out after 0.05"):
            fetch(settings, handler, timeout=0.05)

    def test_overlong_prompt_raises_fetch_error(self, settings, background_png):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, content=background_png)

        fetcher = ImageFetcher(settings, transport=httpx.MockTransport(handler))
        with pytest.raises(FetchError, match="Image request failed"):
            asyncio.run(fetcher.fetch_background("Pig Mash " * 8000))
        assert requests == []
