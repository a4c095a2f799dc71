"""Pytest configuration and fixtures."""

import io
import os
import random
import sys
from pathlib import Path

import httpx
import pytest
from PIL import Image

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Set test environment
os.environ["ENVIRONMENT"] = "test"

from agro_ads.config import Settings  # noqa: E402
from agro_ads.services.ad_service import AdService  # noqa: E402

TEXT_HOST = "text.pollinations.ai"
IMAGE_HOST = "image.pollinations.ai"


class FixedWidthFont:
    """Stand-in font: every character is 0.6 em wide."""

    def __init__(self, size: int):
        self.size = size

    def getlength(self, text: str) -> float:
        return len(text) * self.size * 0.6


@pytest.fixture
def fixed_width_font_loader():
    """Font loader with predictable metrics for layout tests."""
    return FixedWidthFont


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at the default provider URLs."""
    return Settings()


@pytest.fixture
def background_png() -> bytes:
    """A small PNG standing in for a generated background photo."""
    buffer = io.BytesIO()
    Image.new("RGB", (64, 64), (120, 180, 90)).save(buffer, "PNG")
    return buffer.getvalue()


@pytest.fixture
def unreachable_transport() -> httpx.MockTransport:
    """Transport where every provider call fails to connect."""
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("Connection refused", request=request)

    transport = httpx.MockTransport(handler)
    transport.calls = calls
    return transport


@pytest.fixture
def provider_transport(background_png):
    """Factory for a transport that serves text and image hosts separately.

    Args of the factory:
        text_responses: list of httpx.Response handed out in order to text calls
        image_response: response for image calls (default: the background PNG)
    """

    def _create(text_responses=None, image_response=None):
        text_queue = list(text_responses or [])
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if request.url.host == IMAGE_HOST:
                if image_response is not None:
                    return image_response
                return httpx.Response(200, content=background_png)
            if text_queue:
                return text_queue.pop(0)
            return httpx.Response(503, text="Service Unavailable")

        transport = httpx.MockTransport(handler)
        transport.calls = calls
        return transport

    return _create


@pytest.fixture
def offline_service(settings, unreachable_transport) -> AdService:
    """AdService whose providers are unreachable."""
    return AdService(settings=settings, transport=unreachable_transport, rng=random.Random(7))
