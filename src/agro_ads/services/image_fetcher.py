"""Fetches AI-generated background photos from the image provider."""

import asyncio
import logging
import time
from urllib.parse import quote

import httpx

from ..config import Settings
from ..errors import FetchError
from ..models.ad import AnimalCategory

logger = logging.getLogger(__name__)

CANVAS_SIZE = 1080
STYLE_SUFFIX = (
    "bright natural lighting, commercial photography, vibrant colors, high quality, 4K, realistic"
)


def build_image_prompt(product: str, animal_type: AnimalCategory) -> str:
    """Prompt for a background photo of the product's animals on a farm."""
    return (
        f"Professional advertisement photo for {product} animal feed, "
        f"farm setting with healthy {animal_type.value}, {STYLE_SUFFIX}"
    )


class ImageFetcher:
    """Client for the URL-parameterized image generation endpoint."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self.transport = transport

    def build_url(self, prompt: str) -> str:
        return f"{self.settings.IMAGE_API_URL.rstrip('/')}/{quote(prompt, safe='')}"

    def build_params(self, seed: int | None = None) -> dict[str, str | int]:
        return {
            "width": CANVAS_SIZE,
            "height": CANVAS_SIZE,
            "seed": seed if seed is not None else int(time.time() * 1000),
            "nologo": "true",
            "model": self.settings.IMAGE_MODEL,
            "enhance": "true",
        }

    async def fetch_background(self, prompt: str, timeout: float | None = None) -> bytes:
        """Download a generated background image.

        Args:
            prompt: Image description
            timeout: Seconds before the request is aborted (default: IMAGE_TIMEOUT)

        Returns:
            Raw image bytes as served by the provider

        Raises:
            FetchError: On network error, timeout, non-2xx status or empty body
        """
        timeout = timeout if timeout is not None else self.settings.IMAGE_TIMEOUT

        try:
            url = self.build_url(prompt)
            logger.info(f"Fetching background image: {url[:200]}")
            async with httpx.AsyncClient(
                timeout=timeout, transport=self.transport, follow_redirects=True
            ) as client:
                # httpx timeouts are per phase; the whole request is capped here
                response = await asyncio.wait_for(
                    client.get(
                        url,
                        params=self.build_params(),
                        headers={"User-Agent": self.settings.USER_AGENT},
                    ),
                    timeout=timeout,
                )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise FetchError(f"Image request timed out after {timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
            raise FetchError(f"Image request failed: {e}") from e

        if response.is_error:
            raise FetchError(
                f"Image request failed: {response.status_code}", status_code=response.status_code
            )
        if not response.content:
            raise FetchError("Image provider returned an empty body", response.status_code)

        return response.content
