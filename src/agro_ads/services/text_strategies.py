"""Ordered chain of request shapes for the remote text provider.

The provider's HTTP contract is informal, so each strategy encodes the same
instruction differently (URL-embedded prompt, message list, bare prompt). The
chain tries them in order, once each, and stops at the first response that
survives cleanup and validation.
"""

import json
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import quote

import httpx

from ..config import Settings
from ..models.ad import AdFormat
from .text_cleanup import LENGTH_BOUNDS, clean, is_valid_length

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a creative marketing expert for agricultural and livestock businesses. "
    "Create compelling, concise advertisements. Return only the ad text, no explanations."
)


def build_prompt(product: str, ad_format: AdFormat) -> str:
    """Instruction sent to the text provider."""
    if ad_format == AdFormat.SHORT:
        return (
            f'Write a 2-line catchy advertisement with emojis for animal feed product: "{product}". '
            "Maximum 25 words. No hashtags. Just the ad text."
        )
    return (
        f'Create a compelling social media advertisement for animal feed product: "{product}". '
        "Include emojis and farming hashtags. Keep it under 100 words. "
        "Make it engaging for farmers."
    )


def _seed() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class StrategyResult:
    """Outcome of one strategy attempt."""

    strategy: str
    ok: bool
    text: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, strategy: str, text: str) -> "StrategyResult":
        return cls(strategy=strategy, ok=True, text=text)

    @classmethod
    def failure(cls, strategy: str, error: str) -> "StrategyResult":
        return cls(strategy=strategy, ok=False, error=error)


RequestBuilder = Callable[[httpx.AsyncClient, Settings, str], httpx.Request]
ResponseParser = Callable[[httpx.Response], str]


@dataclass(frozen=True)
class TextStrategy:
    """One request shape: how to build the request and how to read the reply."""

    name: str
    build_request: RequestBuilder
    parse_response: ResponseParser
    reject_error_text: bool = False


# =============================================================================
# Request builders
# =============================================================================


def build_prompt_get(client: httpx.AsyncClient, settings: Settings, prompt: str) -> httpx.Request:
    url = f"{settings.TEXT_API_URL.rstrip('/')}/prompt/{quote(prompt, safe='')}"
    return client.build_request(
        "GET",
        url,
        params={"model": settings.TEXT_MODEL, "seed": _seed()},
        headers={"Accept": "text/plain", "User-Agent": settings.USER_AGENT},
    )


def build_messages_post(
    client: httpx.AsyncClient, settings: Settings, prompt: str
) -> httpx.Request:
    return client.build_request(
        "POST",
        f"{settings.TEXT_API_URL.rstrip('/')}/",
        json={
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "model": settings.TEXT_MODEL,
            "seed": _seed(),
        },
    )


def build_prompt_post(client: httpx.AsyncClient, settings: Settings, prompt: str) -> httpx.Request:
    return client.build_request(
        "POST",
        f"{settings.TEXT_API_URL.rstrip('/')}/",
        json={"prompt": prompt, "model": settings.TEXT_MODEL},
    )


# =============================================================================
# Response parsers
# =============================================================================


def parse_plain_text(response: httpx.Response) -> str:
    return response.text


def parse_chat_completion(response: httpx.Response) -> str:
    """Accept raw text or an OpenAI-style chat completion body."""
    text = response.text
    if not text.lstrip().startswith("{"):
        return text
    try:
        data = json.loads(text)
        return data["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError):
        return text


DEFAULT_STRATEGIES: tuple[TextStrategy, ...] = (
    TextStrategy("prompt-get", build_prompt_get, parse_plain_text, reject_error_text=True),
    TextStrategy("messages-post", build_messages_post, parse_chat_completion),
    TextStrategy("prompt-post", build_prompt_post, parse_plain_text),
)


class TextStrategyChain:
    """Runs text strategies sequentially until one yields valid copy."""

    def __init__(
        self,
        settings: Settings,
        strategies: tuple[TextStrategy, ...] = DEFAULT_STRATEGIES,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            settings: Provider URLs, model and timeout
            strategies: Strategies in priority order
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.settings = settings
        self.strategies = strategies
        self.transport = transport

    async def attempt(
        self,
        client: httpx.AsyncClient,
        strategy: TextStrategy,
        prompt: str,
        ad_format: AdFormat,
    ) -> StrategyResult:
        """Run one strategy. Never raises for provider failures."""
        logger.info(f"Trying text strategy {strategy.name}")
        try:
            request = strategy.build_request(client, self.settings, prompt)
            response = await client.send(request)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
            # InvalidURL is raised for over-long URLs and is not an HTTPError
            return StrategyResult.failure(strategy.name, f"{type(e).__name__}: {e}")

        if response.is_error:
            return StrategyResult.failure(strategy.name, f"HTTP {response.status_code}")

        try:
            raw = strategy.parse_response(response)
        except Exception as e:
            return StrategyResult.failure(strategy.name, f"Unreadable response: {e}")

        text = clean(raw, ad_format)
        if not is_valid_length(text, ad_format):
            min_length, max_length = LENGTH_BOUNDS[ad_format]
            return StrategyResult.failure(
                strategy.name,
                f"Text length {len(text)} outside valid range ({min_length}, {max_length}]",
            )
        if strategy.reject_error_text and ("error" in text or "Error" in text):
            return StrategyResult.failure(strategy.name, "Response looks like an error page")

        return StrategyResult.success(strategy.name, text)

    async def run(self, product: str, ad_format: AdFormat) -> StrategyResult | None:
        """Return the first successful result, or None when every strategy failed."""
        prompt = build_prompt(product, ad_format)
        async with httpx.AsyncClient(
            timeout=self.settings.TEXT_TIMEOUT, transport=self.transport
        ) as client:
            for strategy in self.strategies:
                result = await self.attempt(client, strategy, prompt, ad_format)
                if result.ok:
                    logger.info(f"Text generated with strategy {strategy.name}")
                    return result
                logger.warning(f"Text strategy {strategy.name} failed: {result.error}")

        logger.warning("All text strategies failed")
        return None
