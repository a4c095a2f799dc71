"""Cleanup and validation of raw text returned by the text provider."""

import re

from ..models.ad import AdFormat

# (min exclusive, max inclusive) character counts per format
LENGTH_BOUNDS: dict[AdFormat, tuple[int, int]] = {
    AdFormat.SHORT: (10, 400),
    AdFormat.LONG: (30, 1000),
}

SHORT_MAX_LINES = 2
CONTENT_LINE_MIN_CHARS = 10

_WRAPPING_QUOTES = re.compile(r"^[\"']|[\"']$")
_BOILERPLATE_PREFIXES = (
    re.compile(r"^Advertisement:\s*", re.IGNORECASE),
    re.compile(r"^Ad:\s*", re.IGNORECASE),
    re.compile(r"^Here's.*?:\s*", re.IGNORECASE),
    re.compile(r"^Generated.*?:\s*", re.IGNORECASE),
)
_LEADING_JSON_OBJECT = re.compile(r"^\s*\{[^}]*\}\s*")


def is_content_line(line: str) -> bool:
    """Heuristic: a line with real words, not a hashtag run or emoji-only decoration."""
    stripped = line.strip()
    if stripped.startswith("#"):
        return False
    if not any(ch.isalnum() for ch in stripped):
        return False
    return len(stripped) > CONTENT_LINE_MIN_CHARS


def keep_short_lines(text: str) -> str:
    """Keep the first two lines of copy, preferring content lines."""
    lines = [line for line in text.split("\n") if line.strip()]
    content = [line for line in lines if is_content_line(line)]
    chosen = content if len(content) >= SHORT_MAX_LINES else lines
    return "\n".join(chosen[:SHORT_MAX_LINES])


def clean(raw: str, ad_format: AdFormat) -> str:
    """Normalize a raw provider response into ad copy.

    Strips wrapping quotes, known boilerplate prefixes and a leading inline JSON
    object, truncates short copy to two lines, and trims whitespace.
    """
    text = _WRAPPING_QUOTES.sub("", raw.strip())
    for prefix in _BOILERPLATE_PREFIXES:
        text = prefix.sub("", text)
    text = _LEADING_JSON_OBJECT.sub("", text)

    if ad_format == AdFormat.SHORT:
        text = keep_short_lines(text)

    return text.strip()


def is_valid_length(text: str, ad_format: AdFormat) -> bool:
    """Check the cleaned copy against the length bounds of its format."""
    min_length, max_length = LENGTH_BOUNDS[ad_format]
    return min_length < len(text) <= max_length
