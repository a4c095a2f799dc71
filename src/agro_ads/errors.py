"""Error taxonomy for the ad generation pipeline."""


class AdGenerationError(Exception):
    """Base class for pipeline errors."""


class InputValidationError(AdGenerationError):
    """A required field is missing or blank. Surfaced to the caller as 400."""


class UpstreamUnavailable(AdGenerationError):
    """A remote provider failed, timed out or returned something unusable.

    Never surfaced to the caller: it triggers a local fallback.
    """


class FetchError(UpstreamUnavailable):
    """The background image could not be fetched."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CompositingFailure(AdGenerationError):
    """Drawing over a fetched background failed."""
