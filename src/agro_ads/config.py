"""Configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Process-wide configuration loaded from environment."""

    PROJECT_NAME: str = "Animal Feed Ad Generator API"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: list[str] = ["*"]

    # Text provider
    TEXT_API_URL: str = "https://text.pollinations.ai"
    TEXT_MODEL: str = "openai"
    TEXT_TIMEOUT: float = 30.0

    # Image provider
    IMAGE_API_URL: str = "https://image.pollinations.ai/prompt"
    IMAGE_MODEL: str = "flux"
    IMAGE_TIMEOUT: float = 60.0
    IMAGE_REQUEST_BUDGET: float = 90.0

    USER_AGENT: str = "Mozilla/5.0"

    # Rendering
    FONT_PATH: str = ""  # Bold TTF; system fonts are tried when empty
    EMOJI_FONT_PATH: str = ""

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT == "production"

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins, stricter in production."""
        if self.is_production and "*" in self.CORS_ORIGINS:
            return [origin for origin in self.CORS_ORIGINS if origin != "*"]
        return self.CORS_ORIGINS

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
