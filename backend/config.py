"""Application configuration loaded from environment variables."""
import os
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    # Helius API
    helius_api_key: str = ""
    helius_base_url: str = "https://api.helius.xyz"
    helius_timeout_seconds: float = 30.0

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Strip whitespace and newlines from API keys
        if self.helius_api_key:
            self.helius_api_key = self.helius_api_key.strip().replace('\n', '').replace('\r', '')
        self.helius_base_url = self.helius_base_url.rstrip("/")

    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", "8000"))

    # CORS
    cors_origins: list = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Frontend URL (for CORS in production)
    frontend_url: Optional[str] = os.getenv("FRONTEND_URL")

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()

# Add frontend URL to CORS if set
if settings.frontend_url:
    settings.cors_origins.append(settings.frontend_url)

# Log configuration (never the key itself)
from loguru import logger
if settings.helius_api_key:
    logger.info("HELIUS_API_KEY loaded from environment")
else:
    logger.warning("HELIUS_API_KEY is NOT set, requests must supply api_key")
