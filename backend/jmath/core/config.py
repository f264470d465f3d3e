from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # Application Settings
    APP_NAME: str = "J-Math"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # API Configuration
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    # LLM Configuration - OpenRouter chat completions
    OPENROUTER_API_KEY: str = ""
    OPENROUTER_MODEL: str = "google/gemini-pro"
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENROUTER_TIMEOUT: float = 120.0

    # Sent upstream as HTTP-Referer
    SITE_URL: str = "http://localhost:3000"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def is_configured(self) -> bool:
        return bool(self.OPENROUTER_API_KEY)

    @property
    def completions_url(self) -> str:
        return f"{self.OPENROUTER_BASE_URL.rstrip('/')}/chat/completions"


@lru_cache()
def get_settings() -> Settings:
    """Settings instance shared by the app; override in tests via dependency_overrides"""
    return Settings()
