"""Centralized application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    # Empty DATABASE_URL runs the API without a store; store endpoints answer 501.
    DATABASE_URL: str = "sqlite:///./peernotes.db"
    DATABASE_SSL: bool = False
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # AI moderation (OpenAI compatible endpoint, Gemini by default)
    AI_API_KEY: str = ""
    AI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    AI_MODERATION_MODEL: str = "gemini-2.5-flash"
    AI_TEMPERATURE: float = 0.2
    MODERATION_ENABLED: bool = True

    # Client side limits
    MAX_CONTENT_CHARS: int = 5000

    def database_configured(self) -> bool:
        return bool(str(self.DATABASE_URL or "").strip())

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
