"""
Application configuration using pydantic-settings.
"""
from typing import List, Union

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.enums import LLMProviderType, TranscriptProviderType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = "YouTube Transcript Chat"
    API_PREFIX: str = "/api"
    BACKEND_CORS_ORIGINS: Union[List[str], str] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    # Transcript API (RapidAPI "youtube-2-transcript")
    TRANSCRIPT_PROVIDER: TranscriptProviderType = TranscriptProviderType.RAPIDAPI
    RAPIDAPI_HOST: str = "youtube-2-transcript.p.rapidapi.com"
    RAPIDAPI_KEY: SecretStr = SecretStr("")

    # Gemini API
    CHAT_LLM_PROVIDER: LLMProviderType = LLMProviderType.GEMINI
    GEMINI_MODEL_NAME: str = "gemini-1.5-flash"
    GEMINI_API_KEY: SecretStr = SecretStr("")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def missing_secrets(self) -> list[str]:
        """Names of upstream credentials that are not configured."""
        missing = []
        if (
            self.TRANSCRIPT_PROVIDER == TranscriptProviderType.RAPIDAPI
            and not self.RAPIDAPI_KEY.get_secret_value()
        ):
            missing.append("RAPIDAPI_KEY")
        if not self.GEMINI_API_KEY.get_secret_value():
            missing.append("GEMINI_API_KEY")
        return missing


settings = Settings()
