"""
Dependency injection factories for FastAPI.

This module provides factory functions for creating service instances
with proper dependency injection. Providers are selected based on config.
"""
from functools import lru_cache
from fastapi import Depends

from app.core.config import settings

# Provider interfaces
from app.core.providers.llm_provider import LLMProvider
from app.core.providers.transcript_provider import TranscriptProvider

# Provider type enums
from app.models.enums import LLMProviderType, TranscriptProviderType

# Concrete providers
from app.core.providers.gemini_provider import GeminiProvider
from app.core.providers.rapidapi_provider import RapidAPITranscriptProvider
from app.core.providers.youtube_transcript_provider import YouTubeTranscriptProvider

# Services
from app.services.chat import ChatService
from app.services.transcript import TranscriptService


# =============================================================================
# PROVIDER FACTORIES
# =============================================================================

@lru_cache
def get_transcript_provider() -> TranscriptProvider:
    """
    Get the transcript source.

    Default: RapidAPI (configured in settings.TRANSCRIPT_PROVIDER)
    """
    provider_type = settings.TRANSCRIPT_PROVIDER

    if provider_type == TranscriptProviderType.RAPIDAPI:
        return RapidAPITranscriptProvider(
            api_key=settings.RAPIDAPI_KEY.get_secret_value(),
            host=settings.RAPIDAPI_HOST,
        )
    elif provider_type == TranscriptProviderType.YOUTUBE_TRANSCRIPT_API:
        return YouTubeTranscriptProvider()
    else:
        raise ValueError(f"Unknown transcript provider: {provider_type}")


@lru_cache
def get_chat_llm_provider() -> LLMProvider:
    """
    Get LLM provider for chat operations.

    Default: Gemini (configured in settings.CHAT_LLM_PROVIDER)
    """
    provider_type = settings.CHAT_LLM_PROVIDER

    if provider_type == LLMProviderType.GEMINI:
        return GeminiProvider(
            api_key=settings.GEMINI_API_KEY.get_secret_value(),
            model_name=settings.GEMINI_MODEL_NAME,
        )
    else:
        raise ValueError(f"Unknown LLM provider: {provider_type}")


async def close_providers() -> None:
    """Close providers that were created during the app's lifetime."""
    if get_transcript_provider.cache_info().currsize:
        await get_transcript_provider().close()
        get_transcript_provider.cache_clear()


# =============================================================================
# SERVICE FACTORIES
# =============================================================================

def get_transcript_service(
    provider: TranscriptProvider = Depends(get_transcript_provider),
) -> TranscriptService:
    """Get transcript service for URL validation and transcript fetching."""
    return TranscriptService(provider=provider)


def get_chat_service(
    llm_provider: LLMProvider = Depends(get_chat_llm_provider),
) -> ChatService:
    """Get chat service for transcript-grounded answers."""
    return ChatService(llm_provider=llm_provider)
