"""
Provider abstraction layer for the upstream transcript and LLM services.
"""
from app.core.providers.llm_provider import (
    LLMProvider,
    LLMProviderError,
    LLMMessage,
    LLMResponse,
)
from app.core.providers.transcript_provider import (
    TranscriptProvider,
)

__all__ = [
    # LLM
    "LLMProvider",
    "LLMProviderError",
    "LLMMessage",
    "LLMResponse",
    # Transcripts
    "TranscriptProvider",
]
