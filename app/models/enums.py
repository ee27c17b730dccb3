"""
Enums for type-safe values across the application.
"""
from enum import Enum


class MessageRole(str, Enum):
    """Role of a message in the client-side chat log."""
    USER = "user"
    ASSISTANT = "assistant"


class LLMRole(str, Enum):
    """Role for LLM provider messages (OpenAI/Gemini compatible)."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class LLMProviderType(str, Enum):
    """Supported LLM provider types for configuration."""
    GEMINI = "gemini"


class TranscriptProviderType(str, Enum):
    """Supported transcript sources for configuration."""
    RAPIDAPI = "rapidapi"
    YOUTUBE_TRANSCRIPT_API = "youtube_transcript_api"


class ExtractionStatus(str, Enum):
    """Lifecycle of a transcript extraction in a client session."""
    IDLE = "idle"
    EXTRACTING = "extracting"
    EXTRACTED = "extracted"
    ERROR = "error"


class NotificationVariant(str, Enum):
    """Visual weight of a transient notification."""
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
