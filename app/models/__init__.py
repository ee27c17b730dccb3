from .youtube import TranscriptSegment, Transcript, format_timestamp, join_segment_text
from .api import TranscriptRequest, TranscriptResponse, ChatRequest, ChatResponse
from .session import ChatMessage, Notification, SessionState
from .enums import (
    MessageRole,
    LLMRole,
    LLMProviderType,
    TranscriptProviderType,
    ExtractionStatus,
    NotificationVariant,
)
