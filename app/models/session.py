"""
Client-side session state.

All of it lives in memory for one user session and is mutated only by
``SessionController``.
"""
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import ExtractionStatus, MessageRole, NotificationVariant
from app.models.youtube import Transcript


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ChatMessage(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    role: MessageRole
    content: str
    timestamp: datetime = Field(default_factory=utc_now)

    model_config = ConfigDict(frozen=True)


class Notification(BaseModel):
    """A transient, toast-style message for the user."""

    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT

    model_config = ConfigDict(frozen=True)


class SessionState(BaseModel):
    url: str = ""
    transcript: Optional[Transcript] = None
    extraction_status: ExtractionStatus = ExtractionStatus.IDLE
    error: str = ""

    chat_open: bool = False
    chat_loading: bool = False
    messages: List[ChatMessage] = Field(default_factory=list)

    notifications: List[Notification] = Field(default_factory=list)

    @property
    def loading(self) -> bool:
        return self.extraction_status == ExtractionStatus.EXTRACTING

    @property
    def can_chat(self) -> bool:
        return self.transcript is not None and not self.chat_loading

    @property
    def transcript_text(self) -> str:
        return self.transcript.full_text if self.transcript else ""
