"""
Pydantic models for API request/response schemas.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.youtube import Transcript, TranscriptSegment


class TranscriptRequest(BaseModel):
    """Request model for transcript extraction."""

    # Presence and shape are checked by the service so that a missing URL
    # gets the same 400 as an invalid one.
    url: Optional[str] = None


class TranscriptResponse(BaseModel):
    """Response model for a fetched transcript."""

    transcript: List[TranscriptSegment]
    video_title: Optional[str] = None
    video_id: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_transcript(cls, transcript: Transcript) -> "TranscriptResponse":
        return cls(
            transcript=transcript.segments,
            video_title=transcript.video_title,
            video_id=transcript.video_id,
        )

    def to_transcript(self) -> Transcript:
        return Transcript(
            segments=self.transcript,
            video_title=self.video_title,
            video_id=self.video_id,
        )


class ChatRequest(BaseModel):
    """Request model for chat messages."""

    message: str = ""
    transcript: List[TranscriptSegment] = Field(default_factory=list)
    video_title: Optional[str] = Field(default=None, alias="videoTitle")

    model_config = ConfigDict(populate_by_name=True)


class ChatResponse(BaseModel):
    """Response model for chat messages."""

    response: str

    model_config = ConfigDict(frozen=True)
