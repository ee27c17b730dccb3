from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# --- Core Data Models ---

class TranscriptSegment(BaseModel):
    text: str
    start: float
    duration: float

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def timestamp(self) -> str:
        """Start offset as shown next to the segment, e.g. ``1:05``."""
        return format_timestamp(self.start)


class Transcript(BaseModel):
    segments: List[TranscriptSegment] = Field(default_factory=list)
    video_title: Optional[str] = None
    video_id: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def full_text(self) -> str:
        """Concatenates all transcript segments into a single string."""
        return join_segment_text(self.segments)


def join_segment_text(segments: List[TranscriptSegment]) -> str:
    """Space-join segment texts in their original order."""
    return " ".join(seg.text for seg in segments)


def format_timestamp(seconds: float) -> str:
    """Format seconds to M:SS. Minutes are not rolled over into hours."""
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"
