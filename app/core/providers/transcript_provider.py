"""
Abstract base class for transcript providers.

A provider turns a YouTube URL into a Transcript, or raises one of the
AppException subclasses describing why it could not.
"""
from abc import ABC, abstractmethod
from typing import Optional

from app.models.youtube import Transcript


class TranscriptProvider(ABC):
    """
    Abstract interface for transcript sources.

    Implementations must:
    - return a fully populated Transcript or raise, never a partial one
    - raise NotFoundError, NoTranscriptDataError, RateLimitError or
      UpstreamError for upstream-reported failures

    Example:
        provider = RapidAPITranscriptProvider(host="...", api_key="...")
        transcript = await provider.get_transcript(url, video_id="abc123")
    """

    @abstractmethod
    async def get_transcript(self, url: str, video_id: Optional[str] = None) -> Transcript:
        """
        Fetch the transcript of a single video.

        Args:
            url: The raw YouTube URL as submitted by the user.
            video_id: The id already extracted from ``url``.

        Returns:
            The transcript with segments in chronological order.
        """
        ...

    async def close(self) -> None:
        """Release network resources. No-op by default."""
        return None
