"""
Transcript service: validates a YouTube URL and fetches its transcript.
"""
from typing import Optional

from loguru import logger

from app.core.exceptions import AppException, InternalServerError, InvalidInputError
from app.core.providers.transcript_provider import TranscriptProvider
from app.models import Transcript
from app.services.url_validator import extract_video_id


class TranscriptService:
    """
    Service for fetching the transcript of a single YouTube video.

    The URL is re-validated here even if the client already checked it;
    nothing is sent upstream for a URL without an extractable video id.
    Nothing is cached or stored.
    """

    def __init__(self, provider: TranscriptProvider):
        """
        Initialize the TranscriptService.

        Args:
            provider: Upstream transcript source.
        """
        self.provider = provider

    async def fetch_transcript(self, url: Optional[str]) -> Transcript:
        """
        Fetch the transcript for ``url``.

        Args:
            url: The raw URL submitted by the user.

        Returns:
            Transcript: Segments in chronological order plus optional
                video title and id.

        Raises:
            InvalidInputError: If the URL is missing or not a YouTube URL.
            AppException: Any upstream failure, already classified by the
                provider.
            InternalServerError: For unexpected provider failures.
        """
        if not url or not url.strip():
            raise InvalidInputError("YouTube URL is required")

        video_id = extract_video_id(url)
        if not video_id:
            logger.warning(f"Rejected URL without a video id: {url!r}")
            raise InvalidInputError("Invalid YouTube URL")

        logger.info(f"Fetching transcript for video {video_id}")
        try:
            transcript = await self.provider.get_transcript(url, video_id=video_id)
        except AppException:
            raise
        except Exception as e:
            logger.opt(exception=e).error(f"Transcript extraction error for {video_id}")
            raise InternalServerError() from e

        logger.info(f"Fetched {len(transcript.segments)} segments for video {video_id}")
        return transcript
