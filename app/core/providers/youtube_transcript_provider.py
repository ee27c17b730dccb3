"""
Direct YouTube implementation of TranscriptProvider.

Uses youtube-transcript-api instead of a paid intermediary. Selected with
``TRANSCRIPT_PROVIDER=youtube_transcript_api``.
"""
import asyncio
from typing import Optional

from youtube_transcript_api import (
    YouTubeTranscriptApi,
    CouldNotRetrieveTranscript,
    NoTranscriptFound,
    RequestBlocked,
    TranscriptsDisabled,
    VideoUnavailable,
)
from loguru import logger

from app.core.exceptions import (
    InternalServerError,
    InvalidInputError,
    NotFoundError,
    RateLimitError,
)
from app.core.providers.transcript_provider import TranscriptProvider
from app.models.youtube import Transcript, TranscriptSegment


class YouTubeTranscriptProvider(TranscriptProvider):
    """
    Fetches captions straight from YouTube.

    Prioritizes manual subtitles (any language) over automatic captions
    (any language). The video title is not available from this source.
    """

    def __init__(self, api: Optional[YouTubeTranscriptApi] = None):
        self._api = api or YouTubeTranscriptApi()

    def _fetch_sync(self, video_id: str) -> list[TranscriptSegment]:
        transcript_list = self._api.list(video_id)

        chosen = None
        for t in transcript_list:
            if not t.is_generated:
                chosen = t
                break
        if chosen is None:
            for t in transcript_list:
                chosen = t
                break
        if chosen is None:
            raise NoTranscriptFound(video_id, [], transcript_list)

        logger.info(
            f"Video {video_id}: using {'automatic' if chosen.is_generated else 'manual'} "
            f"transcript in '{chosen.language}'"
        )
        return [
            TranscriptSegment(text=item.text, start=item.start, duration=item.duration)
            for item in chosen.fetch()
        ]

    async def get_transcript(self, url: str, video_id: Optional[str] = None) -> Transcript:
        if not video_id:
            raise InvalidInputError("Invalid YouTube URL")

        try:
            segments = await asyncio.to_thread(self._fetch_sync, video_id)
        except (TranscriptsDisabled, NoTranscriptFound, VideoUnavailable) as e:
            logger.warning(f"No transcript for video {video_id}: {type(e).__name__}")
            raise NotFoundError() from e
        except RequestBlocked as e:
            logger.warning(f"YouTube blocked the transcript request for {video_id}")
            raise RateLimitError() from e
        except CouldNotRetrieveTranscript as e:
            logger.error(f"Could not retrieve transcript for {video_id}: {e}")
            raise InternalServerError() from e

        return Transcript(segments=segments, video_id=video_id)
