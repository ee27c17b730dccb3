"""
RapidAPI "youtube-2-transcript" implementation of TranscriptProvider.
"""
from typing import Any, Optional

import httpx
from loguru import logger
from pydantic import ValidationError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from app.core.constants import TranscriptAPIConfig
from app.core.exceptions import (
    InternalServerError,
    NoTranscriptDataError,
    NotFoundError,
    RateLimitError,
    UpstreamError,
)
from app.core.providers.transcript_provider import TranscriptProvider
from app.models.youtube import Transcript, TranscriptSegment


def parse_transcript_payload(data: Any, video_id: Optional[str] = None) -> Transcript:
    """
    Normalize an upstream JSON payload into a Transcript.

    The payload must be an object whose ``transcript`` is a list of
    ``{text, start, duration}`` objects. Any deviation rejects the whole
    payload.

    Args:
        data: Decoded JSON body.
        video_id: Fallback id when the payload does not name the video.

    Raises:
        NoTranscriptDataError: If the transcript list is missing or malformed.
    """
    raw_segments = data.get("transcript") if isinstance(data, dict) else None
    if not isinstance(raw_segments, list):
        raise NoTranscriptDataError()

    try:
        segments = [TranscriptSegment.model_validate(item) for item in raw_segments]
    except ValidationError as e:
        logger.warning(f"Malformed transcript segment in upstream payload: {e}")
        raise NoTranscriptDataError() from e

    title = data.get("video_title")
    upstream_id = data.get("video_id")
    return Transcript(
        segments=segments,
        video_title=title if isinstance(title, str) else None,
        video_id=upstream_id if isinstance(upstream_id, str) else video_id,
    )


class RapidAPITranscriptProvider(TranscriptProvider):
    """
    Fetches timed transcripts from the RapidAPI transcript service.

    The raw video URL is forwarded as-is, together with ``flat_text=false``
    so that the API returns timed segments. No timeout is imposed; a call
    lasts as long as the upstream takes.

    Example:
        provider = RapidAPITranscriptProvider(api_key="...")
        transcript = await provider.get_transcript("https://youtu.be/abc123")
    """

    def __init__(
        self,
        api_key: str,
        host: str = "youtube-2-transcript.p.rapidapi.com",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the provider.

        Args:
            api_key: RapidAPI key sent as ``x-rapidapi-key``.
            host: RapidAPI host, also used as the base URL.
            transport: Optional httpx transport (used by tests).
        """
        self.host = host
        self._client = httpx.AsyncClient(
            base_url=f"https://{host}",
            headers={
                "x-rapidapi-host": host,
                "x-rapidapi-key": api_key,
            },
            timeout=None,
            transport=transport,
        )

    @retry(
        stop=stop_after_attempt(TranscriptAPIConfig.RETRY_ATTEMPTS),
        wait=wait_exponential(
            multiplier=1,
            min=TranscriptAPIConfig.RETRY_MIN_WAIT,
            max=TranscriptAPIConfig.RETRY_MAX_WAIT,
        ),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _request(self, url: str) -> httpx.Response:
        return await self._client.get(
            TranscriptAPIConfig.PATH,
            params={"url": url, "flat_text": TranscriptAPIConfig.FLAT_TEXT},
        )

    async def get_transcript(self, url: str, video_id: Optional[str] = None) -> Transcript:
        """
        Fetch and normalize the transcript for ``url``.

        Raises:
            NotFoundError: Upstream answered 404.
            RateLimitError: Upstream answered 429.
            UpstreamError: Any other non-2xx answer, carrying its status.
            NoTranscriptDataError: The body has no usable transcript list.
            InternalServerError: Network failure or undecodable body.
        """
        logger.debug(f"Requesting transcript from {self.host} for video {video_id}")
        try:
            response = await self._request(url)
        except httpx.HTTPError as e:
            logger.error(f"Transcript API request failed for {url}: {e}")
            raise InternalServerError() from e

        if not response.is_success:
            logger.error(
                f"Transcript API error {response.status_code} for {url}: {response.text}"
            )
            if response.status_code == 404:
                raise NotFoundError()
            if response.status_code == 429:
                raise RateLimitError()
            # Redirects and informational codes are not meaningful to our clients
            status = response.status_code if response.status_code >= 400 else 502
            raise UpstreamError(status)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Transcript API returned a non-JSON body for {url}: {e}")
            raise InternalServerError() from e

        return parse_transcript_payload(data, video_id)

    async def close(self) -> None:
        await self._client.aclose()
