"""
HTTP client for the transcript and chat endpoints.
"""
from typing import Optional

import httpx
from loguru import logger

from app.models import ChatRequest, ChatResponse, Transcript, TranscriptResponse


class ApiError(Exception):
    """Non-2xx answer (or unreadable body) from the service."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail)


def _error_detail(response: httpx.Response, default: str) -> str:
    """Human-readable message from a problem-details (or legacy) error body."""
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict):
        for key in ("detail", "error"):
            if isinstance(body.get(key), str) and body[key]:
                return body[key]
    return default


class ApiClient:
    """
    Thin async wrapper over the two service endpoints.

    Example:
        async with ApiClient("http://localhost:8000") as api:
            transcript = await api.extract_transcript("https://youtu.be/abc123")
            answer = await api.chat("What is this about?", transcript)
    """

    def __init__(
        self,
        base_url: str,
        api_prefix: str = "/api",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Where the service is reachable.
            api_prefix: Route prefix the service mounts its endpoints under.
            transport: Optional httpx transport, e.g. ``httpx.ASGITransport``.
        """
        self.api_prefix = api_prefix.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=None,
            transport=transport,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def extract_transcript(self, url: str) -> Transcript:
        """
        Raises:
            ApiError: On any failure, with the server's message when it sent one.
        """
        response = await self._post("/extract-transcript", {"url": url})
        if not response.is_success:
            raise ApiError(
                response.status_code,
                _error_detail(response, "Failed to extract transcript"),
            )
        try:
            return TranscriptResponse.model_validate(response.json()).to_transcript()
        except ValueError as e:
            raise ApiError(response.status_code, "Failed to extract transcript") from e

    async def chat(
        self,
        message: str,
        transcript: Transcript,
        video_title: Optional[str] = None,
    ) -> str:
        """
        Raises:
            ApiError: On any failure, with the server's message when it sent one.
        """
        payload = ChatRequest(
            message=message,
            transcript=transcript.segments,
            video_title=video_title,
        )
        response = await self._post(
            "/chat-transcript",
            payload.model_dump(mode="json", by_alias=True),
        )
        if not response.is_success:
            raise ApiError(
                response.status_code,
                _error_detail(response, "Failed to get response"),
            )
        try:
            return ChatResponse.model_validate(response.json()).response
        except ValueError as e:
            raise ApiError(response.status_code, "Failed to get response") from e

    async def _post(self, path: str, body: dict) -> httpx.Response:
        try:
            return await self._client.post(f"{self.api_prefix}{path}", json=body)
        except httpx.HTTPError as e:
            logger.error(f"Request to {path} failed: {e}")
            raise ApiError(0, "Could not reach the server") from e

    async def close(self) -> None:
        await self._client.aclose()
