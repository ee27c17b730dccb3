"""Tests for the RapidAPI transcript provider with httpx mocking."""

import httpx
import pytest
import respx

from app.core.exceptions import (
    InternalServerError,
    NoTranscriptDataError,
    NotFoundError,
    RateLimitError,
    UpstreamError,
)
from app.core.providers.rapidapi_provider import (
    RapidAPITranscriptProvider,
    parse_transcript_payload,
)

HOST = "youtube-2-transcript.p.rapidapi.com"
ENDPOINT = f"https://{HOST}/transcript-with-url"
VIDEO_URL = "https://www.youtube.com/watch?v=abc123"


@pytest.fixture
def provider():
    return RapidAPITranscriptProvider(api_key="test-key", host=HOST)


class TestRapidAPITranscriptProvider:
    @respx.mock
    @pytest.mark.asyncio
    async def test_get_transcript_success(self, provider):
        route = respx.get(ENDPOINT).mock(
            return_value=httpx.Response(200, json={
                "transcript": [
                    {"text": "Hello", "start": 0.0, "duration": 1.2},
                    {"text": "world", "start": 1.2, "duration": 0.8},
                ],
                "video_title": "Greetings",
                "video_id": "abc123",
            })
        )

        transcript = await provider.get_transcript(VIDEO_URL, video_id="abc123")

        assert [s.text for s in transcript.segments] == ["Hello", "world"]
        assert transcript.segments[1].start == 1.2
        assert transcript.video_title == "Greetings"
        assert transcript.video_id == "abc123"

        request = route.calls.last.request
        assert request.url.params["url"] == VIDEO_URL
        assert request.url.params["flat_text"] == "false"
        assert request.headers["x-rapidapi-key"] == "test-key"
        assert request.headers["x-rapidapi-host"] == HOST
        await provider.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_get_transcript_falls_back_to_extracted_id(self, provider):
        respx.get(ENDPOINT).mock(
            return_value=httpx.Response(200, json={
                "transcript": [{"text": "Hi", "start": 0, "duration": 1}],
            })
        )

        transcript = await provider.get_transcript(VIDEO_URL, video_id="abc123")

        assert transcript.video_id == "abc123"
        assert transcript.video_title is None
        await provider.close()

    @respx.mock
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status, expected",
        [
            (404, NotFoundError),
            (429, RateLimitError),
        ],
    )
    async def test_get_transcript_maps_known_statuses(self, provider, status, expected):
        respx.get(ENDPOINT).mock(return_value=httpx.Response(status, text="upstream says no"))

        with pytest.raises(expected) as exc_info:
            await provider.get_transcript(VIDEO_URL, video_id="abc123")

        assert exc_info.value.status_code == status
        assert "upstream says no" not in exc_info.value.detail
        await provider.close()

    @respx.mock
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403, 500, 503])
    async def test_get_transcript_passes_through_other_statuses(self, provider, status):
        respx.get(ENDPOINT).mock(return_value=httpx.Response(status, json={"message": "nope"}))

        with pytest.raises(UpstreamError) as exc_info:
            await provider.get_transcript(VIDEO_URL, video_id="abc123")

        assert exc_info.value.upstream_status == status
        assert exc_info.value.status_code == status
        assert exc_info.value.detail == "Failed to fetch transcript from YouTube"
        await provider.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_get_transcript_missing_transcript_field(self, provider):
        respx.get(ENDPOINT).mock(return_value=httpx.Response(200, json={"video_id": "abc123"}))

        with pytest.raises(NoTranscriptDataError):
            await provider.get_transcript(VIDEO_URL, video_id="abc123")
        await provider.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_get_transcript_invalid_json(self, provider):
        respx.get(ENDPOINT).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(InternalServerError):
            await provider.get_transcript(VIDEO_URL, video_id="abc123")
        await provider.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_get_transcript_network_failure_is_retried(self, provider):
        route = respx.get(ENDPOINT).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(InternalServerError):
            await provider.get_transcript(VIDEO_URL, video_id="abc123")

        assert route.call_count == 3
        await provider.close()


class TestParseTranscriptPayload:
    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [],
            "transcript",
            {},
            {"transcript": None},
            {"transcript": "Hello world"},
            {"transcript": {"text": "Hello", "start": 0, "duration": 1}},
        ],
    )
    def test_rejects_non_list_transcript(self, payload):
        with pytest.raises(NoTranscriptDataError):
            parse_transcript_payload(payload)

    def test_rejects_partially_malformed_segments(self):
        payload = {
            "transcript": [
                {"text": "Hello", "start": 0, "duration": 1},
                {"text": "no timing"},
            ]
        }
        with pytest.raises(NoTranscriptDataError):
            parse_transcript_payload(payload)

    def test_ignores_non_string_metadata(self):
        payload = {
            "transcript": [{"text": "Hello", "start": "0.5", "duration": 1}],
            "video_title": 42,
        }
        transcript = parse_transcript_payload(payload, video_id="abc123")

        assert transcript.video_title is None
        assert transcript.video_id == "abc123"
        assert transcript.segments[0].start == 0.5

    def test_keeps_segment_order(self):
        payload = {
            "transcript": [
                {"text": t, "start": i, "duration": 1}
                for i, t in enumerate(["one", "two", "three"])
            ]
        }
        transcript = parse_transcript_payload(payload)
        assert transcript.full_text == "one two three"
