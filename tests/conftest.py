"""
Shared pytest fixtures and configuration.
"""
import pytest
from unittest.mock import AsyncMock

from app.main import app
from app.api.dependencies import (
    get_chat_llm_provider,
    get_chat_service,
    get_transcript_provider,
    get_transcript_service,
)
from app.core.providers.llm_provider import LLMProvider, LLMResponse
from app.core.providers.transcript_provider import TranscriptProvider
from app.models import Transcript, TranscriptSegment


@pytest.fixture
def sample_segments():
    return [
        TranscriptSegment(text="Hello", start=0.0, duration=1.5),
        TranscriptSegment(text="world", start=1.5, duration=2.0),
    ]


@pytest.fixture
def sample_transcript(sample_segments):
    return Transcript(
        segments=sample_segments,
        video_title="Greetings",
        video_id="abc123",
    )


@pytest.fixture
def mock_transcript_service():
    """Create a mock TranscriptService."""
    return AsyncMock()


@pytest.fixture
def mock_chat_service():
    """Create a mock ChatService."""
    return AsyncMock()


@pytest.fixture
def mock_llm_provider():
    """LLM provider answering with a fixed text."""
    provider = AsyncMock(spec=LLMProvider)
    provider.generate_text.return_value = LLMResponse(
        content="The video says hello to the world.",
        model="test-model",
    )
    return provider


@pytest.fixture
def mock_transcript_provider():
    return AsyncMock(spec=TranscriptProvider)


@pytest.fixture
def override_dependencies(mock_transcript_service, mock_chat_service):
    """Replace both services with mocks."""
    app.dependency_overrides[get_transcript_service] = lambda: mock_transcript_service
    app.dependency_overrides[get_chat_service] = lambda: mock_chat_service

    yield

    app.dependency_overrides.clear()


@pytest.fixture
def override_providers(mock_transcript_provider, mock_llm_provider):
    """Keep the real services but replace the upstream providers."""
    app.dependency_overrides[get_transcript_provider] = lambda: mock_transcript_provider
    app.dependency_overrides[get_chat_llm_provider] = lambda: mock_llm_provider

    yield

    app.dependency_overrides.clear()
