import pytest

from app.core.exceptions import (
    AuthError,
    ContentFilteredError,
    EmptyResponseError,
    GenerationFailedError,
    InvalidInputError,
    QuotaExceededError,
)
from app.core.providers.llm_provider import LLMProviderError, LLMResponse
from app.models import LLMRole, TranscriptSegment
from app.services.chat import ChatService, build_grounding_text, classify_llm_error


@pytest.fixture
def chat_service(mock_llm_provider):
    return ChatService(llm_provider=mock_llm_provider)


def test_grounding_text_joins_segments_in_order():
    segments = [
        TranscriptSegment(text="Hello", start=0, duration=1),
        TranscriptSegment(text="world", start=1, duration=1),
    ]
    assert build_grounding_text(segments) == "Hello world"


@pytest.mark.asyncio
async def test_answer_sends_transcript_as_system_instruction(
    chat_service, mock_llm_provider, sample_segments
):
    answer = await chat_service.answer("What is this about?", sample_segments, "Greetings")

    assert answer == "The video says hello to the world."

    _, kwargs = mock_llm_provider.generate_text.call_args
    messages = kwargs["messages"]
    assert len(messages) == 2
    assert messages[0].role == LLMRole.SYSTEM
    assert "Hello world" in messages[0].content
    assert '"Greetings"' in messages[0].content
    assert messages[1].role == LLMRole.USER
    assert messages[1].content == "What is this about?"


@pytest.mark.asyncio
async def test_answer_uses_default_title(chat_service, mock_llm_provider, sample_segments):
    await chat_service.answer("Question?", sample_segments, None)

    messages = mock_llm_provider.generate_text.call_args.kwargs["messages"]
    assert '"YouTube Video"' in messages[0].content


@pytest.mark.asyncio
async def test_answer_is_stateless_between_calls(chat_service, mock_llm_provider, sample_segments):
    await chat_service.answer("First question", sample_segments)
    await chat_service.answer("Second question", sample_segments)

    messages = mock_llm_provider.generate_text.call_args.kwargs["messages"]
    assert [m.content for m in messages if m.role == LLMRole.USER] == ["Second question"]
    assert all("First question" not in m.content for m in messages)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "message, segments",
    [
        ("", [TranscriptSegment(text="a", start=0, duration=1)]),
        ("   ", [TranscriptSegment(text="a", start=0, duration=1)]),
        ("Question?", []),
        ("Question?", None),
    ],
)
async def test_answer_rejects_missing_input(chat_service, mock_llm_provider, message, segments):
    with pytest.raises(InvalidInputError):
        await chat_service.answer(message, segments)

    mock_llm_provider.generate_text.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("content", ["", "   \n"])
async def test_answer_empty_response(chat_service, mock_llm_provider, sample_segments, content):
    mock_llm_provider.generate_text.return_value = LLMResponse(content=content, model="m")

    with pytest.raises(EmptyResponseError) as exc_info:
        await chat_service.answer("Question?", sample_segments)

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, expected, status",
    [
        (Exception('400 API key not valid. [reason: "API_KEY_INVALID"]'), AuthError, 401),
        (Exception("QUOTA exceeded for this project"), QuotaExceededError, 429),
        (Exception("429 Resource has been exhausted (e.g. check quota)."), QuotaExceededError, 429),
        (LLMProviderError("SAFETY: response blocked by content filter"), ContentFilteredError, 400),
        (Exception("500 Internal error encountered."), GenerationFailedError, 500),
    ],
)
async def test_answer_classifies_upstream_errors(
    chat_service, mock_llm_provider, sample_segments, error, expected, status
):
    mock_llm_provider.generate_text.side_effect = error

    with pytest.raises(expected) as exc_info:
        await chat_service.answer("Question?", sample_segments)

    assert exc_info.value.status_code == status


@pytest.mark.parametrize(
    "message, expected",
    [
        ("api key not valid", AuthError),
        ("RESOURCE_EXHAUSTED: too many requests", QuotaExceededError),
        ("blocked for safety reasons", ContentFilteredError),
    ],
)
def test_classify_llm_error_ignores_case_and_gemini_spellings(message, expected):
    assert isinstance(classify_llm_error(Exception(message)), expected)


def test_classify_llm_error_prefers_api_key_over_quota():
    error = Exception("API_KEY quota check failed")
    assert isinstance(classify_llm_error(error), AuthError)


def test_classify_llm_error_never_leaks_upstream_message():
    error = Exception("secret upstream details")
    assert "secret" not in classify_llm_error(error).detail
