"""
Chat service answering questions about a single video transcript.

Each call is stateless: the transcript is the only context sent upstream.
Earlier turns of the conversation are not forwarded, so follow-up questions
are answered from the transcript alone.
"""
from typing import Optional, Sequence

from loguru import logger

from app.models import LLMRole, TranscriptSegment, join_segment_text
from app.core.constants import ChatConfig, LLMErrorIndicators
from app.core.exceptions import (
    AppException,
    AuthError,
    ContentFilteredError,
    EmptyResponseError,
    GenerationFailedError,
    InvalidInputError,
    QuotaExceededError,
)
from app.core.providers.llm_provider import LLMProvider, LLMMessage
from app.core.prompts import ChatPrompts


def build_grounding_text(segments: Sequence[TranscriptSegment]) -> str:
    """Space-joined segment texts, in transcript order."""
    return join_segment_text(list(segments))


def classify_llm_error(error: Exception) -> AppException:
    """
    Map an upstream LLM failure to an application error by its message.

    Matching ignores case and also accepts the spellings Gemini uses in
    its own errors ("API key not valid", "RESOURCE_EXHAUSTED").

    Args:
        error: Whatever the provider raised.

    Returns:
        AuthError, QuotaExceededError, ContentFilteredError or
        GenerationFailedError, checked in that order.
    """
    message = str(error).upper()
    if any(marker in message for marker in LLMErrorIndicators.API_KEY):
        return AuthError()
    if any(marker in message for marker in LLMErrorIndicators.QUOTA):
        return QuotaExceededError()
    if any(marker in message for marker in LLMErrorIndicators.SAFETY):
        return ContentFilteredError()
    return GenerationFailedError()


class ChatService:
    """Service for answering user questions grounded in a transcript."""

    def __init__(self, llm_provider: LLMProvider):
        """
        Initialize the ChatService.

        Args:
            llm_provider: LLM provider for chat responses.
        """
        self.llm_provider = llm_provider

    async def answer(
        self,
        message: str,
        transcript_segments: Optional[Sequence[TranscriptSegment]],
        video_title: Optional[str] = None,
    ) -> str:
        """
        Answer ``message`` using only the transcript as knowledge.

        Args:
            message: The user's question.
            transcript_segments: The full transcript of the video.
            video_title: Title used in the instructions; defaults to
                "YouTube Video".

        Returns:
            str: The generated answer.

        Raises:
            InvalidInputError: If the message or the transcript is empty.
            EmptyResponseError: If the model returned no text.
            AuthError, QuotaExceededError, ContentFilteredError,
            GenerationFailedError: Classified upstream failures.
        """
        if not message or not message.strip() or not transcript_segments:
            raise InvalidInputError("Message and transcript are required")

        system_prompt = self._build_system_prompt(
            transcript=build_grounding_text(transcript_segments),
            video_title=video_title,
        )
        messages = [
            LLMMessage(role=LLMRole.SYSTEM, content=system_prompt),
            LLMMessage(role=LLMRole.USER, content=message),
        ]

        logger.debug(
            f"Calling LLM with {len(transcript_segments)} transcript segments"
        )
        try:
            response = await self.llm_provider.generate_text(
                messages=messages,
                temperature=ChatConfig.TEMPERATURE,
            )
        except Exception as e:
            error = classify_llm_error(e)
            logger.error(f"LLM API error ({type(error).__name__}): {e}")
            raise error from e

        text = response.content
        if not text or not text.strip():
            logger.warning("LLM returned an empty response")
            raise EmptyResponseError()

        return text

    def _build_system_prompt(self, transcript: str, video_title: Optional[str]) -> str:
        """
        Build the system prompt binding the assistant to the transcript.

        Args:
            transcript: The grounding document.
            video_title: Title of the video, if known.

        Returns:
            Formatted system prompt.
        """
        return ChatPrompts.SYSTEM_INSTRUCTIONS.format(
            video_title=video_title or ChatConfig.DEFAULT_VIDEO_TITLE,
            transcript=transcript,
        )
