"""
Google Gemini implementation of LLMProvider.

This module provides a vendor-specific implementation for the Gemini API
while conforming to the LLMProvider interface.
"""
from typing import Any, Optional

import google.generativeai as genai
from loguru import logger

from app.core.providers.llm_provider import (
    LLMProvider,
    LLMMessage,
    LLMProviderError,
    LLMResponse,
)
from app.models.enums import LLMRole


def _enum_name(value: Any) -> str:
    return getattr(value, "name", str(value))


class GeminiProvider(LLMProvider):
    """
    Google Gemini implementation of LLMProvider.

    System messages become the model's ``system_instruction``; the remaining
    messages form the prompt.

    Example:
        provider = GeminiProvider(
            api_key="your-api-key",
            model_name="gemini-1.5-flash",
        )
        response = await provider.generate_text(messages)
    """

    def __init__(self, api_key: str, model_name: str = "gemini-1.5-flash"):
        """
        Initialize the Gemini provider.

        Args:
            api_key: Google AI API key.
            model_name: Gemini model to use (e.g., "gemini-1.5-flash").
        """
        genai.configure(api_key=api_key)
        self.model_name = model_name

    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """
        Generate text completion using Gemini.

        Raises:
            LLMProviderError: If the prompt or the answer was blocked for
                safety reasons. The message contains "SAFETY".
        """
        system_instruction = "\n\n".join(
            m.content for m in messages if m.role == LLMRole.SYSTEM
        ) or None
        prompt = self._format_messages(
            [m for m in messages if m.role != LLMRole.SYSTEM]
        )

        model = genai.GenerativeModel(
            self.model_name,
            system_instruction=system_instruction,
        )
        config = genai.GenerationConfig(
            temperature=temperature,
            max_output_tokens=max_tokens,
        )

        logger.debug(f"Sending request to Gemini ({self.model_name})")
        response = await model.generate_content_async(
            prompt,
            generation_config=config,
        )

        usage = None
        if response.usage_metadata:
            usage = {
                "prompt_tokens": response.usage_metadata.prompt_token_count,
                "completion_tokens": response.usage_metadata.candidates_token_count,
                "total_tokens": response.usage_metadata.total_token_count,
            }
            logger.debug(f"Gemini token usage: {usage}")

        return LLMResponse(
            content=self._extract_text(response),
            model=self.model_name,
            usage=usage,
        )

    def _extract_text(self, response: Any) -> str:
        """
        Pull the answer text out of a Gemini response.

        ``response.text`` raises ValueError when there is no text part; a
        safety block is reported as an error, anything else as empty text.
        """
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None)
        if block_reason:
            raise LLMProviderError(f"SAFETY: prompt blocked ({_enum_name(block_reason)})")

        candidates = getattr(response, "candidates", None) or []
        if candidates and _enum_name(candidates[0].finish_reason) == "SAFETY":
            raise LLMProviderError("SAFETY: response blocked by content filter")

        try:
            return response.text
        except ValueError as e:
            logger.warning(f"Gemini returned no text part: {e}")
            return ""

    def _format_messages(self, messages: list[LLMMessage]) -> str:
        """
        Convert non-system messages to a Gemini prompt.

        A single user message is sent verbatim; longer exchanges get role
        labels.
        """
        if len(messages) == 1 and messages[0].role == LLMRole.USER:
            return messages[0].content

        parts = []
        for msg in messages:
            if msg.role == LLMRole.USER:
                parts.append(f"User: {msg.content}\n")
            elif msg.role == LLMRole.ASSISTANT:
                parts.append(f"Assistant: {msg.content}\n")
        return "".join(parts)
