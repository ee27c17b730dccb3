"""
Client session controller.

Owns one user's ``SessionState`` and drives the transcript and chat
endpoints. Rendering is left to whatever UI sits on top; every transition
here is a plain method so it can be exercised without one.

Transitions:
    extraction: idle -> extracting -> extracted | error
    chat:       closed -> open
    message:    composing -> sending -> appended | errored
"""
from datetime import datetime
from typing import Optional

from loguru import logger

from app.client.api_client import ApiClient, ApiError
from app.core.constants import ChatConfig
from app.models import (
    ChatMessage,
    ExtractionStatus,
    MessageRole,
    Notification,
    NotificationVariant,
    SessionState,
    Transcript,
)
from app.models.session import utc_now
from app.services.url_validator import is_valid_youtube_url


class SessionMessages:
    """User-facing strings."""
    URL_REQUIRED = "Please enter a YouTube URL"
    URL_INVALID = "Please enter a valid YouTube URL"
    EXTRACT_FAILED = "Failed to extract transcript"
    CHAT_APOLOGY = (
        "I apologize, but I encountered an error while processing your question. "
        "Please try again."
    )
    CHAT_FAILED = "Failed to get AI response"


class SessionController:
    """
    Single writer of a client session's state.

    Example:
        controller = SessionController(ApiClient("http://localhost:8000"))
        controller.set_url("https://www.youtube.com/watch?v=abc123")
        await controller.extract_transcript()
        controller.start_new_chat()
        await controller.send_message("What is this about?")
    """

    def __init__(self, api: ApiClient, state: Optional[SessionState] = None):
        self.api = api
        self.state = state or SessionState()

    # -------------------------------------------------------------------------
    # Transcript
    # -------------------------------------------------------------------------

    def set_url(self, url: str) -> None:
        self.state.url = url

    async def extract_transcript(self) -> bool:
        """
        Validate the current URL and fetch its transcript.

        Invalid input is reported locally without contacting the server.
        A new extraction discards the previous transcript and chat.

        Returns:
            True if a transcript is now loaded.
        """
        state = self.state
        if state.loading or state.chat_loading:
            return False

        url = state.url
        if not url.strip():
            self._fail_locally(SessionMessages.URL_REQUIRED)
            return False
        if not is_valid_youtube_url(url):
            self._fail_locally(SessionMessages.URL_INVALID)
            return False

        state.extraction_status = ExtractionStatus.EXTRACTING
        state.error = ""
        self._set_transcript(None)

        try:
            transcript = await self.api.extract_transcript(url)
        except ApiError as e:
            logger.warning(f"Transcript extraction failed ({e.status_code}): {e.detail}")
            state.extraction_status = ExtractionStatus.ERROR
            state.error = e.detail or "An error occurred"
            self._notify("Error", SessionMessages.EXTRACT_FAILED, NotificationVariant.DESTRUCTIVE)
            return False

        self._set_transcript(transcript)
        state.extraction_status = ExtractionStatus.EXTRACTED
        self._notify("Success!", "Transcript extracted successfully")
        return True

    def clear(self) -> None:
        """Reset the URL, transcript, error and chat."""
        self.state.url = ""
        self.state.error = ""
        self.state.extraction_status = ExtractionStatus.IDLE
        self._set_transcript(None)

    # -------------------------------------------------------------------------
    # Chat
    # -------------------------------------------------------------------------

    def start_new_chat(self) -> bool:
        """Open the chat with an empty message log. Requires a transcript."""
        if self.state.transcript is None or self.state.chat_loading:
            return False
        self.state.messages = []
        self.state.chat_open = True
        self._notify("Chat Started", "You can now ask questions about the transcript")
        return True

    async def send_message(self, text: str) -> Optional[ChatMessage]:
        """
        Send a question about the current transcript.

        The user message is appended before the request goes out. A failed
        request appends a fixed apology from the assistant instead of the
        raw error, plus a destructive notification.

        Returns:
            The assistant message appended, or None if nothing was sent or
            the transcript was cleared before the reply arrived.
        """
        state = self.state
        content = text.strip()
        if not content or not state.can_chat:
            return None

        transcript = state.transcript
        self._append(MessageRole.USER, content)
        state.chat_loading = True
        try:
            answer = await self.api.chat(
                content,
                transcript,
                transcript.video_title or ChatConfig.DEFAULT_VIDEO_TITLE,
            )
        except ApiError as e:
            logger.warning(f"Chat request failed ({e.status_code}): {e.detail}")
            if state.transcript is not transcript:
                return None
            self._notify("Error", SessionMessages.CHAT_FAILED, NotificationVariant.DESTRUCTIVE)
            return self._append(MessageRole.ASSISTANT, SessionMessages.CHAT_APOLOGY)
        finally:
            state.chat_loading = False

        if state.transcript is not transcript:
            logger.debug("Dropping chat reply for a transcript that is no longer loaded")
            return None
        return self._append(MessageRole.ASSISTANT, answer)

    # -------------------------------------------------------------------------
    # Notifications
    # -------------------------------------------------------------------------

    def pop_notifications(self) -> list[Notification]:
        """Hand pending notifications to the UI and forget them."""
        pending, self.state.notifications = self.state.notifications, []
        return pending

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _set_transcript(self, transcript: Optional[Transcript]) -> None:
        # The chat log belongs to one transcript
        self.state.transcript = transcript
        self.state.messages = []
        self.state.chat_open = False

    def _fail_locally(self, message: str) -> None:
        self.state.error = message
        self.state.extraction_status = ExtractionStatus.ERROR

    def _append(self, role: MessageRole, content: str) -> ChatMessage:
        message = ChatMessage(role=role, content=content, timestamp=self._next_timestamp())
        self.state.messages.append(message)
        return message

    def _next_timestamp(self) -> datetime:
        now = utc_now()
        if self.state.messages:
            return max(now, self.state.messages[-1].timestamp)
        return now

    def _notify(
        self,
        title: str,
        description: str,
        variant: NotificationVariant = NotificationVariant.DEFAULT,
    ) -> None:
        self.state.notifications.append(
            Notification(title=title, description=description, variant=variant)
        )
