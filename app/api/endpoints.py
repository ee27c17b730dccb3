"""
API endpoints for transcript extraction and transcript chat.
"""
import time

from fastapi import APIRouter, Depends
from loguru import logger

from app.models.api import (
    ChatRequest,
    ChatResponse,
    TranscriptRequest,
    TranscriptResponse,
)
from app.services.chat import ChatService
from app.services.transcript import TranscriptService
from app.api.dependencies import get_chat_service, get_transcript_service


router = APIRouter()


@router.post(
    "/extract-transcript",
    response_model=TranscriptResponse,
    response_model_exclude_none=True,
)
async def extract_transcript(
    payload: TranscriptRequest,
    transcript_service: TranscriptService = Depends(get_transcript_service),
):
    """
    Fetches the timed transcript of a YouTube video.

    Args:
        payload: The request body containing the video URL.
        transcript_service: The service handling URL validation and fetching.

    Returns:
        TranscriptResponse: Segments plus optional video title and id.
    """
    logger.info(f"Incoming transcript request for URL: {payload.url}")

    start_time = time.perf_counter()
    transcript = await transcript_service.fetch_transcript(payload.url)
    duration = time.perf_counter() - start_time
    logger.info(f"Transcript extracted in {duration:.2f}s")
    return TranscriptResponse.from_transcript(transcript)


@router.post("/chat-transcript", response_model=ChatResponse)
async def chat_with_transcript(
    payload: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
):
    """
    Answers a question about a transcript supplied by the client.

    The server keeps no conversation state; every call stands alone.

    Args:
        payload: The message, the full transcript and the video title.
        chat_service: The service handling prompt building and generation.

    Returns:
        ChatResponse: The AI-generated response.
    """
    logger.info(
        f"Incoming chat message ({len(payload.message)} chars) "
        f"over {len(payload.transcript)} segments"
    )

    start_time = time.perf_counter()
    response_text = await chat_service.answer(
        payload.message,
        payload.transcript,
        payload.video_title,
    )
    duration = time.perf_counter() - start_time
    logger.info(f"Chat message processed in {duration:.2f}s")
    return ChatResponse(response=response_text)
