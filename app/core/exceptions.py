"""
Custom exception classes and RFC 7807 error handling.
"""
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details response model."""
    type: str
    title: str
    status: int
    detail: str
    instance: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        title: str,
        detail: str,
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.title = title
        self.detail = detail
        super().__init__(detail)


class InvalidInputError(AppException):
    """Request input is missing or malformed."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=400,
            error_type="https://problems.example.com/invalid-input",
            title="Bad Request",
            detail=detail,
        )


class NotFoundError(AppException):
    """No transcript is available for the requested video."""

    def __init__(self, detail: str = "No transcript available for this video"):
        super().__init__(
            status_code=404,
            error_type="https://problems.example.com/not-found",
            title="Not Found",
            detail=detail,
        )


class NoTranscriptDataError(AppException):
    """Upstream answered but the payload carried no usable transcript."""

    def __init__(self, detail: str = "No transcript data found for this video"):
        super().__init__(
            status_code=404,
            error_type="https://problems.example.com/no-transcript-data",
            title="No Transcript Data",
            detail=detail,
        )


class RateLimitError(AppException):
    """Rate limit exceeded exception."""

    def __init__(self, detail: str = "Rate limit exceeded. Please try again later."):
        super().__init__(
            status_code=429,
            error_type="https://problems.example.com/rate-limit-exceeded",
            title="Too Many Requests",
            detail=detail,
        )


class UpstreamError(AppException):
    """Upstream service failed with a status that has no dedicated mapping."""

    def __init__(
        self,
        upstream_status: int,
        detail: str = "Failed to fetch transcript from YouTube",
    ):
        self.upstream_status = upstream_status
        super().__init__(
            status_code=upstream_status,
            error_type="https://problems.example.com/upstream-error",
            title="Upstream Error",
            detail=detail,
        )


class AuthError(AppException):
    """Upstream rejected our credentials."""

    def __init__(self, detail: str = "Invalid API key configuration"):
        super().__init__(
            status_code=401,
            error_type="https://problems.example.com/auth-error",
            title="Unauthorized",
            detail=detail,
        )


class QuotaExceededError(AppException):
    """Upstream quota is exhausted."""

    def __init__(self, detail: str = "API quota exceeded. Please try again later."):
        super().__init__(
            status_code=429,
            error_type="https://problems.example.com/quota-exceeded",
            title="Quota Exceeded",
            detail=detail,
        )


class ContentFilteredError(AppException):
    """Upstream safety filter refused the request or the answer."""

    def __init__(
        self,
        detail: str = "Content filtered for safety. Please rephrase your question.",
    ):
        super().__init__(
            status_code=400,
            error_type="https://problems.example.com/content-filtered",
            title="Content Filtered",
            detail=detail,
        )


class GenerationFailedError(AppException):
    """Answer generation failed for an unclassified reason."""

    def __init__(self, detail: str = "Failed to generate response. Please try again."):
        super().__init__(
            status_code=500,
            error_type="https://problems.example.com/generation-failed",
            title="Generation Failed",
            detail=detail,
        )


class EmptyResponseError(GenerationFailedError):
    """Upstream call succeeded but produced no usable text."""

    def __init__(self, detail: str = "No response generated. Please try again."):
        super().__init__(detail=detail)
        self.error_type = "https://problems.example.com/empty-response"
        self.title = "Empty Response"


class InternalServerError(AppException):
    """Internal server error exception."""

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(
            status_code=500,
            error_type="https://problems.example.com/internal-error",
            title="Internal Server Error",
            detail=detail,
        )


def create_error_response(
    request: Request,
    status_code: int,
    error_type: str,
    title: str,
    detail: str,
) -> JSONResponse:
    """Create a RFC 7807 compliant JSON error response."""
    error = ErrorResponse(
        type=error_type,
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
    )
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(),
        media_type="application/problem+json",
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return RFC 7807 response."""
    return create_error_response(
        request=request,
        status_code=exc.status_code,
        error_type=exc.error_type,
        title=exc.title,
        detail=exc.detail,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 instead of FastAPI's 422."""
    fields = sorted(
        {".".join(str(p) for p in err.get("loc", ()) if p != "body") for err in exc.errors()}
    )
    logger.warning(f"Rejected malformed request to {request.url.path}: {fields}")
    error = InvalidInputError(
        f"Invalid request body: {', '.join(f for f in fields if f) or 'body'}"
    )
    return await app_exception_handler(request, error)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler; the raw exception is logged, never returned."""
    logger.opt(exception=exc).error(f"Unhandled error on {request.url.path}")
    return await app_exception_handler(request, InternalServerError())
