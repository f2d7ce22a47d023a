"""Error responses for the movie-cache API.

Every error body uses the same Result/Message structure:

    {"messages": [{"code": "...", "messageType": "Error", "text": "...", "timestamp": "..."}]}
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from moviecache.core.errors import BackendUnavailable, NotFound, StoreError


class MessageType(str, Enum):
    """Type of message in error response."""

    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"
    EXCEPTION = "Exception"


class Message(BaseModel):
    """A single error message."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    code: str
    message_type: MessageType = Field(alias="messageType")
    text: str
    timestamp: str | None = None


class Result(BaseModel):
    """Result wrapper for errors."""

    model_config = {"extra": "forbid"}

    messages: list[Message]


class ApiError(HTTPException):
    """Base exception for API errors."""

    def __init__(
        self,
        status_code: int,
        code: str,
        text: str,
        message_type: MessageType = MessageType.ERROR,
    ):
        self.code = code
        self.text = text
        self.message_type = message_type
        super().__init__(status_code=status_code, detail=text)

    def to_result(self) -> Result:
        """Convert to Result format."""
        return Result(
            messages=[
                Message(
                    code=self.code,
                    messageType=self.message_type,
                    text=self.text,
                    timestamp=datetime.now(UTC).isoformat(),
                )
            ]
        )


class NotFoundError(ApiError):
    """Resource not found (404)."""

    def __init__(self, resource_type: str, identifier: str):
        super().__init__(
            status_code=404,
            code="NotFound",
            text=f"{resource_type} with identifier '{identifier}' not found",
        )


class BadGatewayError(ApiError):
    """Backend collaborator failed (502)."""

    def __init__(self, text: str):
        super().__init__(
            status_code=502,
            code="BackendUnavailable",
            text=text,
        )


class ServiceUnavailableError(ApiError):
    """Key-value store unavailable (503)."""

    def __init__(self, text: str):
        super().__init__(
            status_code=503,
            code="StoreUnavailable",
            text=text,
        )


def to_api_error(exc: Exception) -> ApiError:
    """Map a cache core error to its API error."""
    if isinstance(exc, NotFound):
        return NotFoundError("Movie", str(exc.movie_id))
    if isinstance(exc, BackendUnavailable):
        return BadGatewayError(str(exc))
    if isinstance(exc, StoreError):
        return ServiceUnavailableError(str(exc))
    return ApiError(
        status_code=500,
        code="InternalServerError",
        text="An unexpected error occurred",
        message_type=MessageType.EXCEPTION,
    )


async def api_exception_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Exception handler for API errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_result().model_dump(by_alias=True),
    )


async def cache_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Exception handler for errors raised by the cache core."""
    return await api_exception_handler(request, to_api_error(exc))
