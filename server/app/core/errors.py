"""
SummaNote - Error Handling
Unified error format and exception handlers
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from .logging import get_logger

logger = get_logger(__name__)


class SummaNoteError(Exception):
    """Base exception for SummaNote errors."""

    def __init__(
        self,
        code: str,
        message: str,
        detail: Optional[Dict[str, Any]] = None,
        status_code: int = 400,
    ):
        self.code = code
        self.message = message
        self.detail = detail or {}
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> Dict[str, Any]:
        """Convert to standard error response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "detail": self.detail,
            }
        }


# Error codes and their default status codes
class ErrorCodes:
    INVALID_URL = "INVALID_URL"
    CONTENT_TOO_SHORT = "CONTENT_TOO_SHORT"
    CONTENT_TOO_LONG = "CONTENT_TOO_LONG"
    RATE_LIMITED = "RATE_LIMITED"
    SCRAPE_TIMEOUT = "SCRAPE_TIMEOUT"
    SCRAPE_FAILED = "SCRAPE_FAILED"
    ACCESS_DENIED = "ACCESS_DENIED"
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    COMPLETION_FAILED = "COMPLETION_FAILED"
    CONTENT_FILTERED = "CONTENT_FILTERED"
    UNKNOWN_TEMPLATE = "UNKNOWN_TEMPLATE"


# Pre-defined exceptions
class InvalidUrlError(SummaNoteError):
    def __init__(self, url: str):
        super().__init__(
            code=ErrorCodes.INVALID_URL,
            message="Please provide a valid HTTP or HTTPS URL",
            detail={"url": url},
            status_code=400,
        )


class ContentTooShortError(SummaNoteError):
    def __init__(self, length: int, min_length: int, what: str = "Content"):
        super().__init__(
            code=ErrorCodes.CONTENT_TOO_SHORT,
            message=f"{what} too short. Please provide at least {min_length} characters of content.",
            detail={"length": length, "min_length": min_length},
            status_code=400,
        )


class ContentTooLongError(SummaNoteError):
    def __init__(self, length: int, max_length: int, what: str = "Content"):
        super().__init__(
            code=ErrorCodes.CONTENT_TOO_LONG,
            message=f"{what} too long. Please limit to {max_length:,} characters.",
            detail={"length": length, "max_length": max_length},
            status_code=400,
        )


class RateLimitedError(SummaNoteError):
    def __init__(self, message: str = "Too many requests. Please wait a moment before trying again."):
        super().__init__(
            code=ErrorCodes.RATE_LIMITED,
            message=message,
            status_code=429,
        )


class ScrapeTimeoutError(SummaNoteError):
    def __init__(self, url: str, timeout: float):
        super().__init__(
            code=ErrorCodes.SCRAPE_TIMEOUT,
            message="The website took too long to respond. Please try a different URL.",
            detail={"url": url, "timeout_seconds": timeout},
            status_code=408,
        )


class AccessDeniedError(SummaNoteError):
    def __init__(self, url: str, upstream_status: int):
        super().__init__(
            code=ErrorCodes.ACCESS_DENIED,
            message="Access denied by the website. This content may not be publicly accessible.",
            detail={"url": url, "upstream_status": upstream_status},
            status_code=403,
        )


class PageNotFoundError(SummaNoteError):
    def __init__(self, url: str):
        super().__init__(
            code=ErrorCodes.PAGE_NOT_FOUND,
            message="The webpage could not be found. Please check the URL.",
            detail={"url": url},
            status_code=404,
        )


class ScrapeFailedError(SummaNoteError):
    def __init__(self, url: str, reason: str):
        super().__init__(
            code=ErrorCodes.SCRAPE_FAILED,
            message=f"Failed to scrape article: {reason}",
            detail={"url": url, "reason": reason},
            status_code=422,
        )


class ServiceUnavailableError(SummaNoteError):
    def __init__(self, reason: str = "Service temporarily unavailable"):
        super().__init__(
            code=ErrorCodes.SERVICE_UNAVAILABLE,
            message=reason,
            status_code=503,
        )


class CompletionFailedError(SummaNoteError):
    def __init__(self, reason: str, status_code: int = 500, code: str = ErrorCodes.COMPLETION_FAILED):
        super().__init__(
            code=code,
            message=reason,
            detail={"reason": reason},
            status_code=status_code,
        )


class UnknownTemplateError(SummaNoteError):
    def __init__(self, name: str, available: list):
        super().__init__(
            code=ErrorCodes.UNKNOWN_TEMPLATE,
            message=f"Unknown section template: {name}",
            detail={"template": name, "available": available},
            status_code=400,
        )


# Exception handlers for FastAPI
async def summanote_error_handler(
    request: Request, exc: SummaNoteError
) -> JSONResponse:
    """Handle SummaNoteError exceptions."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTPException and convert to standard format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": "HTTP_ERROR",
                "message": str(exc.detail),
                "detail": {},
            }
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "detail": {"type": type(exc).__name__, "message": str(exc)},
            }
        },
    )
