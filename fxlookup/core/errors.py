from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger("fxlookup.errors")


class FxLookupError(Exception):
    """Base error. HTTP facing subclasses carry the status and body to send."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "An unexpected error occurred."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class LoadError(FxLookupError):
    """Startup data source unreadable or malformed. Fatal."""

    def __init__(self, source: object, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"failed to load exchange rates from {source}: {reason}")


class RateLimitExceeded(FxLookupError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    message = "Too many requests. Please try again later."


class InvalidPathError(FxLookupError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid URL format. Use /[date]/[currency] or /[date]"


class NotFoundError(FxLookupError):
    status_code = status.HTTP_404_NOT_FOUND


class DateNotFoundError(NotFoundError):
    message = "Exchange rates not found for the specified date"

    def __init__(self, date: str):
        self.date = date
        super().__init__()


class CurrencyNotFoundError(NotFoundError):
    message = "Currency not found for the specified date"

    def __init__(self, currency: str):
        self.currency = currency
        super().__init__()


class EncodingError(FxLookupError):
    message = "Failed to encode response"


def lookup_error_handler(request: Request, exc: FxLookupError):  # type: ignore
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    else:
        logger.info("%s %s -> %s", request.method, request.url.path, exc.status_code)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    logger.info("%s %s -> %s", request.method, request.url.path, exc.status_code)
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return PlainTextResponse(
        "An unexpected error occurred.",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
