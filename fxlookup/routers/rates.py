from __future__ import annotations

from typing import Optional, Tuple

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from fxlookup.core.errors import EncodingError, InvalidPathError, RateLimitExceeded
from fxlookup.services import rate_store
from fxlookup.services.context import ServiceContext

"""Rates router: the whole public HTTP surface.

    - /<date>            -> every rate recorded for <date>
    - /<date>/<currency> -> {"<CURRENCY>": rate}, currency case-insensitive
    - anything else      -> 400

Every method is routed here; the limiter is consulted before the path is
even looked at, so malformed requests still spend a token.
"""

# Unregistered extension verbs fall through to a plain-text 405.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]

router = APIRouter(tags=["rates"])


def get_context(request: Request) -> ServiceContext:
    return request.app.state.context


def require_admission(ctx: ServiceContext = Depends(get_context)) -> ServiceContext:
    if not ctx.limiter.try_acquire():
        raise RateLimitExceeded()
    return ctx


def parse_path(path: str) -> Tuple[str, Optional[str]]:
    """Split ``/<date>`` or ``/<date>/<currency>``; currency comes back uppercased."""
    parts = path[1:].split("/") if path.startswith("/") else path.split("/")
    # Empty segments are rejected, so /<date>/ is a 400 rather than a date-only lookup.
    if len(parts) > 2 or not all(parts):
        raise InvalidPathError()
    if len(parts) == 1:
        return parts[0], None
    return parts[0], parts[1].upper()


@router.api_route("/{path:path}", methods=ALL_METHODS, summary="Look up exchange rates by date")
def lookup_rates(request: Request, ctx: ServiceContext = Depends(require_admission)):
    date, currency = parse_path(request.url.path)
    result = rate_store.get(ctx.table, date, currency)
    try:
        return JSONResponse(dict(result))
    except (TypeError, ValueError) as e:
        raise EncodingError() from e
