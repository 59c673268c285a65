import logging

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import rates
from .services.context import ServiceContext


def create_app(
    settings_override: Settings | None = None,
    context: ServiceContext | None = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    context: pre-built ServiceContext (tests); otherwise the rate table is
    loaded from settings.rates_file before the app is returned, so a server
    never starts without data.
    """
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug)
    logger = logging.getLogger("fxlookup")

    if context is None:
        try:
            context = ServiceContext.from_source(settings.rates_file)
        except errors.LoadError:
            # Missing data is fatal; re-raise after logging
            logger.exception("failed to load exchange rates on startup")
            raise

    # Interactive docs would shadow date paths like /docs, so they are off.
    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.context = context

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(errors.FxLookupError, errors.lookup_error_handler)
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(rates.router)

    return app
