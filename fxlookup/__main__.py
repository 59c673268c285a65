"""Process entry point: ``python -m fxlookup`` or the ``fxlookup`` console script."""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from fxlookup.core.config import get_settings
from fxlookup.core.errors import LoadError
from fxlookup.core.logging import init_logging
from fxlookup.main import create_app

logger = logging.getLogger("fxlookup")


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        init_logging()
        logger.error("invalid configuration: %s", e)
        return 1
    try:
        app = create_app(settings)
    except LoadError:
        # already logged with traceback by create_app
        return 1
    logger.info("listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
