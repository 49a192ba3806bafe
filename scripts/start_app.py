#!/usr/bin/env python3
"""Start the org-social API with Logfire tracking of startup errors."""

import sys

import logfire
import uvicorn

from orgsocial.config import Settings
from orgsocial.util.logging import get_logger, setup_logging
from orgsocial.util.observability import configure_logfire

logger = get_logger(__name__)


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        logger.info(
            "Serving %s on %s:%s", settings.document.path, settings.host, settings.port
        )
        logfire.info(
            "Starting org-social API",
            document=str(settings.document.path),
            source_url=settings.document.source_url,
        )

        uvicorn.run(
            "orgsocial.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
