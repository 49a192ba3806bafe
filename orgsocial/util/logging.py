"""Process-wide stdlib logging.

Library loggers (uvicorn, httpx) keep writing through stdlib ``logging``; this
module gives them one format and routes them into Logfire as well, so a fetch
failure logged by httpx lands next to the span of the feed build it belongs to.
"""

import logging
import sys

import logfire

from orgsocial.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers that are noisy at INFO while followed documents are fetched
QUIET_LOGGERS = ("httpx", "httpcore")


def log_level(settings: Settings) -> int:
    return logging.DEBUG if settings.debug else logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the server process.

    Args:
        settings: Application settings; ``debug`` lowers the level to DEBUG
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logfire.LogfireLoggingHandler(),
        ],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("orgsocial").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured for %s (document %s, level %s)",
        settings.environment,
        settings.document.path,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
