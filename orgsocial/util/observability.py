"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Feed fetched", url=url, posts=len(posts))

    with logfire.span("thread_service.build_forest", post_count=len(posts)):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI

from orgsocial.config import Settings

SERVICE_NAME = "orgsocial"

# Query parameters worth attaching to request spans
TRACED_QUERY_PARAMS = ("include_followed", "timeout_seconds", "type", "limit")


def should_send_to_logfire(settings: Settings) -> bool:
    """An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise send when a token is set."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the server process.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        document=str(settings.document.path),
        source_url=settings.document.source_url,
        send_to_logfire=send_to_logfire,
    )


def request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Span attributes for one API request: path plus the feed query options."""
    result = {**attributes, "path": request.url.path}
    for name in TRACED_QUERY_PARAMS:
        value = request.query_params.get(name)
        if value is not None:
            result[name] = value
    return result


def instrument_fastapi(app: FastAPI) -> None:
    logfire.instrument_fastapi(app, request_attributes_mapper=request_attributes)
    logfire.info("FastAPI instrumented")


def instrument_httpx() -> None:
    """Instrument httpx so every feed fetch is traced."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
