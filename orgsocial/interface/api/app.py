"""FastAPI application."""

from fastapi import FastAPI

from orgsocial.interface.api.routes import (
    documents,
    health,
    notifications,
    polls,
    posts,
    threads,
)
from orgsocial.util.di.container import create_container, setup_di
from orgsocial.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.
    """
    # Instrument httpx for outbound document fetches
    instrument_httpx()

    app_instance = FastAPI(
        title="Org Social API",
        description="Read, thread and publish org-social documents",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Settings are loaded from environment by the container
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(documents.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(polls.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
