"""Interface layer errors and their HTTP translation."""

import logfire
from fastapi import HTTPException, status

from orgsocial.domain.error import (
    DomainError,
    NotAPollError,
    NotFoundError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


def to_http_exception(error: DomainError | OSError, action: str) -> HTTPException:
    """Map an error raised while handling a request to an HTTP response.

    Args:
        error: Domain error, or storage error from the document repository
        action: What the request was doing, used in log events

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        logfire.warn(f"{action} failed - not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, (ValidationError, NotAPollError)):
        logfire.warn(f"{action} failed - invalid request", error=str(error))
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )
    if isinstance(error, DomainError):
        logfire.warn(f"{action} failed", error=str(error))
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )
    logfire.error(f"{action} failed - storage error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Document storage is unavailable",
    )
