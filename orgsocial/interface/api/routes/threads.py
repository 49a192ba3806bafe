"""Timeline routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from orgsocial.application.usecase.timeline import (
    GetThreadsRequest,
    GetThreadsResponse,
    GetThreadsUseCase,
)
from orgsocial.domain.error import DomainError
from orgsocial.interface.error import to_http_exception

router = APIRouter(prefix="/threads", tags=["timeline"], route_class=DishkaRoute)


@router.get("", response_model=GetThreadsResponse)
async def get_threads(
    get_threads_use_case: FromDishka[GetThreadsUseCase],
    include_followed: bool = Query(default=True),
    timeout_seconds: float | None = Query(default=None, gt=0),
) -> GetThreadsResponse:
    """Get the threaded timeline.

    Conversations are ordered by their latest activity, newest first, and
    replies inside a conversation oldest first. Replies to posts that are
    not available hang under placeholder posts.

    Args:
        get_threads_use_case: Get threads use case from DI
        include_followed: Whether to fetch and merge followed documents
        timeout_seconds: Per-source fetch timeout

    Returns:
        Reply forest with poll tallies
    """
    try:
        request = GetThreadsRequest(
            include_followed=include_followed, timeout_seconds=timeout_seconds
        )
        return await get_threads_use_case.execute(request)
    except (DomainError, OSError) as e:
        raise to_http_exception(e, "Thread listing") from e
