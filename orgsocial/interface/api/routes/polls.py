"""Poll routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from orgsocial.application.usecase.poll import (
    VoteOnPollRequest,
    VoteOnPollResponse,
    VoteOnPollUseCase,
)
from orgsocial.domain.error import DomainError
from orgsocial.interface.error import to_http_exception

router = APIRouter(prefix="/polls", tags=["polls"], route_class=DishkaRoute)


@router.post(
    "/votes",
    response_model=VoteOnPollResponse,
    status_code=status.HTTP_201_CREATED,
)
async def vote_on_poll(
    request: VoteOnPollRequest,
    vote_on_poll_use_case: FromDishka[VoteOnPollUseCase],
) -> VoteOnPollResponse:
    """Cast a vote as a reply to a poll.

    Returns:
        The vote reply and the poll tally before this vote

    Raises:
        HTTPException: 404 for unknown polls, 400 for non-polls, ended polls
            and unknown options
    """
    try:
        return await vote_on_poll_use_case.execute(request)
    except (DomainError, OSError) as e:
        raise to_http_exception(e, "Vote") from e
