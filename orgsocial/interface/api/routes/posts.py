"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from orgsocial.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    CreateReplyRequest,
    CreateReplyResponse,
    CreateReplyUseCase,
)
from orgsocial.domain.error import DomainError
from orgsocial.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.post(
    "",
    response_model=CreatePostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: CreatePostRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Compose a post and append it to the user's document.

    Args:
        request: Post content and properties; poll options make it a poll
        create_post_use_case: Create post use case from DI

    Returns:
        The appended post

    Raises:
        HTTPException: 400 on invalid content, 500 if the document cannot be written
    """
    try:
        return await create_post_use_case.execute(request)
    except (DomainError, OSError) as e:
        raise to_http_exception(e, "Post creation") from e


@router.post(
    "/replies",
    response_model=CreateReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    request: CreateReplyRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
) -> CreateReplyResponse:
    """Compose a reply and append it to the user's document."""
    try:
        return await create_reply_use_case.execute(request)
    except (DomainError, OSError) as e:
        raise to_http_exception(e, "Reply creation") from e
