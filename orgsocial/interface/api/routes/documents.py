"""Document routes.

Stateless conversion between document text and its structured form.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from orgsocial.application.usecase.document import (
    ParseDocumentRequest,
    ParseDocumentResponse,
    ParseDocumentUseCase,
    SerializeDocumentRequest,
    SerializeDocumentResponse,
    SerializeDocumentUseCase,
)

router = APIRouter(prefix="/documents", tags=["documents"], route_class=DishkaRoute)


@router.post("/parse", response_model=ParseDocumentResponse)
async def parse_document(
    request: ParseDocumentRequest,
    parse_document_use_case: FromDishka[ParseDocumentUseCase],
) -> ParseDocumentResponse:
    """Parse document text into its profile and posts.

    Parsing never fails on content: malformed lines are ignored.
    """
    return await parse_document_use_case.execute(request)


@router.post("/serialize", response_model=SerializeDocumentResponse)
async def serialize_document(
    request: SerializeDocumentRequest,
    serialize_document_use_case: FromDishka[SerializeDocumentUseCase],
) -> SerializeDocumentResponse:
    """Render a profile and posts as document text."""
    return await serialize_document_use_case.execute(request)
