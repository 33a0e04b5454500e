"""Search API: street search in free/exact/full mode and soft delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request

from street_archive.api.dependencies import get_search_service, get_soft_delete_service
from street_archive.application.use_cases.search import StreetSearchService
from street_archive.application.use_cases.soft_delete import SoftDeleteService
from street_archive.core import constants
from street_archive.core.limiter import limit_delete, limit_search
from street_archive.schemas.search import (
    DeleteResponse,
    ErrorResponse,
    SearchResponse,
    StreetHitResponse,
)

router = APIRouter()


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@limit_search
async def search(
    request: Request,
    search_svc: Annotated[StreetSearchService, Depends(get_search_service)],
    q: str | None = Query(None, description="Search text (1-200 characters after trimming)"),
    mode: str | None = Query(None, description="free (default) | exact | full"),
) -> SearchResponse:
    """Search street records; deleted records are never returned.

    q is validated by the use case (not by Query constraints) so a missing
    or blank query yields 400 rather than 422. Unknown modes fall back to
    free and the response reports the mode that was applied.
    """
    result = await search_svc.search(q=q, mode=mode)
    return SearchResponse(
        hits=[StreetHitResponse(id=hit.id, fields=hit.fields) for hit in result.hits],
        total=result.total,
        mode=result.mode.value,
    )


@router.post(
    "/delete/{record_id}",
    response_model=DeleteResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@limit_delete
async def delete_record(
    request: Request,
    delete_svc: Annotated[SoftDeleteService, Depends(get_soft_delete_service)],
    record_id: str = Path(..., description="Backend record id"),
) -> DeleteResponse:
    """Soft delete a record (sets deleted=true); it disappears from search immediately."""
    deleted_id = await delete_svc.delete(record_id)
    return DeleteResponse(success=True, message=constants.RECORD_MARKED_DELETED, id=deleted_id)
