"""Health check endpoint: liveness plus search backend connectivity."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from street_archive.api.dependencies import get_street_repo
from street_archive.core import constants
from street_archive.infrastructure.search.street_repository import StreetSearchRepository
from street_archive.schemas.health import HealthResponse

router = APIRouter()


@router.get(
    "",
    response_model=HealthResponse,
    responses={503: {"description": "Search backend unreachable", "model": HealthResponse}},
)
async def health_check(
    street_repo: Annotated[StreetSearchRepository, Depends(get_street_repo)],
) -> HealthResponse | JSONResponse:
    """Return 200 if Elasticsearch answers a ping; 503 otherwise."""
    now = datetime.now(timezone.utc)
    if await street_repo.ping():
        return HealthResponse(
            status="ok",
            message=constants.SERVER_RUNNING,
            elasticsearch=constants.BACKEND_CONNECTED,
            timestamp=now,
        )
    return JSONResponse(
        status_code=503,
        content=HealthResponse(
            status="error",
            message=constants.SERVER_DEGRADED,
            elasticsearch=constants.BACKEND_DISCONNECTED,
            timestamp=now,
        ).model_dump(mode="json"),
    )
