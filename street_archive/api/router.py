"""API router aggregation.

Search and delete live under /api; health is mounted at the root by main.
All routes use dependencies from street_archive.api.dependencies.
"""

from fastapi import APIRouter

from street_archive.api.endpoints import health, search

api_router = APIRouter()
api_router.include_router(search.router, tags=["search"])

health_router = APIRouter()
health_router.include_router(health.router, prefix="/health", tags=["health"])
