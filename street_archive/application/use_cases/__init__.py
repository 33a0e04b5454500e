"""Application use cases: one entry point per workflow."""

from street_archive.application.use_cases.search import StreetSearchService
from street_archive.application.use_cases.soft_delete import SoftDeleteService

__all__ = ["SoftDeleteService", "StreetSearchService"]
