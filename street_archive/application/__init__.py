"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (search repository).
"""

from street_archive.application.interfaces import IStreetRepository
from street_archive.application.use_cases import SoftDeleteService, StreetSearchService

__all__ = ["IStreetRepository", "SoftDeleteService", "StreetSearchService"]
