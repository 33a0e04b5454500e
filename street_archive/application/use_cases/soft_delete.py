"""Soft delete use case: tombstone a street record by id."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from street_archive.application.services.input_validator import validate_record_id

if TYPE_CHECKING:
    from street_archive.application.interfaces.repositories import IStreetRepository

logger = logging.getLogger(__name__)


class SoftDeleteService:
    """Mark records deleted so every later search excludes them.

    Deleting an already deleted record succeeds again; records are never
    restored or physically removed here.
    """

    def __init__(self, street_repo: "IStreetRepository") -> None:
        self.street_repo = street_repo

    async def delete(self, record_id: object) -> str:
        """Validate the id, set deleted=true, and return the validated id.

        Raises:
            ValidationException: If the id is missing or malformed.
            RecordNotFoundException: If no record has this id.
            SearchBackendException: If the backend call fails.
        """
        validated_id = validate_record_id(record_id)
        await self.street_repo.mark_deleted(validated_id)
        logger.info("Record %s marked as deleted", validated_id)
        return validated_id
