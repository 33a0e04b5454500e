"""StreetSearchService and SoftDeleteService unit tests with mocked repos."""

from unittest.mock import AsyncMock

import pytest

from street_archive.application.dtos.search import SearchPage, StreetRecord
from street_archive.application.services.query_translator import build_search_query
from street_archive.application.use_cases.search import StreetSearchService
from street_archive.application.use_cases.soft_delete import SoftDeleteService
from street_archive.domain.enums import SearchMode
from street_archive.domain.exceptions import RecordNotFoundException, ValidationException


def _repo(page: SearchPage | None = None) -> AsyncMock:
    repo = AsyncMock()
    repo.search.return_value = page or SearchPage(hits=[], total=0)
    return repo


async def test_search_translates_and_returns_effective_mode() -> None:
    record = StreetRecord(id="street-814", fields={"שם ראשי": "ויצמן"})
    repo = _repo(SearchPage(hits=[record], total=1))
    service = StreetSearchService(repo)

    result = await service.search(q="  ויצמן ", mode="exact")

    repo.search.assert_awaited_once_with(build_search_query("ויצמן", SearchMode.EXACT))
    assert result.mode is SearchMode.EXACT
    assert result.total == 1
    assert result.hits == [record]


@pytest.mark.parametrize("mode", [None, "bogus", "FULL"])
async def test_search_unknown_mode_uses_free(mode: object) -> None:
    repo = _repo()
    result = await StreetSearchService(repo).search(q="הרצל", mode=mode)
    assert result.mode is SearchMode.FREE
    repo.search.assert_awaited_once_with(build_search_query("הרצל", SearchMode.FREE))


async def test_search_invalid_query_never_reaches_backend() -> None:
    repo = _repo()
    with pytest.raises(ValidationException):
        await StreetSearchService(repo).search(q="   ", mode="full")
    repo.search.assert_not_awaited()


async def test_soft_delete_returns_validated_id() -> None:
    repo = AsyncMock()
    deleted_id = await SoftDeleteService(repo).delete(" street-801 ")
    assert deleted_id == "street-801"
    repo.mark_deleted.assert_awaited_once_with("street-801")


async def test_soft_delete_invalid_id_never_reaches_backend() -> None:
    repo = AsyncMock()
    with pytest.raises(ValidationException) as exc_info:
        await SoftDeleteService(repo).delete("invalid@id#with$")
    assert exc_info.value.message == "Invalid document ID format"
    repo.mark_deleted.assert_not_awaited()


async def test_soft_delete_propagates_not_found() -> None:
    repo = AsyncMock()
    repo.mark_deleted.side_effect = RecordNotFoundException("street-999")
    with pytest.raises(RecordNotFoundException):
        await SoftDeleteService(repo).delete("street-999")
