"""DTOs for street search results (no dependency on the search client)."""

from dataclasses import dataclass, field

from street_archive.domain.enums import SearchMode


@dataclass(frozen=True)
class StreetRecord:
    """Single search hit: backend id plus the returned fields only."""

    id: str
    fields: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchPage:
    """Hits of one backend search (at most MAX_SEARCH_RESULTS) and the match count."""

    hits: list[StreetRecord]
    total: int


@dataclass(frozen=True)
class SearchResult:
    """Search outcome returned to callers; mode is the effective mode."""

    hits: list[StreetRecord]
    total: int
    mode: SearchMode
