"""Application DTOs (no search-client dependency)."""

from street_archive.application.dtos.search import SearchPage, SearchResult, StreetRecord

__all__ = ["SearchPage", "SearchResult", "StreetRecord"]
