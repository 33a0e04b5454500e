"""Street archive search service."""
