"""Shared utilities: sanitization."""

from street_archive.shared.utils.sanitization import InputSanitizer

__all__ = ["InputSanitizer"]
