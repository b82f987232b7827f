"""
Base registry interface for Shortlink Platform.

Purpose:
    Define a small, stable contract for the URL <-> short code registry so the
    manager and routes never touch the underlying maps directly.

Contract:
    - "Not found" is reported as None, never raised.
    - Every mutating call keeps both lookup directions consistent.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover` so coverage tools don't
    penalize the project for un-runnable abstract declarations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .record import UrlRecord


class BaseRegistry(ABC):
    """Abstract base class for registry backends."""

    @abstractmethod  # pragma: no cover
    def get_or_create(self, url: str) -> Tuple[UrlRecord, bool]:
        """
        Return the record for `url`, creating it if missing.

        Returns:
            Tuple[UrlRecord, bool]: The record and True when it was just created.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def lookup(self, code: str) -> Optional[UrlRecord]:
        """Return the record stored under `code`, or None."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def find_by_url(self, url: str) -> Optional[UrlRecord]:
        """Return the record whose original URL is exactly `url`, or None."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def record_visit(self, code: str) -> Optional[UrlRecord]:
        """
        Increment the visit counter for `code` by one.

        Returns:
            Optional[UrlRecord]: The updated record, or None if the code is unknown.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def list_all(self) -> List[UrlRecord]:
        """Return every stored record."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def delete(self, code: str) -> Optional[UrlRecord]:
        """Remove `code` from both directions. Returns the removed record or None."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def count(self) -> int:
        """Number of stored records."""
        raise NotImplementedError
