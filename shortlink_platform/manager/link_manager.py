"""
LinkManager module for Shortlink Platform.

Responsibilities:
    - Validate submitted URLs before the registry is touched
    - Orchestrate registry calls (dedupe/create, lookup, visit, delete)
    - Translate registry "not found" (None) into NotFoundError
    - Shape every payload with short code, short URL, visit count, createdAt

Design notes:
    - No domain rules live here; uniqueness, dedupe and counting belong to
      the registry.
    - The short URL base is passed in by the caller (derived from the
      request) so the manager stays transport-agnostic.
    - Timestamps use ISO-8601 UTC with milliseconds and a trailing "Z".
"""

from datetime import datetime
from typing import Any, Tuple

from ..errors import NotFoundError, ValidationError
from ..registry.base import BaseRegistry
from ..registry.record import UrlRecord, utcnow
from ..schemas import (
    AnalyticsResponse,
    DeleteResponse,
    HealthResponse,
    ShortenResponse,
    UrlEntry,
    UrlListResponse,
)
from ..validation import is_valid_url


def format_timestamp(dt: datetime) -> str:
    """Render a UTC datetime as e.g. '2024-01-01T12:00:00.000Z'."""
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_short_url(base_url: str, code: str) -> str:
    return f"{base_url.rstrip('/')}/{code}"


class LinkManager:
    """
    Coordinates request validation and registry calls for the HTTP layer.

    LLM Prompt Example:
        "Show how a thin service layer keeps FastAPI routes free of domain
        logic while translating storage results into API payloads."
    """

    def __init__(self, registry: BaseRegistry):
        self.registry = registry

    # ---------------------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------------------
    def _entry(self, record: UrlRecord, base_url: str) -> UrlEntry:
        return UrlEntry(
            short_code=record.short_code,
            original_url=record.original_url,
            short_url=build_short_url(base_url, record.short_code),
            visit_count=record.visit_count,
            created_at=format_timestamp(record.created_at),
        )

    def _validate_url(self, url: Any) -> str:
        """
        Raises:
            ValidationError: If the URL is missing, empty or not http(s).
        """
        if url is None or url == "":
            raise ValidationError("URL is required", "Please provide a valid URL to shorten")
        if not is_valid_url(url):
            raise ValidationError("Invalid URL", "Please provide a valid HTTP or HTTPS URL")
        return url

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------
    def shorten(self, url: Any, base_url: str) -> Tuple[ShortenResponse, bool]:
        """
        Return the short link for `url`, creating it on first sight.

        Returns:
            Tuple[ShortenResponse, bool]: payload and whether the record is new.

        Raises:
            ValidationError: On missing/invalid URL (registry untouched).
        """
        url = self._validate_url(url)
        record, is_new = self.registry.get_or_create(url)
        entry = self._entry(record, base_url)
        message = "URL shortened successfully" if is_new else "URL already shortened"
        return ShortenResponse(message=message, **entry.model_dump()), is_new

    def visit(self, code: str) -> UrlRecord:
        """Count a visit and return the record to redirect to."""
        record = self.registry.record_visit(code)
        if record is None:
            raise NotFoundError()
        return record

    def analytics(self, code: str, base_url: str) -> AnalyticsResponse:
        record = self.registry.lookup(code)
        if record is None:
            raise NotFoundError()
        entry = self._entry(record, base_url)
        return AnalyticsResponse(last_accessed=format_timestamp(utcnow()), **entry.model_dump())

    def list_urls(self, base_url: str) -> UrlListResponse:
        urls = [self._entry(record, base_url) for record in self.registry.list_all()]
        return UrlListResponse(total_urls=len(urls), urls=urls)

    def delete(self, code: str) -> DeleteResponse:
        record = self.registry.delete(code)
        if record is None:
            raise NotFoundError()
        return DeleteResponse(message="Short URL deleted successfully", deleted_url=record.original_url)

    def health(self) -> HealthResponse:
        return HealthResponse(timestamp=format_timestamp(utcnow()), total_urls=self.registry.count())
