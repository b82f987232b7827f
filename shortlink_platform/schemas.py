"""
Pydantic schemas for request/response payloads.

Field names are snake_case in Python and camelCase on the wire
(`alias_generator=to_camel`), keeping the public JSON shape stable.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ShortenRequest(BaseModel):
    """Request payload for POST /api/shorten. `url` is checked by the manager."""
    url: Optional[Any] = None


class ErrorResponse(BaseModel):
    error: str
    message: str


class UrlEntry(_CamelModel):
    short_code: str
    original_url: str
    short_url: str
    visit_count: int
    created_at: str


class ShortenResponse(_CamelModel):
    success: bool = True
    short_url: str
    original_url: str
    short_code: str
    visit_count: int
    created_at: str
    message: str


class AnalyticsResponse(_CamelModel):
    success: bool = True
    short_code: str
    original_url: str
    short_url: str
    visit_count: int
    created_at: str
    last_accessed: str


class UrlListResponse(_CamelModel):
    success: bool = True
    total_urls: int
    urls: List[UrlEntry]


class DeleteResponse(_CamelModel):
    success: bool = True
    message: str
    deleted_url: str


class HealthResponse(_CamelModel):
    status: str = "OK"
    timestamp: str
    total_urls: int
