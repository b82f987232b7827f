"""
Main API module for Shortlink Platform.

Responsibilities:
    - Expose REST endpoints for shortening URLs, redirecting, analytics,
      listing and deleting short links
    - Map the error taxonomy (validation / not found / internal) onto
      consistent `{error, message}` JSON payloads
    - Request logging

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - In-memory CodeRegistry by default; a registry can be injected.
    - LinkManager validates input and shapes payloads; the registry owns
      uniqueness, dedupe and visit counting.

LLM Prompt Example:
    "Explain how to structure a FastAPI service with an application factory,
    injected dependencies, and a clean separation between API and business logic."
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortlink_platform.config import settings
from shortlink_platform.errors import ShortlinkError
from shortlink_platform.manager.link_manager import LinkManager
from shortlink_platform.middleware import LoggingMiddleware
from shortlink_platform.registry.base import BaseRegistry
from shortlink_platform.registry.registry_factory import get_registry
from shortlink_platform.schemas import (
    AnalyticsResponse,
    DeleteResponse,
    ErrorResponse,
    HealthResponse,
    ShortenRequest,
    ShortenResponse,
    UrlListResponse,
)


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=error, message=message).model_dump())


def create_app(registry: Optional[BaseRegistry] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        registry (Optional[BaseRegistry]): Registry to serve from. A fresh one
            is built from configuration when omitted.

    Returns:
        FastAPI: A fully configured application instance with its own state.

    Why an app factory?
        - Enables per-test isolation in pytest.
        - Lets tests inject a registry with a scripted code generator.
    """
    app = FastAPI(
        title="Shortlink Platform",
        description="URL shortener with deduplication and visit counting (in-memory, volatile)",
        docs_url="/docs",
    )
    log = logging.getLogger("shortlink")

    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests)
    # ----------------------------------------------------------------
    registry = registry if registry is not None else get_registry()
    link_manager = LinkManager(registry=registry)
    app.state.registry = registry
    app.state.link_manager = link_manager
    log.info("Shortlink registry: %s (records are kept in memory only)", type(registry).__name__)

    app.add_middleware(LoggingMiddleware)

    def _base_url(request: Request) -> str:
        return settings.PUBLIC_BASE_URL or str(request.base_url)

    # ----------------------------------------------------------------
    # Error handlers
    # ----------------------------------------------------------------
    @app.exception_handler(ShortlinkError)
    async def shortlink_error_handler(request: Request, exc: ShortlinkError):
        return _error(exc.status_code, exc.error, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Body missing, not JSON, or not an object
        return _error(400, "URL is required", "Please provide a valid URL to shorten")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return _error(404, "Route not found", "The requested endpoint does not exist")
        return _error(exc.status_code, "Request failed", str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "Internal server error", "Something went wrong")

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/health", response_model=HealthResponse)
    def health():
        return link_manager.health()

    @app.post("/api/shorten", response_model=ShortenResponse)
    def shorten(req: ShortenRequest, request: Request, response: Response):
        """
        Shorten a URL. 201 when a new record is created, 200 when the exact
        URL string was already known (same code returned).
        """
        payload, is_new = link_manager.shorten(req.url, _base_url(request))
        response.status_code = 201 if is_new else 200
        return payload

    @app.get("/api/analytics/{short_code}", response_model=AnalyticsResponse)
    def analytics(short_code: str, request: Request):
        return link_manager.analytics(short_code, _base_url(request))

    @app.get("/api/urls", response_model=UrlListResponse)
    def list_urls(request: Request):
        return link_manager.list_urls(_base_url(request))

    @app.delete("/api/urls/{short_code}", response_model=DeleteResponse)
    def delete_url(short_code: str):
        return link_manager.delete(short_code)

    # Registered last so it never shadows the fixed routes above.
    @app.get("/{short_code}")
    def redirect_short_code(short_code: str) -> Response:
        """Count the visit, then 302 to the original URL."""
        record = link_manager.visit(short_code)
        return RedirectResponse(url=record.original_url, status_code=302)

    return app


# `uvicorn main:app` and `from main import app` continue to work.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
