"""
Global pytest fixtures for the Shortlink Platform test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide an isolated in-memory CodeRegistry for direct testing
    - Provide a LinkManager wired to the registry fixture
    - Provide a scripted code generator so tests can force specific codes
      and collisions

Why an app factory?
    Using `create_app()` ensures each test gets fresh in-memory state,
    eliminating cross-test flakiness.
"""

import itertools
from typing import Callable, Iterator, Optional

import pytest
from fastapi.testclient import TestClient

from main import create_app
from shortlink_platform.manager.link_manager import LinkManager
from shortlink_platform.registry.registry import CodeRegistry


def scripted_codes(*codes: str, then: Optional[Callable[[], str]] = None) -> Callable[[], str]:
    """
    Return a zero-arg generator yielding `codes` in order, then falling back
    to `then` (or a numbered sequence) once the script is exhausted.
    """
    scripted = iter(codes)
    fallback: Iterator[int] = itertools.count()

    def _next() -> str:
        try:
            return next(scripted)
        except StopIteration:
            if then is not None:
                return then()
            return f"gen{next(fallback):05d}"

    return _next


@pytest.fixture
def make_codes():
    return scripted_codes


@pytest.fixture
def registry() -> CodeRegistry:
    """Fresh in-memory registry with the default random strategy."""
    return CodeRegistry()


@pytest.fixture
def manager(registry: CodeRegistry) -> LinkManager:
    return LinkManager(registry=registry)


@pytest.fixture
def client() -> TestClient:
    """
    Provide a fresh TestClient with a new app instance.

    Notes:
        - Redirects are not followed so tests can inspect the 302 itself.
    """
    return TestClient(create_app(), follow_redirects=False)


@pytest.fixture
def make_client():
    """Build a TestClient around a given registry (or default) for tests that script codes."""
    def _make(registry=None, **kwargs) -> TestClient:
        kwargs.setdefault("follow_redirects", False)
        return TestClient(create_app(registry=registry), **kwargs)
    return _make
