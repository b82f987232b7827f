"""
Registry factory – pick the registry backend from config
========================================================

Centralizes backend selection so the app factory stays ignorant of where
records live. Reads the environment at call time to avoid stale values in
tests.

Environment variables
---------------------
- SHORTLINK_STORAGE_BACKEND: "memory" (default; the only supported backend)
"""

import logging
import os
from typing import Optional

from shortlink_platform.codes.strategies import CodeStrategy
from shortlink_platform.registry.base import BaseRegistry
from shortlink_platform.registry.registry import CodeRegistry

log = logging.getLogger("shortlink.registry")


def get_registry(backend: Optional[str] = None, code_strategy: Optional[CodeStrategy] = None) -> BaseRegistry:
    """
    Return a registry instance based on configuration.

    Parameters
    ----------
    backend : str, optional
        "memory" (default). If omitted, reads SHORTLINK_STORAGE_BACKEND.
    code_strategy : callable, optional
        Passed through to the registry (used by tests to script codes).

    Raises
    ------
    ValueError
        If the backend name is not recognised.
    """
    be = (backend or os.getenv("SHORTLINK_STORAGE_BACKEND", "memory")).strip().lower()
    log.debug("Selected registry backend: %r", be)

    if be == "memory":
        return CodeRegistry(code_strategy=code_strategy)

    raise ValueError(f"Unknown storage backend: {be!r}")
