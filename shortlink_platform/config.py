"""
Runtime configuration for Shortlink Platform
============================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else (the registry factory is the one
exception: it re-reads the backend lazily so tests can flip it).

Storage
-------
- SHORTLINK_STORAGE_BACKEND : "memory" (default, and the only backend); read by
                              registry_factory.get_registry at call time

Short codes
-----------
- SHORTLINK_CODE_LENGTH     : int length; default 8; clamped to [4, 32]

Web
---
- SHORTLINK_PUBLIC_BASE_URL : optional base for short URLs, e.g. "https://sho.rt"
                              (default: scheme + host of the incoming request)
- SHORTLINK_LOG_LEVEL       : logging level name (default "INFO")
- HOST / PORT               : bind address when running `python main.py`
"""

import os


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


class _Settings:
    # -------- Short-code generation --------
    _len_raw = _get_int("SHORTLINK_CODE_LENGTH", 8)
    CODE_LENGTH: int = max(4, min(32, _len_raw))

    # -------- Web --------
    PUBLIC_BASE_URL: str = os.getenv("SHORTLINK_PUBLIC_BASE_URL", "").strip().rstrip("/")
    LOG_LEVEL: str = os.getenv("SHORTLINK_LOG_LEVEL", "INFO").strip().upper()
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _get_int("PORT", 3000)


settings = _Settings()
