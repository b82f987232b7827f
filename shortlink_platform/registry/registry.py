"""
Registry module for Shortlink Platform (in-memory implementation).

Responsibilities:
    - Own the short code -> record and URL -> short code maps
    - Generate unique short codes (retry on collision)
    - Dedupe by exact URL string
    - Count visits without lost updates

Design:
    - One `threading.Lock` guards both maps, so every insert/delete/increment
      is visible to readers either completely or not at all.
    - The lock is held only around map access and code draws. Response
      shaping and I/O happen outside.
    - The code generator is injected; tests pass a scripted generator to
      force collisions.
    - State lives for the lifetime of the process. A restart clears it.
"""

import logging
import threading
from typing import Dict, List, Optional, Tuple

from .base import BaseRegistry
from .record import UrlRecord, utcnow
from ..codes.strategies import CodeStrategy, get_strategy_from_config

log = logging.getLogger("shortlink.registry")


class CodeRegistry(BaseRegistry):
    def __init__(self, code_strategy: Optional[CodeStrategy] = None):
        """
        Initialize empty registry.

        Internal schema:
            self._by_code = { short_code: UrlRecord }
            self._by_url  = { original_url: short_code }

        Args:
            code_strategy (Optional[CodeStrategy]): zero-arg callable returning a
                candidate code. Defaults to the configured RandomStrategy.
        """
        self.code_strategy = code_strategy or get_strategy_from_config()
        self._by_code: Dict[str, UrlRecord] = {}
        self._by_url: Dict[str, str] = {}
        self._lock = threading.Lock()

    def _new_code(self) -> str:
        # Caller holds self._lock.
        while True:
            candidate = self.code_strategy()
            if candidate not in self._by_code:
                return candidate
            log.debug("Short code collision on %r, drawing again", candidate)

    def get_or_create(self, url: str) -> Tuple[UrlRecord, bool]:
        """
        Return the existing record for `url` or create one.

        Check-then-insert runs under the registry lock, so two concurrent
        callers with the same unseen URL produce exactly one record.
        """
        with self._lock:
            code = self._by_url.get(url)
            if code is not None:
                return self._by_code[code], False

            code = self._new_code()
            record = UrlRecord(original_url=url, short_code=code, created_at=utcnow())
            self._by_code[code] = record
            self._by_url[url] = code
        log.info("Created short code %s", code)
        return record, True

    def lookup(self, code: str) -> Optional[UrlRecord]:
        with self._lock:
            return self._by_code.get(code)

    def find_by_url(self, url: str) -> Optional[UrlRecord]:
        with self._lock:
            code = self._by_url.get(url)
            return self._by_code[code] if code is not None else None

    def record_visit(self, code: str) -> Optional[UrlRecord]:
        """
        Increment visit count for a given code.

        Returns:
            Optional[UrlRecord]: The updated snapshot, None if code not found.
        """
        with self._lock:
            record = self._by_code.get(code)
            if record is None:
                return None
            updated = record.visited()
            self._by_code[code] = updated
            return updated

    def list_all(self) -> List[UrlRecord]:
        """Records in insertion order."""
        with self._lock:
            return list(self._by_code.values())

    def delete(self, code: str) -> Optional[UrlRecord]:
        with self._lock:
            record = self._by_code.pop(code, None)
            if record is None:
                return None
            del self._by_url[record.original_url]
        log.info("Deleted short code %s", code)
        return record

    def count(self) -> int:
        with self._lock:
            return len(self._by_code)
