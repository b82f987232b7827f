"""
UrlRecord: the stored tuple of original URL, short code, creation time and
visit counter.

Records are frozen. The registry swaps in a new instance on every visit, so
any record handed to a caller is a consistent snapshot.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class UrlRecord:
    original_url: str
    short_code: str
    created_at: datetime
    visit_count: int = 0

    def visited(self) -> "UrlRecord":
        """Return a copy with visit_count advanced by one."""
        return replace(self, visit_count=self.visit_count + 1)
