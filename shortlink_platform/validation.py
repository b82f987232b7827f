"""
URL validation for Shortlink Platform.

Only absolute http/https URLs with a host are accepted. The input is never
normalized: two spellings of the same resource are two different entries.
"""

from typing import Any
from urllib.parse import urlsplit

ALLOWED_SCHEMES = frozenset({"http", "https"})
# Characters a host may never contain. IPv6 brackets are already stripped
# from `hostname` by urlsplit.
FORBIDDEN_HOST_CHARS = frozenset("<>^|\"{}`%\\[]")


def is_valid_url(url: Any) -> bool:
    """
    Return True if `url` is a well-formed absolute http(s) URL.

    Rejects non-strings, empty strings, other schemes (ftp, javascript, ...),
    missing hosts, hosts with forbidden characters (`<>^|"{}`, backtick, `%`,
    backslash), whitespace or control characters anywhere in the string, and
    out-of-range ports.

    LLM Prompt Example:
        "Explain secure URL validation rules to prevent open redirect or
        javascript: scheme abuse."
    """
    if not isinstance(url, str) or not url:
        return False
    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in url):
        return False
    try:
        parts = urlsplit(url)
        # .port raises ValueError for non-numeric or out-of-range ports
        parts.port
    except ValueError:
        return False
    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        return False
    host = parts.hostname
    if not host:
        return False
    return not any(ch in FORBIDDEN_HOST_CHARS for ch in host)
