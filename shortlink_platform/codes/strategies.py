"""
Short-code generation strategies for shortlink_platform.

Provided strategies:
- RandomStrategy: fixed-length code drawn uniformly from the 64-char URL-safe
  alphabet [A-Za-z0-9_-] using the OS CSPRNG (`secrets`).

Collision math:
    64^8 ≈ 2.8e14 possible 8-char codes. With n stored records a single draw
    collides with probability n / 64^8, so even at 10M records a retry is
    needed roughly once per 28M creations. The registry still rechecks every
    candidate against existing keys and retries without a cap.

Configuration (via shortlink_platform.config.settings):
- CODE_LENGTH: default code length (8; clamped 4..32)
"""

import secrets
import string
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from shortlink_platform.config import settings

URL_SAFE_ALPHABET = string.ascii_letters + string.digits + "_-"

CodeStrategy = Callable[[], str]  # () -> candidate code


def _safe_len(length: Optional[int]) -> int:
    """Resolve desired code length from arg or config, clamped to [4, 32]."""
    L = int(length) if length is not None else int(getattr(settings, "CODE_LENGTH", 8))
    return max(4, min(32, L))


class BaseStrategy(ABC):
    """Abstract base for code generation strategies."""

    @abstractmethod
    def generate(self) -> str:  # pragma: no cover
        """Return one candidate short code. Uniqueness is the registry's job."""
        raise NotImplementedError

    def __call__(self) -> str:
        return self.generate()


@dataclass(frozen=True)
class RandomStrategy(BaseStrategy):
    """Unbiased random codes of a fixed length."""
    length: int = 8
    alphabet: str = URL_SAFE_ALPHABET

    def __post_init__(self):
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError("alphabet must not contain duplicate characters")
        if len(self.alphabet) < 2:
            raise ValueError("alphabet must contain at least two characters")

    def generate(self) -> str:
        # secrets.choice picks uniformly; no modulo bias
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))


def get_strategy_from_config(length: Optional[int] = None) -> BaseStrategy:
    """Build the default strategy using settings.CODE_LENGTH unless overridden."""
    return RandomStrategy(length=_safe_len(length))
