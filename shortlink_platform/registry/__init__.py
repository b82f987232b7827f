from .record import UrlRecord
from .base import BaseRegistry
from .registry import CodeRegistry

__all__ = ["UrlRecord", "BaseRegistry", "CodeRegistry"]
