"""
shortlink_platform package initializer.
"""

from . import codes
from . import manager
from . import registry

__all__ = ["codes", "manager", "registry"]
