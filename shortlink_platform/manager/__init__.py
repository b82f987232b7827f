from .link_manager import LinkManager

__all__ = ["LinkManager"]
