from .strategies import RandomStrategy, get_strategy_from_config, URL_SAFE_ALPHABET

__all__ = ["RandomStrategy", "get_strategy_from_config", "URL_SAFE_ALPHABET"]
