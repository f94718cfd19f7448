"""Input file loading module."""

from .loaders import load_token_configs, load_token_prices

__all__ = ["load_token_configs", "load_token_prices"]
