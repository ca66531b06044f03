"""HTTP proxy in front of the market data provider."""

from .app import create_app

__all__ = ["create_app"]
