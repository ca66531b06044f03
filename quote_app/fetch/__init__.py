"""Market data providers."""

from .alpha_vantage import AlphaVantageClient
from .base import QuoteProvider

__all__ = ["AlphaVantageClient", "QuoteProvider"]
