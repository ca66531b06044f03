"""Base classes for market data providers."""

from abc import ABC, abstractmethod

from ..data.models import DailyBar, OptionContract, Quote
from ..logging.config import get_fetch_logger


class QuoteProvider(ABC):
    """Base class for market data providers."""

    def __init__(self, name: str):
        self.name = name
        self.logger = get_fetch_logger(f"quote.provider.{name}")

    @abstractmethod
    def fetch_quote(self, symbol: str) -> Quote:
        """
        Fetch the latest quote for a symbol.

        Raises:
            SymbolNotFoundError: If the provider has no quote for the symbol
            NetworkError: If the provider could not be reached
        """

    @abstractmethod
    def fetch_daily_series(self, symbol: str) -> list[DailyBar]:
        """
        Fetch daily bars for a symbol in provider order (newest first).

        Raises:
            SymbolNotFoundError: If the provider has no series for the symbol
            NetworkError: If the provider could not be reached
        """

    @abstractmethod
    def fetch_options_chain(self, symbol: str) -> list[OptionContract]:
        """Fetch the listed option contracts for a symbol."""
