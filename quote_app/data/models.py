"""
Canonical data models for quotes, daily price series and option chains.

This module defines immutable data structures that represent feed data after
it has been validated at the provider boundary, plus the transient sort and
filter settings used by the option table.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class DailyBar:
    """One trading day of OHLC data keyed by ISO date."""
    date: str          # YYYY-MM-DD, sorts lexically
    open: float        # Opening price
    high: float        # High price
    low: float         # Low price
    close: float       # Closing price
    volume: Optional[float] = None


@dataclass(frozen=True)
class HeikinAshiBar:
    """Smoothed candle derived from a DailyBar."""
    date: str
    open: float
    high: float
    low: float
    close: float


class ContractType(str, Enum):
    """Option contract type."""
    CALL = "CALL"
    PUT = "PUT"


class TypeFilter(str, Enum):
    """Contract type filter for the option table."""
    ALL = "ALL"
    CALLS = "CALLS"
    PUTS = "PUTS"


class SortDirection(str, Enum):
    """Sort direction for the option table."""
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class OptionContract:
    """
    One listed option contract.

    Value fields hold the text received from the feed. Numeric parsing is
    deferred to whoever needs it, so a missing field stays None rather than 0.
    """
    symbol: str
    type: ContractType
    expiration: Optional[str] = None
    strike_price: Optional[str] = None
    last_price: Optional[str] = None
    bid: Optional[str] = None
    ask: Optional[str] = None
    volume: Optional[str] = None
    open_interest: Optional[str] = None
    delta: Optional[str] = None
    gamma: Optional[str] = None
    theta: Optional[str] = None
    vega: Optional[str] = None
    contract_id: Optional[str] = None

    def to_dict(self) -> dict[str, Optional[str]]:
        """Plain dictionary with the contract type as its string value."""
        return {
            "symbol": self.symbol,
            "type": self.type.value,
            "expiration": self.expiration,
            "strike_price": self.strike_price,
            "last_price": self.last_price,
            "bid": self.bid,
            "ask": self.ask,
            "volume": self.volume,
            "open_interest": self.open_interest,
            "delta": self.delta,
            "gamma": self.gamma,
            "theta": self.theta,
            "vega": self.vega,
            "contract_id": self.contract_id,
        }


@dataclass(frozen=True)
class SortSpec:
    """Option table sort key and direction."""
    key: str = "strike_price"
    direction: SortDirection = SortDirection.ASCENDING


@dataclass(frozen=True)
class FilterSpec:
    """Option table filters. An unset expiration means no date filtering."""
    type_filter: TypeFilter = TypeFilter.ALL
    expiration: Optional[str] = None


@dataclass(frozen=True)
class Quote:
    """Latest quote for a symbol, fields kept in feed order."""
    symbol: str
    fields: dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> Optional[str]:
        """Look up a field by its bare name, ignoring the feed's numeric prefix."""
        for key, value in self.fields.items():
            if key == name or key.split(". ", 1)[-1] == name:
                return value
        return None

    @property
    def price(self) -> Optional[str]:
        return self.get("price")

    @property
    def change_percent(self) -> Optional[str]:
        return self.get("change percent")
