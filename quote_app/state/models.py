"""
Fetch lifecycle data models.

A single immutable ViewState replaces the separate loading, error, data,
sort and filter flags of a quote screen. Reducers in state.machine return
new ViewState values instead of mutating.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..data.models import (
    DailyBar,
    FilterSpec,
    HeikinAshiBar,
    OptionContract,
    Quote,
    SortSpec,
)


class FetchPhase(str, Enum):
    """Lifecycle phase of the current symbol fetch."""
    IDLE = "idle"
    FETCHING = "fetching"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult:
    """Everything a completed fetch produced."""
    quote: Quote
    daily_bars: tuple[DailyBar, ...] = ()
    heikin_ashi: tuple[HeikinAshiBar, ...] = ()
    contracts: tuple[OptionContract, ...] = ()
    options_error: Optional[str] = None


@dataclass(frozen=True)
class ViewState:
    """Complete state of one quote screen."""

    phase: FetchPhase = FetchPhase.IDLE
    symbol: Optional[str] = None

    # Incremented by every fetch; results tagged with an older id are stale
    request_id: int = 0

    quote: Optional[Quote] = None
    daily_bars: tuple[DailyBar, ...] = ()
    heikin_ashi: tuple[HeikinAshiBar, ...] = ()
    contracts: tuple[OptionContract, ...] = ()
    error: Optional[str] = None

    # Set when the options chain failed but quote and series loaded
    options_error: Optional[str] = None

    filter_spec: FilterSpec = field(default_factory=FilterSpec)
    sort_spec: SortSpec = field(default_factory=SortSpec)

    @property
    def is_loading(self) -> bool:
        """True while a fetch is in flight; the submit control stays disabled."""
        return self.phase is FetchPhase.FETCHING

    @property
    def has_chart(self) -> bool:
        return bool(self.daily_bars)
