"""
Quote session coordinator.

Drives one quote screen through a fetch: quote first, then the daily series
and the options chain, then the Heikin-Ashi transform. Each step feeds the
fetch lifecycle reducers so the caller only ever sees a ViewState.
"""

from typing import Optional

import structlog

from .charts.heikin_ashi import SeedConvention, compute_heikin_ashi
from .charts.points import chronological, to_candlestick_points, to_line_points
from .config.defaults import AppConfig, get_default_config
from .data.models import (
    FilterSpec,
    HeikinAshiBar,
    OptionContract,
    SortDirection,
    SortSpec,
)
from .data.validators import normalize_symbol
from .errors import EmptySeriesError, FetchError, InvalidSymbolError, ParseError, QuoteAppError
from .fetch.base import QuoteProvider
from .options.projector import distinct_expirations, project
from .state.machine import (
    begin_fetch,
    complete_fetch,
    fail_fetch,
    toggle_sort,
    with_filter,
)
from .state.models import FetchResult, ViewState

logger = structlog.get_logger(__name__)

CHART_KINDS = ("line", "candlestick", "heikin-ashi")


class QuoteSession:
    """
    Coordinator for a single quote screen.

    Pipeline:
    Symbol → Quote → Daily Series (+ Options Chain) → Heikin-Ashi → ViewState
    """

    def __init__(self, provider: QuoteProvider, config: Optional[AppConfig] = None) -> None:
        self.provider = provider
        self.config = config or get_default_config()
        self.seed = SeedConvention(self.config.series.seed_convention)
        self.state = self.initial_state()

    def initial_state(self) -> ViewState:
        """Idle state with the configured default sort."""
        return ViewState(
            sort_spec=SortSpec(
                key=self.config.options.default_sort_key,
                direction=SortDirection(self.config.options.default_direction),
            )
        )

    def submit(self, symbol: str) -> ViewState:
        """
        Fetch everything for a symbol and return the resulting state.

        A blank symbol fails immediately without contacting the provider.
        Provider and data errors end in FAILED with a readable message,
        except for the options chain: when only that fails the fetch still
        loads and the message is kept in options_error.
        """
        try:
            symbol = normalize_symbol(symbol)
        except InvalidSymbolError as e:
            self.state = begin_fetch(self.state, str(symbol or "").strip().upper())
            self.state = fail_fetch(self.state, self.state.request_id, str(e))
            return self.state

        self.state = begin_fetch(self.state, symbol)
        request_id = self.state.request_id

        try:
            result = self._fetch(symbol)
        except QuoteAppError as e:
            logger.warning("Fetch failed", symbol=symbol, request_id=request_id,
                           error_type=type(e).__name__, error=str(e))
            self.state = fail_fetch(self.state, request_id, str(e))
            return self.state

        self.state = complete_fetch(self.state, request_id, result)
        return self.state

    def _fetch(self, symbol: str) -> FetchResult:
        quote = self.provider.fetch_quote(symbol)

        # History and options are only requested once the quote resolves
        daily_bars = self.provider.fetch_daily_series(symbol)
        heikin_ashi = self._heikin_ashi(symbol, daily_bars)

        contracts: list[OptionContract] = []
        options_error = None
        if self.config.options.fetch_options:
            try:
                contracts = self.provider.fetch_options_chain(symbol)
            except (FetchError, ParseError) as e:
                # Quote and chart stay usable without the chain
                logger.warning("Options chain unavailable", symbol=symbol,
                               error_type=type(e).__name__, error=str(e))
                options_error = str(e)

        return FetchResult(
            quote=quote,
            daily_bars=tuple(daily_bars),
            heikin_ashi=tuple(heikin_ashi),
            contracts=tuple(contracts),
            options_error=options_error,
        )

    def _heikin_ashi(self, symbol: str, daily_bars) -> list[HeikinAshiBar]:
        try:
            return compute_heikin_ashi(daily_bars, seed=self.seed)
        except EmptySeriesError:
            logger.info("Empty daily series, no chart to render", symbol=symbol)
            return []

    def option_view(self, state: Optional[ViewState] = None) -> list[OptionContract]:
        """Filtered and sorted option contracts for the table."""
        state = state or self.state
        return project(state.contracts, state.filter_spec, state.sort_spec)

    def expirations(self, state: Optional[ViewState] = None) -> list[str]:
        """Expiration dates for the filter selector."""
        state = state or self.state
        return distinct_expirations(state.contracts)

    def chart_points(self, kind: str = "candlestick", state: Optional[ViewState] = None) -> list[dict]:
        """
        Chart renderer input for the loaded series, oldest first.

        Raises:
            ValueError: If kind is not line, candlestick or heikin-ashi
        """
        state = state or self.state

        if kind == "line":
            return to_line_points(chronological(state.daily_bars))
        if kind == "candlestick":
            return to_candlestick_points(chronological(state.daily_bars))
        if kind == "heikin-ashi":
            return to_candlestick_points(state.heikin_ashi)

        raise ValueError(f"kind must be one of {', '.join(CHART_KINDS)}, got {kind!r}")

    def set_filter(self, filter_spec: FilterSpec) -> ViewState:
        """Apply new option table filters to the current state."""
        self.state = with_filter(self.state, filter_spec)
        return self.state

    def sort_by(self, key: str) -> ViewState:
        """Sort the option table by a column, toggling direction on repeats."""
        self.state = toggle_sort(self.state, key)
        return self.state
