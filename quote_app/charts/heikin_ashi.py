"""Heikin-Ashi candle transformation over a daily OHLC series"""

from collections.abc import Iterable, Mapping
from dataclasses import replace
from enum import Enum
from typing import Any, Optional, Union

from ..data.models import DailyBar, HeikinAshiBar
from ..data.parsers import parse_ohlc_fields
from ..data.validators import parse_price
from ..errors import EmptySeriesError, ParseError

SeriesInput = Union[Mapping[str, Any], Iterable[DailyBar]]


class SeedConvention(str, Enum):
    """Which bar anchors the Heikin-Ashi recurrence."""
    CHRONOLOGICAL = "chronological"   # oldest bar seeds, textbook definition
    FEED_ORDER = "feed_order"         # first bar iterated seeds, output reversed


def to_daily_bars(series: SeriesInput) -> list[DailyBar]:
    """
    Normalize a series into DailyBar objects, keeping iteration order.

    Args:
        series: Mapping of ISO date -> {open, high, low, close} (numbers or
            numeric strings), or an iterable of DailyBar

    Raises:
        ParseError: If any OHLC field is not a finite non-negative number,
            including on DailyBar entries built by hand
    """
    if isinstance(series, Mapping):
        return [parse_ohlc_fields(date, fields) for date, fields in series.items()]

    bars = []
    for i, bar in enumerate(series):
        if not isinstance(bar, DailyBar):
            raise ParseError(f"Series entry at index {i} is not a DailyBar", raw_value=bar)
        bars.append(_checked_bar(bar))
    return bars


def _checked_bar(bar: DailyBar) -> DailyBar:
    prices = {name: parse_price(getattr(bar, name), name, bar.date)
              for name in ("open", "high", "low", "close")}
    return replace(bar, **prices)


def heikin_ashi_step(bar: DailyBar, previous: Optional[HeikinAshiBar]) -> HeikinAshiBar:
    """
    Compute one Heikin-Ashi candle

    HA_Open  = (prev_HA_Open + prev_HA_Close) / 2, or Open for the seed bar
    HA_Close = (Open + High + Low + Close) / 4, or Close for the seed bar
    HA_High  = max(High, HA_Open, HA_Close)
    HA_Low   = min(Low, HA_Open, HA_Close)

    Args:
        bar: Source bar
        previous: Heikin-Ashi candle of the preceding bar (None for the seed)

    Returns:
        HeikinAshiBar dated like the source bar
    """
    if previous is None:
        ha_open = bar.open
        ha_close = bar.close
    else:
        ha_open = (previous.open + previous.close) / 2
        ha_close = (bar.open + bar.high + bar.low + bar.close) / 4

    return HeikinAshiBar(
        date=bar.date,
        open=ha_open,
        high=max(bar.high, ha_open, ha_close),
        low=min(bar.low, ha_open, ha_close),
        close=ha_close,
    )


def compute_heikin_ashi(
    series: SeriesInput,
    seed: SeedConvention = SeedConvention.CHRONOLOGICAL
) -> list[HeikinAshiBar]:
    """
    Convert a daily OHLC series into Heikin-Ashi candles, oldest first.

    With CHRONOLOGICAL seeding the bars are sorted by date before the
    recurrence runs, so the oldest bar is the seed. FEED_ORDER processes bars
    exactly as iterated and reverses the processed sequence for output; on a
    newest-first feed that makes the most recent day the seed.

    Args:
        series: Mapping of date -> OHLC fields, or an iterable of DailyBar
        seed: Seed convention

    Returns:
        One HeikinAshiBar per input bar

    Raises:
        ParseError: If any OHLC field is non-numeric
        EmptySeriesError: If the series has no entries
    """
    bars = to_daily_bars(series)
    if not bars:
        raise EmptySeriesError(data_type="daily_series")

    seed = SeedConvention(seed)
    if seed is SeedConvention.CHRONOLOGICAL:
        bars = sorted(bars, key=lambda b: b.date)

    candles: list[HeikinAshiBar] = []
    previous = None
    for bar in bars:
        previous = heikin_ashi_step(bar, previous)
        candles.append(previous)

    if seed is SeedConvention.FEED_ORDER:
        candles.reverse()

    return candles
