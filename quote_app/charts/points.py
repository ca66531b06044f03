"""Chart point shapes consumed by the front-end chart renderer"""

from collections.abc import Iterable
from typing import Union

from ..data.models import DailyBar, HeikinAshiBar

Bar = Union[DailyBar, HeikinAshiBar]

LINE_FIELDS = ("open", "high", "low", "close")


def to_candlestick_points(bars: Iterable[Bar]) -> list[dict]:
    """
    Candlestick points: [{time, open, high, low, close}], order kept.
    """
    return [
        {
            "time": bar.date,
            "open": bar.open,
            "high": bar.high,
            "low": bar.low,
            "close": bar.close,
        }
        for bar in bars
    ]


def to_line_points(bars: Iterable[Bar], field: str = "close") -> list[dict]:
    """
    Single-value points for line and area charts: [{time, value}].

    Raises:
        ValueError: If field is not one of open/high/low/close
    """
    if field not in LINE_FIELDS:
        raise ValueError(f"field must be one of {', '.join(LINE_FIELDS)}, got {field!r}")

    return [{"time": bar.date, "value": getattr(bar, field)} for bar in bars]


def chronological(bars: Iterable[DailyBar]) -> list[DailyBar]:
    """Bars sorted oldest first, as chart renderers require ascending time."""
    return sorted(bars, key=lambda b: b.date)
