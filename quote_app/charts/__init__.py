"""Chart series transforms: Heikin-Ashi candles and renderer point shapes"""

from .heikin_ashi import SeedConvention, compute_heikin_ashi
from .points import chronological, to_candlestick_points, to_line_points

__all__ = [
    "SeedConvention",
    "compute_heikin_ashi",
    "chronological",
    "to_candlestick_points",
    "to_line_points",
]
