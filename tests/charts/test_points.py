"""Tests for chart renderer point shapes"""

import pytest

from quote_app.charts.heikin_ashi import compute_heikin_ashi
from quote_app.charts.points import chronological, to_candlestick_points, to_line_points


class TestPoints:
    """Candlestick and line point conversion"""

    def test_candlestick_points(self, newest_first_bars):
        points = to_candlestick_points(chronological(newest_first_bars))

        assert points[0] == {"time": "2024-01-01", "open": 5, "high": 6, "low": 4, "close": 5}
        assert [p["time"] for p in points] == ["2024-01-01", "2024-01-02", "2024-01-03"]

    def test_line_points_default_close(self, newest_first_bars):
        points = to_line_points(chronological(newest_first_bars))
        assert points == [
            {"time": "2024-01-01", "value": 5},
            {"time": "2024-01-02", "value": 8},
            {"time": "2024-01-03", "value": 11},
        ]

    def test_line_points_other_field(self, newest_first_bars):
        points = to_line_points(newest_first_bars, field="high")
        assert [p["value"] for p in points] == [12, 9, 6]

    def test_line_points_rejects_unknown_field(self, newest_first_bars):
        with pytest.raises(ValueError):
            to_line_points(newest_first_bars, field="volume")

    def test_heikin_ashi_candles_convert(self, newest_first_bars):
        points = to_candlestick_points(compute_heikin_ashi(newest_first_bars))
        assert points[-1] == {"time": "2024-01-03", "open": 6.5, "high": 12, "low": 6.5, "close": 10.5}

    def test_chronological_does_not_mutate(self, newest_first_bars):
        ordered = chronological(newest_first_bars)
        assert ordered[0].date == "2024-01-01"
        assert newest_first_bars[0].date == "2024-01-03"

    def test_empty(self):
        assert to_candlestick_points([]) == []
        assert to_line_points([]) == []
