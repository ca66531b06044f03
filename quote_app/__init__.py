"""
Quote App - Stock Quote, Chart Series and Options Chain Engine

Fetches quotes and daily price history from Alpha Vantage, derives
Heikin-Ashi candles for charting, and projects options chains through
type, expiration and sort controls.
"""

__version__ = "0.1.0"
__author__ = "Quote App Team"
