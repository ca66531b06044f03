"""
Data ingestion and normalization module.

Handles Alpha Vantage payload parsing and the canonical quote, daily bar and
option contract records the rest of the package works with.
"""
