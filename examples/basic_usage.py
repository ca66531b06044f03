#!/usr/bin/env python3
"""
Basic Usage Example - quote-app session

Drives a QuoteSession against canned Alpha Vantage payloads, so it runs
without an API key or network access. It shows how to:
- Submit a symbol and inspect the resulting state
- Render the quote table labels
- Build line, candlestick and Heikin-Ashi chart points
- Filter and sort the options chain

Run: python examples/basic_usage.py
"""

from urllib.parse import parse_qs, urlparse

import orjson

from quote_app.config.defaults import ApiParams, get_default_config
from quote_app.data.models import FilterSpec, TypeFilter
from quote_app.engine import QuoteSession
from quote_app.fetch.alpha_vantage import AlphaVantageClient
from quote_app.logging.config import configure_logging
from quote_app.utils import quote_rows

CANNED_RESPONSES = {
    "GLOBAL_QUOTE": {
        "Global Quote": {
            "01. symbol": "IBM", "05. price": "190.6400", "06. volume": "3459000",
            "07. latest trading day": "2024-01-03", "10. change percent": "0.9211%",
        }
    },
    "TIME_SERIES_DAILY_ADJUSTED": {
        "Time Series (Daily)": {
            "2024-01-03": {"1. open": "10", "2. high": "12", "3. low": "9", "4. close": "11"},
            "2024-01-02": {"1. open": "8", "2. high": "9", "3. low": "7", "4. close": "8"},
            "2024-01-01": {"1. open": "5", "2. high": "6", "3. low": "4", "4. close": "5"},
        }
    },
    "HISTORICAL_OPTIONS": {
        "data": [
            {"contractID": "IBM240621C00100000", "expiration": "2024-06-21", "strike": "100.00",
             "type": "call", "last": "91.20", "bid": "90.10", "ask": "92.00"},
            {"contractID": "IBM240621P00090000", "expiration": "2024-06-21", "strike": "90.00",
             "type": "put", "last": "0.05", "bid": "0.01", "ask": "0.08"},
            {"contractID": "IBM240719C00110000", "expiration": "2024-07-19", "strike": "110.00",
             "type": "call", "last": "81.00", "bid": "80.50", "ask": "82.10"},
        ]
    },
}


def canned_transport(url, timeout, headers):
    """Answer each request from CANNED_RESPONSES by function name."""
    function = parse_qs(urlparse(url).query)["function"][0]
    return orjson.dumps(CANNED_RESPONSES[function])


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("🚀 quote-app - Basic Usage Demo")
    print("=" * 60)

    client = AlphaVantageClient(ApiParams(api_key="demo"), transport=canned_transport)
    session = QuoteSession(client, get_default_config())

    print("1. Submitting IBM...")
    state = session.submit("ibm")
    print(f"   Phase: {state.phase.value}, request #{state.request_id}")
    print()

    print("2. Quote table:")
    for label, value in quote_rows(state.quote):
        print(f"   {label:<22} {value}")
    print()

    print("3. Chart points (oldest first):")
    for kind in ("line", "candlestick", "heikin-ashi"):
        print(f"   {kind}:")
        for point in session.chart_points(kind):
            print(f"     {point}")
    print()

    print("4. Options chain, calls only, strike descending:")
    session.set_filter(FilterSpec(type_filter=TypeFilter.CALLS))
    session.sort_by("strikePrice")
    for contract in session.option_view():
        print(f"   {contract.contract_id}  {contract.expiration}  strike {contract.strike_price}"
              f"  bid {contract.bid}  ask {contract.ask}")
    print(f"   Expirations: {', '.join(session.expirations())}")


if __name__ == "__main__":
    main()
