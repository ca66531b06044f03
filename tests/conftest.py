"""Pytest configuration and shared fixtures."""

from typing import Any, Dict, List
from urllib.parse import parse_qs, urlparse

import orjson
import pytest

from quote_app.data.models import ContractType, DailyBar, OptionContract


class FakeTransport:
    """Transport double keyed by Alpha Vantage function name."""

    def __init__(self, responses: Dict[str, Any]):
        self.responses = responses
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, url: str, timeout: float, headers: Dict[str, str]) -> bytes:
        query = {k: v[0] for k, v in parse_qs(urlparse(url).query).items()}
        self.calls.append({"url": url, "query": query, "timeout": timeout, "headers": headers})

        response = self.responses[query["function"]]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, bytes):
            return response
        return orjson.dumps(response)

    @property
    def functions(self) -> List[str]:
        return [call["query"]["function"] for call in self.calls]


@pytest.fixture
def global_quote_payload() -> Dict[str, Any]:
    """GLOBAL_QUOTE response for IBM."""
    return {
        "Global Quote": {
            "01. symbol": "IBM",
            "02. open": "189.0000",
            "03. high": "191.2000",
            "04. low": "188.5000",
            "05. price": "190.6400",
            "06. volume": "3459000",
            "07. latest trading day": "2024-01-03",
            "08. previous close": "188.9000",
            "09. change": "1.7400",
            "10. change percent": "0.9211%",
        }
    }


@pytest.fixture
def daily_series_payload() -> Dict[str, Any]:
    """TIME_SERIES_DAILY response, newest first as the provider sends it."""
    return {
        "Meta Data": {
            "1. Information": "Daily Prices (open, high, low, close) and Volumes",
            "2. Symbol": "IBM",
        },
        "Time Series (Daily)": {
            "2024-01-03": {"1. open": "10", "2. high": "12", "3. low": "9", "4. close": "11", "5. volume": "1500"},
            "2024-01-02": {"1. open": "8", "2. high": "9", "3. low": "7", "4. close": "8", "5. volume": "1200"},
            "2024-01-01": {"1. open": "5", "2. high": "6", "3. low": "4", "4. close": "5", "5. volume": "1000"},
        },
    }


@pytest.fixture
def options_payload() -> Dict[str, Any]:
    """HISTORICAL_OPTIONS response."""
    return {
        "endpoint": "Historical Options",
        "message": "success",
        "data": [
            {"contractID": "IBM240621C00100000", "symbol": "IBM", "expiration": "2024-06-21",
             "strike": "100.00", "type": "call", "last": "91.20", "bid": "90.10", "ask": "92.00",
             "volume": "4", "open_interest": "120", "delta": "0.99", "gamma": "0.0001",
             "theta": "-0.01", "vega": "0.02"},
            {"contractID": "IBM240621P00090000", "symbol": "IBM", "expiration": "2024-06-21",
             "strike": "90.00", "type": "put", "last": "0.05", "bid": "0.01", "ask": "0.08",
             "volume": "10", "open_interest": "300"},
            {"contractID": "IBM240719C00110000", "symbol": "IBM", "expiration": "2024-07-19",
             "strike": "110.00", "type": "call", "last": "81.00", "bid": "80.50", "ask": "82.10",
             "volume": "0", "open_interest": "15"},
        ],
    }


@pytest.fixture
def make_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture
def newest_first_bars() -> List[DailyBar]:
    """Three daily bars in feed order (newest first)."""
    return [
        DailyBar(date="2024-01-03", open=10, high=12, low=9, close=11),
        DailyBar(date="2024-01-02", open=8, high=9, low=7, close=8),
        DailyBar(date="2024-01-01", open=5, high=6, low=4, close=5),
    ]


@pytest.fixture
def sample_contracts() -> List[OptionContract]:
    """Option contracts in no particular order."""
    return [
        OptionContract(symbol="IBM", type=ContractType.CALL, expiration="2024-06-21",
                       strike_price="100", last_price="91.2", bid="90.1", ask="92"),
        OptionContract(symbol="IBM", type=ContractType.PUT, expiration="2024-06-21",
                       strike_price="90", last_price="0.05", bid="0.01", ask="0.08"),
        OptionContract(symbol="IBM", type=ContractType.CALL, expiration="2024-07-19",
                       strike_price="110", last_price="81", bid="80.5", ask="82.1"),
    ]
