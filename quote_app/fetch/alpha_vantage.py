"""Alpha Vantage market data client over HTTP GET."""

import socket
from collections.abc import Callable, Mapping
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode, urlparse
from urllib.request import Request, urlopen

from ..config.defaults import ApiParams, SeriesParams
from ..data.models import DailyBar, OptionContract, Quote
from ..data.parsers import (
    find_time_series,
    parse_daily_series,
    parse_global_quote,
    parse_json_payload,
    parse_options_chain,
)
from ..data.validators import normalize_symbol
from ..errors import ApiResponseError, NetworkError, SymbolNotFoundError
from .base import QuoteProvider

# (url, timeout_seconds, headers) -> response body
Transport = Callable[[str, float, dict[str, str]], bytes]

GLOBAL_QUOTE = "GLOBAL_QUOTE"
TIME_SERIES_DAILY = "TIME_SERIES_DAILY"
TIME_SERIES_DAILY_ADJUSTED = "TIME_SERIES_DAILY_ADJUSTED"
HISTORICAL_OPTIONS = "HISTORICAL_OPTIONS"

# Keys Alpha Vantage uses for throttling and premium-endpoint notices
NOTICE_KEYS = ("Note", "Information")


def urlopen_transport(url: str, timeout: float, headers: dict[str, str]) -> bytes:
    """Default transport: a blocking urllib GET returning the raw body."""
    req = Request(url, headers=headers, method="GET")
    with urlopen(req, timeout=timeout) as response:
        return response.read()


class AlphaVantageClient(QuoteProvider):
    """Alpha Vantage implementation of QuoteProvider."""

    def __init__(
        self,
        api: Optional[ApiParams] = None,
        series: Optional[SeriesParams] = None,
        transport: Optional[Transport] = None
    ):
        super().__init__("alpha_vantage")
        self.api = api or ApiParams()
        self.series = series or SeriesParams()
        self.transport = transport or urlopen_transport

        parsed = urlparse(self.api.base_url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"Invalid base URL: {self.api.base_url}")

        if not self.api.api_key:
            self.logger.warning("No Alpha Vantage API key configured")

    def build_url(self, function: str, symbol: str, **params: str) -> str:
        """Query URL for an Alpha Vantage function."""
        query = {"function": function, "symbol": symbol, **params, "apikey": self.api.api_key}
        return f"{self.api.base_url}?{urlencode(query)}"

    def fetch_quote(self, symbol: str) -> Quote:
        symbol = normalize_symbol(symbol)
        payload = self._request(GLOBAL_QUOTE, symbol)

        quote = parse_global_quote(payload)
        if quote is None:
            raise SymbolNotFoundError("No quote data found for this symbol", symbol=symbol)

        self.logger.info("Quote fetched", symbol=symbol, price=quote.price)
        return quote

    def fetch_daily_series(self, symbol: str) -> list[DailyBar]:
        """
        Fetch the daily series, falling back from the adjusted endpoint to the
        unadjusted one when the adjusted response carries no time series.
        """
        symbol = normalize_symbol(symbol)
        functions = [TIME_SERIES_DAILY]
        if self.series.prefer_adjusted:
            functions.insert(0, TIME_SERIES_DAILY_ADJUSTED)

        for i, function in enumerate(functions):
            is_last = i == len(functions) - 1
            payload = self._request(
                function, symbol,
                check_errors=is_last,
                outputsize=self.series.output_size,
            )

            if find_time_series(payload) is not None:
                bars = parse_daily_series(payload)
                self.logger.info("Daily series fetched", symbol=symbol,
                                 function=function, bar_count=len(bars))
                return bars

            if not is_last:
                self.logger.info("No time series in response, falling back",
                                 symbol=symbol, function=function,
                                 fallback=functions[i + 1])

        raise SymbolNotFoundError("No historical data found for this symbol", symbol=symbol)

    def fetch_options_chain(self, symbol: str) -> list[OptionContract]:
        symbol = normalize_symbol(symbol)
        payload = self._request(HISTORICAL_OPTIONS, symbol)

        contracts = parse_options_chain(payload, symbol)
        self.logger.info("Options chain fetched", symbol=symbol, contract_count=len(contracts))
        return contracts

    def _request(self, function: str, symbol: str, check_errors: bool = True,
                 **params: str) -> dict[str, Any]:
        """Issue one GET and decode the JSON body."""
        url = self.build_url(function, symbol, **params)
        headers = {
            "Accept": "application/json",
            "User-Agent": self.api.user_agent,
        }

        try:
            body = self.transport(url, self.api.timeout_seconds, headers)

        except HTTPError as e:
            self.logger.warning("Provider HTTP error", symbol=symbol, function=function,
                                error_code=e.code, error_reason=str(e.reason))
            raise NetworkError(f"HTTP error! status: {e.code}", status_code=e.code, symbol=symbol)

        except (URLError, socket.timeout, OSError) as e:
            self.logger.warning("Provider network error", symbol=symbol, function=function,
                                error=str(e))
            raise NetworkError(f"Network error: {e}", symbol=symbol)

        payload = parse_json_payload(body)
        self._raise_for_api_error(payload, symbol, check_errors)
        return payload

    def _raise_for_api_error(self, payload: Mapping[str, Any], symbol: str,
                             check_errors: bool) -> None:
        """Translate Alpha Vantage error fields into exceptions."""
        if not check_errors:
            return

        if "Error Message" in payload:
            message = str(payload["Error Message"])
            self.logger.info("Provider rejected symbol", symbol=symbol, api_message=message)
            raise SymbolNotFoundError(message, symbol=symbol)

        for key in NOTICE_KEYS:
            if key in payload:
                message = str(payload[key])
                self.logger.warning("Provider notice instead of data", symbol=symbol,
                                    api_message=message)
                raise ApiResponseError(message, api_message=message, symbol=symbol)
