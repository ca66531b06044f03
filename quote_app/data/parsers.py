"""
Alpha Vantage payload parsers for converting raw responses to normalized objects.

This module handles parsing of GLOBAL_QUOTE, TIME_SERIES_DAILY(_ADJUSTED) and
options chain payloads into canonical data structures with proper type
conversion and error handling.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

import orjson

from ..errors import ParseError
from .models import ContractType, DailyBar, OptionContract, Quote
from .validators import is_iso_date, parse_price

QUOTE_KEY = "Global Quote"
TIME_SERIES_PREFIX = "Time Series"

# Feed field name -> OptionContract attribute. Covers the HISTORICAL_OPTIONS
# "data" rows and the calls/puts lists of the older chain payload.
_OPTION_FIELD_ALIASES = {
    "contractID": "contract_id",
    "contractName": "contract_id",
    "symbol": "symbol",
    "expiration": "expiration",
    "strike": "strike_price",
    "strikePrice": "strike_price",
    "last": "last_price",
    "lastPrice": "last_price",
    "bid": "bid",
    "ask": "ask",
    "volume": "volume",
    "open_interest": "open_interest",
    "openInterest": "open_interest",
    "delta": "delta",
    "gamma": "gamma",
    "theta": "theta",
    "vega": "vega",
}


def parse_json_payload(raw_data: Union[str, bytes]) -> dict[str, Any]:
    """
    Parse a raw JSON response body into a dictionary.

    Raises:
        ParseError: If the body is not valid JSON or not a JSON object
    """
    try:
        payload = orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}")

    if not isinstance(payload, dict):
        raise ParseError("Payload must be a JSON object", raw_value=type(payload).__name__)

    return payload


def bare_field_name(key: str) -> str:
    """Strip the feed's ordinal prefix: '1. open' -> 'open', '05. price' -> 'price'."""
    head, sep, tail = key.partition(". ")
    if sep and head.isdigit():
        return tail
    return key


def _lookup(fields: Mapping[str, Any], name: str) -> Any:
    if name in fields:
        return fields[name]
    for key, value in fields.items():
        if isinstance(key, str) and bare_field_name(key) == name:
            return value
    return None


def parse_ohlc_fields(date: str, fields: Any) -> DailyBar:
    """
    Parse one day's OHLC(V) fields into a DailyBar.

    Accepts plain keys ("open") or the feed's prefixed keys ("1. open").

    Raises:
        ParseError: If the date is malformed or any OHLC field is not a
            finite non-negative number
    """
    if not is_iso_date(date):
        raise ParseError(f"Invalid series date: {date!r}", field="date", raw_value=date)

    if not isinstance(fields, Mapping):
        raise ParseError(f"Bar data for {date} must be a mapping", raw_value=fields)

    open_price = parse_price(_lookup(fields, "open"), "open", date)
    high_price = parse_price(_lookup(fields, "high"), "high", date)
    low_price = parse_price(_lookup(fields, "low"), "low", date)
    close_price = parse_price(_lookup(fields, "close"), "close", date)

    raw_volume = _lookup(fields, "volume")
    volume = parse_price(raw_volume, "volume", date) if raw_volume is not None else None

    return DailyBar(
        date=date,
        open=open_price,
        high=high_price,
        low=low_price,
        close=close_price,
        volume=volume,
    )


def find_time_series(payload: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    """Return the date-keyed series object of a TIME_SERIES_* response, if any."""
    for key, value in payload.items():
        if isinstance(key, str) and key.startswith(TIME_SERIES_PREFIX) and isinstance(value, Mapping):
            return value
    return None


def parse_daily_series(payload: Mapping[str, Any]) -> list[DailyBar]:
    """
    Parse a TIME_SERIES_DAILY or TIME_SERIES_DAILY_ADJUSTED payload.

    Expected format:
    {
        "Meta Data": {...},
        "Time Series (Daily)": {
            "2024-01-03": {"1. open": "10.0", "2. high": "12.0", "3. low": "9.0",
                           "4. close": "11.0", "5. volume": "12345"}
        }
    }

    Returns:
        Bars in feed order (the provider sends newest first)

    Raises:
        ParseError: If the payload has no time series or a bar is malformed
    """
    series = find_time_series(payload)
    if series is None:
        raise ParseError("Missing time series in payload")

    return [parse_ohlc_fields(date, fields) for date, fields in series.items()]


def parse_global_quote(payload: Mapping[str, Any]) -> Optional[Quote]:
    """
    Parse a GLOBAL_QUOTE payload.

    Expected format:
    {"Global Quote": {"01. symbol": "IBM", "02. open": "...", "05. price": "..."}}

    Returns:
        Quote, or None when the provider returned no quote object or an empty one
    """
    raw_quote = payload.get(QUOTE_KEY)
    if not isinstance(raw_quote, Mapping) or not raw_quote:
        return None

    fields = {str(key): "" if value is None else str(value) for key, value in raw_quote.items()}
    symbol = _lookup(fields, "symbol") or ""
    return Quote(symbol=symbol, fields=fields)


def _parse_contract_type(raw_type: Any, index: int) -> ContractType:
    if isinstance(raw_type, str):
        normalized = raw_type.strip().upper()
        if normalized in ("CALL", "C"):
            return ContractType.CALL
        if normalized in ("PUT", "P"):
            return ContractType.PUT
    raise ParseError(f"Invalid contract type at index {index}: {raw_type!r}",
                     field="type", raw_value=raw_type)


def _parse_contract(row: Any, index: int, default_symbol: str,
                    contract_type: Optional[ContractType] = None) -> OptionContract:
    if not isinstance(row, Mapping):
        raise ParseError(f"Option contract at index {index} must be an object", raw_value=row)

    if contract_type is None:
        contract_type = _parse_contract_type(row.get("type", row.get("contractType")), index)

    values: dict[str, Optional[str]] = {}
    for feed_key, attr in _OPTION_FIELD_ALIASES.items():
        if feed_key in row and attr not in values:
            value = row[feed_key]
            values[attr] = None if value is None else str(value)

    values["symbol"] = values.get("symbol") or default_symbol
    return OptionContract(type=contract_type, **values)


def parse_options_chain(payload: Mapping[str, Any], symbol: str = "") -> list[OptionContract]:
    """
    Parse an options chain payload into a flat contract list.

    Two shapes are accepted:
    {"data": [{"contractID": ..., "type": "call", "strike": "100.00", ...}]}
    {"calls": [{"strikePrice": "100", ...}], "puts": [...]}

    Raises:
        ParseError: If a contract row is malformed
    """
    if "data" in payload:
        rows = payload["data"]
        if not isinstance(rows, list):
            raise ParseError("'data' field must be a list")
        return [_parse_contract(row, i, symbol) for i, row in enumerate(rows)]

    contracts = []
    for side, contract_type in (("calls", ContractType.CALL), ("puts", ContractType.PUT)):
        rows = payload.get(side) or []
        if not isinstance(rows, list):
            raise ParseError(f"'{side}' field must be a list")
        contracts.extend(
            _parse_contract(row, i, symbol, contract_type) for i, row in enumerate(rows)
        )
    return contracts
