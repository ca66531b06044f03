"""
Validation helpers applied at the provider boundary.

Symbols are normalized before any request is issued and numeric feed values
are checked before they reach the chart transforms.
"""

import math
import re
from datetime import date
from typing import Any

from ..errors import InvalidSymbolError, ParseError

# Exchange suffixes (BRK.B, RDS-A), index carets (^GSPC) and FX pairs (EUR=X)
_SYMBOL_PATTERN = re.compile(r"^[A-Z0-9][A-Z0-9.\-^=:]{0,19}$|^\^[A-Z0-9.\-=:]{1,19}$")

# Plain decimal feed text: optional sign, digits, optional fraction and exponent
_NUMERIC_TEXT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def normalize_symbol(symbol: Any) -> str:
    """
    Strip and upper-case a ticker symbol.

    Raises:
        InvalidSymbolError: If the symbol is blank or has characters no
            listed ticker uses.
    """
    if not isinstance(symbol, str) or not symbol.strip():
        raise InvalidSymbolError("Please enter a stock symbol", symbol=symbol)

    normalized = symbol.strip().upper()
    if not _SYMBOL_PATTERN.match(normalized):
        raise InvalidSymbolError(f"Invalid stock symbol: {symbol!r}", symbol=symbol)

    return normalized


def is_iso_date(value: Any) -> bool:
    """True if value is a YYYY-MM-DD calendar date string."""
    if not isinstance(value, str) or len(value) != 10:
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def parse_price(value: Any, field: str, context_key: str = "") -> float:
    """
    Parse a finite, non-negative price from feed text or a number.

    Raises:
        ParseError: If the value is missing, non-numeric, non-finite or negative.
    """
    where = f" for {context_key}" if context_key else ""

    if value is None or isinstance(value, bool):
        raise ParseError(f"Missing {field}{where}", field=field, raw_value=value)

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ParseError(f"Invalid {field}{where}: {value!r}", field=field, raw_value=value)

    if not math.isfinite(number):
        raise ParseError(f"Non-finite {field}{where}: {value!r}", field=field, raw_value=value)

    if number < 0:
        raise ParseError(f"Negative {field}{where}: {value!r}", field=field, raw_value=value)

    return number


def is_numeric_text(value: Any) -> bool:
    """
    True if value is plain decimal text such as "12", "-0.5" or "1e3".

    Padded strings, digit separators ("1_000") and inf/nan spellings are
    text, not numbers.
    """
    return isinstance(value, str) and _NUMERIC_TEXT.fullmatch(value) is not None
