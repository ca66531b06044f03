"""Display helpers for quote tables."""

import re

from ..data.models import Quote

_CAPITAL = re.compile(r"([A-Z])")


def format_quote_key(key: str) -> str:
    """
    Human-readable label for a quote field.

    "05. price" -> "price", "07. latestTradingDay" -> "latest Trading Day".
    Keys without the "NN. " prefix come back unchanged.
    """
    parts = key.split(". ")
    if len(parts) < 2:
        return key

    label = _CAPITAL.sub(r" \1", parts[1]).strip()
    return label or key


def quote_rows(quote: Quote) -> list[tuple[str, str]]:
    """(label, value) pairs in feed order for rendering a quote table."""
    return [(format_quote_key(key), value) for key, value in quote.fields.items()]
