"""
Data quality error classifications for quote and price series processing.

These exceptions describe problems with feed data itself: values that will
not parse, series that are empty, or symbols that are unusable before any
request is made.
"""

from typing import Any, Optional


class QuoteAppError(Exception):
    """Root of every error raised by quote_app."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class DataQualityError(QuoteAppError):
    """Base class for data quality issues that can be handled gracefully."""


class ParseError(DataQualityError):
    """A numeric or structural field in feed data could not be parsed."""

    def __init__(self, message: str, field: Optional[str] = None,
                 raw_value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.raw_value = raw_value


class EmptySeriesError(DataQualityError):
    """A price series has no entries to transform."""

    def __init__(self, message: str = "Price series is empty",
                 data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class InvalidSymbolError(DataQualityError):
    """Ticker symbol is blank or otherwise unusable."""

    def __init__(self, message: str, symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol
