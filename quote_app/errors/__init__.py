"""
Error classification system for quote_app.

Data quality errors describe bad or missing feed data, fetch errors describe
provider failures, and state transition errors describe misuse of the fetch
lifecycle.
"""

from .data_quality import (
    QuoteAppError,
    DataQualityError,
    ParseError,
    EmptySeriesError,
    InvalidSymbolError,
)
from .fetch_failures import (
    FetchError,
    SymbolNotFoundError,
    NetworkError,
    ApiResponseError,
    StateTransitionError,
)

__all__ = [
    "QuoteAppError",
    # Data Quality Errors
    "DataQualityError",
    "ParseError",
    "EmptySeriesError",
    "InvalidSymbolError",
    # Fetch Failures
    "FetchError",
    "SymbolNotFoundError",
    "NetworkError",
    "ApiResponseError",
    # Lifecycle
    "StateTransitionError",
]
