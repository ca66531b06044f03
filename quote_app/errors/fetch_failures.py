"""
Fetch and lifecycle failure classifications.

Fetch errors come from the market data provider boundary. State transition
errors mean the fetch lifecycle was driven out of order.
"""

from typing import Optional

from .data_quality import QuoteAppError


class FetchError(QuoteAppError):
    """Base class for failures talking to the market data provider."""

    def __init__(self, message: str, symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol


class SymbolNotFoundError(FetchError):
    """Provider has no quote or series for the requested symbol."""


class NetworkError(FetchError):
    """HTTP or socket level failure reaching the provider."""

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code


class ApiResponseError(FetchError):
    """Provider answered with an informational or throttling message instead of data."""

    def __init__(self, message: str, api_message: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.api_message = api_message


class StateTransitionError(QuoteAppError):
    """Invalid fetch lifecycle transition."""

    def __init__(self, message: str, current_state: Optional[str] = None,
                 attempted_transition: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.current_state = current_state
        self.attempted_transition = attempted_transition
        self.recoverable = False
