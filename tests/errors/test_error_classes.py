"""Tests for the error hierarchy."""

import pytest

from quote_app.errors import (
    ApiResponseError,
    DataQualityError,
    EmptySeriesError,
    FetchError,
    InvalidSymbolError,
    NetworkError,
    ParseError,
    QuoteAppError,
    StateTransitionError,
    SymbolNotFoundError,
)


@pytest.mark.parametrize("error_class,parent", [
    (ParseError, DataQualityError),
    (EmptySeriesError, DataQualityError),
    (InvalidSymbolError, DataQualityError),
    (SymbolNotFoundError, FetchError),
    (NetworkError, FetchError),
    (ApiResponseError, FetchError),
    (DataQualityError, QuoteAppError),
    (FetchError, QuoteAppError),
    (StateTransitionError, QuoteAppError),
])
def test_hierarchy(error_class, parent):
    assert issubclass(error_class, parent)


def test_parse_error_attributes():
    error = ParseError("bad open", field="open", raw_value="N/A", context={"date": "2024-01-02"})

    assert str(error) == "bad open"
    assert error.field == "open"
    assert error.raw_value == "N/A"
    assert error.context == {"date": "2024-01-02"}
    assert error.recoverable is True


def test_empty_series_default_message():
    error = EmptySeriesError(data_type="daily_series")
    assert str(error) == "Price series is empty"
    assert error.data_type == "daily_series"


def test_fetch_errors_carry_symbol():
    assert SymbolNotFoundError("missing", symbol="ZZZZ").symbol == "ZZZZ"

    error = NetworkError("HTTP error! status: 503", status_code=503, symbol="IBM")
    assert error.status_code == 503
    assert error.symbol == "IBM"

    assert ApiResponseError("throttled", api_message="Note").api_message == "Note"


def test_state_transition_not_recoverable():
    error = StateTransitionError("Cannot complete while idle", current_state="idle",
                                 attempted_transition="complete")
    assert error.recoverable is False
    assert error.attempted_transition == "complete"
    assert error.context == {}
