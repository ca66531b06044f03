"""
Fetch lifecycle reducers.

IDLE -> FETCHING on submit, FETCHING -> LOADED on success, FETCHING -> FAILED
on error, and LOADED/FAILED/FETCHING -> FETCHING on a new submit. A new
submit supersedes whatever was in flight: results and failures carrying an
older request id are dropped.
"""

from dataclasses import replace

from ..data.models import FilterSpec, SortSpec
from ..errors import StateTransitionError
from ..logging.config import get_state_logger, log_stale_result, log_state_transition
from ..options.projector import next_sort_spec
from .models import FetchPhase, FetchResult, ViewState

state_logger = get_state_logger(__name__)


def begin_fetch(state: ViewState, symbol: str) -> ViewState:
    """
    Start fetching a symbol.

    Previous data and errors are cleared. The type filter and sort carry
    over; the expiration filter is reset since dates differ per symbol.
    """
    new_state = replace(
        state,
        phase=FetchPhase.FETCHING,
        symbol=symbol,
        request_id=state.request_id + 1,
        quote=None,
        daily_bars=(),
        heikin_ashi=(),
        contracts=(),
        error=None,
        options_error=None,
        filter_spec=replace(state.filter_spec, expiration=None),
    )

    log_state_transition(
        state_logger,
        symbol=symbol,
        request_id=new_state.request_id,
        from_state=state.phase.value,
        to_state=new_state.phase.value,
        trigger="submit",
        context={"superseded_request_id": state.request_id} if state.is_loading else None,
    )
    return new_state


def _is_stale(state: ViewState, request_id: int, trigger: str) -> bool:
    if request_id == state.request_id:
        return False

    log_stale_result(state_logger, state.symbol, request_id, state.request_id, trigger)
    return True


def _require_fetching(state: ViewState, attempted: str) -> None:
    if state.phase is not FetchPhase.FETCHING:
        raise StateTransitionError(
            f"Cannot {attempted} while {state.phase.value}",
            current_state=state.phase.value,
            attempted_transition=attempted,
        )


def complete_fetch(state: ViewState, request_id: int, result: FetchResult) -> ViewState:
    """
    Store a finished fetch.

    Raises:
        StateTransitionError: If the current request is not fetching
    """
    if _is_stale(state, request_id, "complete"):
        return state
    _require_fetching(state, "complete")

    new_state = replace(
        state,
        phase=FetchPhase.LOADED,
        quote=result.quote,
        daily_bars=tuple(result.daily_bars),
        heikin_ashi=tuple(result.heikin_ashi),
        contracts=tuple(result.contracts),
        error=None,
        options_error=result.options_error,
    )

    log_state_transition(
        state_logger,
        symbol=state.symbol,
        request_id=request_id,
        from_state=state.phase.value,
        to_state=new_state.phase.value,
        trigger="complete",
        context={
            "bar_count": len(new_state.daily_bars),
            "contract_count": len(new_state.contracts),
        },
    )
    return new_state


def fail_fetch(state: ViewState, request_id: int, message: str) -> ViewState:
    """
    Record a failed fetch with a user-facing message.

    Raises:
        StateTransitionError: If the current request is not fetching
    """
    if _is_stale(state, request_id, "fail"):
        return state
    _require_fetching(state, "fail")

    new_state = replace(state, phase=FetchPhase.FAILED, error=message)

    log_state_transition(
        state_logger,
        symbol=state.symbol,
        request_id=request_id,
        from_state=state.phase.value,
        to_state=new_state.phase.value,
        trigger="fail",
        context={"error": message},
    )
    return new_state


def with_filter(state: ViewState, filter_spec: FilterSpec) -> ViewState:
    """Replace the option table filters."""
    return replace(state, filter_spec=filter_spec)


def with_sort(state: ViewState, sort_spec: SortSpec) -> ViewState:
    """Replace the option table sort."""
    return replace(state, sort_spec=sort_spec)


def toggle_sort(state: ViewState, key: str) -> ViewState:
    """Apply a column header choice to the option table sort."""
    return replace(state, sort_spec=next_sort_spec(state.sort_spec, key))
