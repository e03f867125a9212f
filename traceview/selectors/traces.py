"""
Trace View Selector

Resolves the search result ids against the trace map and summarizes them
for the results list.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Final, Optional, Tuple

from ..state import FetchedState, FetchError, StoreInvariantError, TraceData, TraceState
from .memo import TransformCell


# max_duration of an empty result set
EMPTY_MAX_DURATION: Final[float] = 0


@dataclass(frozen=True)
class TraceView:
    """Traces of the current search, in backend order."""
    traces: Tuple[TraceData, ...]
    max_duration: float
    trace_error: Optional[FetchError]
    loading_traces: bool


def resolve_search_results(state: TraceState) -> Tuple[TraceData, ...]:
    """
    Look up every search result id in the trace map.

    Raises StoreInvariantError when an id is missing or has no data; the
    fetch layer guarantees both.
    """
    resolved = []
    for trace_id in state.search.results:
        record = state.traces.get(trace_id)
        if record is None:
            raise StoreInvariantError(f"search result {trace_id!r} is not in the trace map")
        if record.data is None:
            raise StoreInvariantError(
                f"search result {trace_id!r} has no data (state={record.state})"
            )
        resolved.append(record.data)
    return tuple(resolved)


def derive_trace_view(state: TraceState) -> TraceView:
    traces = resolve_search_results(state)
    return TraceView(
        traces=traces,
        max_duration=max((trace.duration for trace in traces), default=EMPTY_MAX_DURATION),
        trace_error=state.search.error,
        loading_traces=state.search.state is FetchedState.LOADING,
    )


def make_trace_view_selector() -> TransformCell[TraceView]:
    """New private cell, keyed on the TraceState reference."""
    return TransformCell(derive_trace_view, name="trace_view")
