"""
Trace State

Normalized trace slice of the store: a map of trace id -> record plus the
current search result set, and the comparison cohort.

IDENTITY:
=========
Snapshots are immutable. A new snapshot replaces only the slices that
changed, so an unchanged slice keeps its identity between snapshots.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from .core import FetchedState, FetchError


@dataclass(frozen=True)
class TraceData:
    """
    A fully loaded trace.

    Opaque to the pipeline except for trace_id, duration, start_time and
    the number of spans. Times are in microseconds.
    """
    trace_id: str
    spans: Tuple[Mapping[str, Any], ...]
    processes: Mapping[str, Any]
    duration: float
    start_time: float
    trace_name: Optional[str] = None

    @property
    def span_count(self) -> int:
        return len(self.spans)


@dataclass(frozen=True)
class TraceRecord:
    """One entry in the trace map. Never deleted during a session."""
    id: str
    state: FetchedState
    data: Optional[TraceData] = None
    error: Optional[FetchError] = None


@dataclass(frozen=True)
class SearchResultSet:
    """
    Result of the last trace search.

    `results` is in backend order; user-visible ordering happens downstream.
    `state` is None until the first search starts.
    """
    results: Tuple[str, ...] = ()
    state: Optional[FetchedState] = None
    error: Optional[FetchError] = None


@dataclass(frozen=True)
class TraceState:
    """Trace slice of the store."""
    traces: Mapping[str, TraceRecord] = field(default_factory=dict)
    search: SearchResultSet = field(default_factory=SearchResultSet)


@dataclass(frozen=True)
class TraceDiffState:
    """Cohort of trace ids held for side-by-side comparison."""
    cohort: Tuple[str, ...] = ()
