"""
Trace Sort Stage

Orders search results for display.

CACHE SAFETY:
=============
The input tuple is shared with other consumers of the trace view.
sort_traces always builds a new tuple and never touches its input.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Final, Iterable, Optional, Tuple, Union

from ..state import TraceData
from .memo import TransformCell


class SortKey(Enum):
    """Sort criteria offered by the search results form."""
    MOST_RECENT = "MOST_RECENT"
    LONGEST_FIRST = "LONGEST_FIRST"
    SHORTEST_FIRST = "SHORTEST_FIRST"
    MOST_SPANS = "MOST_SPANS"
    LEAST_SPANS = "LEAST_SPANS"

    @classmethod
    def coerce(cls, value: object) -> Optional[SortKey]:
        """Map a form value to a key, None when unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None


# Used for unrecognized sort values
FALLBACK_SORT: Final[SortKey] = SortKey.LONGEST_FIRST

# (key function, descending)
_ORDERINGS: Dict[SortKey, Tuple[Callable[[TraceData], float], bool]] = {
    SortKey.MOST_RECENT: (lambda trace: trace.start_time, True),
    SortKey.LONGEST_FIRST: (lambda trace: trace.duration, True),
    SortKey.SHORTEST_FIRST: (lambda trace: trace.duration, False),
    SortKey.MOST_SPANS: (lambda trace: trace.span_count, True),
    SortKey.LEAST_SPANS: (lambda trace: trace.span_count, False),
}


def sort_traces(
    traces: Iterable[TraceData],
    sort_by: Union[SortKey, str, None],
) -> Tuple[TraceData, ...]:
    """
    Return a new, reordered tuple. Ties keep their incoming order.
    """
    key, descending = _ORDERINGS[SortKey.coerce(sort_by) or FALLBACK_SORT]
    return tuple(sorted(traces, key=key, reverse=descending))


def make_sorted_traces_selector() -> TransformCell[Tuple[TraceData, ...]]:
    """New private cell, keyed on (traces, sort_by)."""
    return TransformCell(sort_traces, name="sorted_traces")
