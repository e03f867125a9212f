"""
Diff Cohort Selector

Resolves the comparison cohort against the trace map. Ids that are not
loaded yet become placeholders, so no entry is ever dropped.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from ..state import FetchedState, TraceData, TraceDiffState, TraceState
from .memo import TransformCell


@dataclass(frozen=True)
class CohortEntry:
    """
    One cohort member.

    A placeholder (trace not in the map yet) has state=None and data=None.
    """
    id: str
    state: Optional[FetchedState] = None
    data: Optional[TraceData] = None

    @property
    def is_placeholder(self) -> bool:
        return self.state is None


def derive_diff_cohort(
    trace_state: TraceState,
    trace_diff_state: TraceDiffState,
) -> Tuple[CohortEntry, ...]:
    entries = []
    for trace_id in trace_diff_state.cohort:
        record = trace_state.traces.get(trace_id)
        if record is None:
            entries.append(CohortEntry(id=trace_id))
        else:
            entries.append(CohortEntry(id=trace_id, state=record.state, data=record.data))
    return tuple(entries)


def make_diff_cohort_selector() -> TransformCell[Tuple[CohortEntry, ...]]:
    """New private cell, keyed on (TraceState, TraceDiffState)."""
    return TransformCell(derive_diff_cohort, name="diff_cohort")
