"""
Selector Pipeline

Pure transforms from store state to view data. Every make_* factory
returns a fresh TransformCell; callers keep one per call site.
"""

from .memo import TransformCell, last_xform_cacher
from .traces import TraceView, EMPTY_MAX_DURATION, derive_trace_view, make_trace_view_selector
from .cohort import CohortEntry, derive_diff_cohort, make_diff_cohort_selector
from .sort import SortKey, FALLBACK_SORT, sort_traces, make_sorted_traces_selector
from .services import ServiceViewModel, ServicesView, derive_services, make_services_selector
from .errors import aggregate_errors

__all__ = [
    'TransformCell', 'last_xform_cacher',
    'TraceView', 'EMPTY_MAX_DURATION', 'derive_trace_view', 'make_trace_view_selector',
    'CohortEntry', 'derive_diff_cohort', 'make_diff_cohort_selector',
    'SortKey', 'FALLBACK_SORT', 'sort_traces', 'make_sorted_traces_selector',
    'ServiceViewModel', 'ServicesView', 'derive_services', 'make_services_selector',
    'aggregate_errors',
]
