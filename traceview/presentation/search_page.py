"""
Search Page Selector

Top-level view-model function for the trace search page. Threads one store
snapshot through the selector pipeline:

    trace view -> diff cohort -> services -> errors -> sort

Each stage owns a private TransformCell inside this selector instance, so two
pages (or two tests) never share a cache slot.
"""

from __future__ import annotations

from traceview.config import DEFAULT_CONFIG, UIConfig
from traceview.state import StoreSnapshot
from traceview.selectors import (
    aggregate_errors,
    make_diff_cohort_selector,
    make_services_selector,
    make_sorted_traces_selector,
    make_trace_view_selector,
)
from traceview.interaction.query import QueryFlags, parse_query
from traceview.logging_config import get_logger
from .viewmodels import SearchPageViewModel

logger = get_logger(__name__)


class SearchPageSelector:
    """Maps store snapshots to SearchPageViewModel."""

    def __init__(self, config: UIConfig = DEFAULT_CONFIG):
        self._config = config
        self._trace_view = make_trace_view_selector()
        self._diff_cohort = make_diff_cohort_selector()
        self._services = make_services_selector()
        self._sorted_traces = make_sorted_traces_selector()

    def __call__(self, snapshot: StoreSnapshot) -> SearchPageViewModel:
        query = parse_query(snapshot.router.search)
        flags = QueryFlags.from_query(query)

        trace_view = self._trace_view(snapshot.trace)
        diff_cohort = self._diff_cohort(snapshot.trace, snapshot.trace_diff)
        services_view = self._services(snapshot.services)
        errors = aggregate_errors(trace_view.trace_error, services_view.service_error)
        if errors:
            logger.debug("search page has %d error(s)", len(errors))

        sort_by = snapshot.sort_by or self._config.default_sort.value
        trace_results = self._sorted_traces(trace_view.traces, sort_by)

        return SearchPageViewModel(
            query=query,
            diff_cohort=diff_cohort,
            is_embed=flags.is_embed,
            hide_graph=flags.hide_graph,
            disable_comparision=flags.disable_comparision,
            is_homepage=flags.is_homepage,
            loading_services=services_view.loading_services,
            loading_traces=trace_view.loading_traces,
            services=services_view.services,
            trace_results=trace_results,
            errors=errors,
            max_trace_duration=trace_view.max_duration,
            sort_traces_by=sort_by,
            url_query_params=query,
        )

    map_state_to_props = __call__
