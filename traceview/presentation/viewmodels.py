"""
Presentation Contracts

Responsibility:
Define ViewModel contracts for pure UI components.
Rendering reads these and nothing else.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Tuple

from traceview.state import DependencyEdge, FetchError, TraceData
from traceview.selectors import CohortEntry, ServiceViewModel
from traceview.visualization.graph import GraphLink, GraphNode, GraphType
from traceview.interaction.query import QueryValue


@dataclass(frozen=True)
class SearchPageViewModel:
    """Props of the trace search page."""
    query: Mapping[str, QueryValue]
    diff_cohort: Tuple[CohortEntry, ...]
    is_embed: bool
    hide_graph: bool
    disable_comparision: bool
    is_homepage: bool
    loading_services: bool
    loading_traces: bool
    services: Optional[Tuple[ServiceViewModel, ...]]
    trace_results: Tuple[TraceData, ...]
    errors: Optional[Tuple[FetchError, ...]]
    max_trace_duration: float
    sort_traces_by: str
    url_query_params: Mapping[str, QueryValue]

    @property
    def has_trace_results(self) -> bool:
        return len(self.trace_results) > 0

    @property
    def show_errors(self) -> bool:
        """Errors replace the results list once traces stop loading."""
        return self.errors is not None and not self.loading_traces

    @property
    def show_logo(self) -> bool:
        return (
            self.is_homepage
            and not self.has_trace_results
            and not self.loading_traces
            and self.errors is None
            and not self.is_embed
        )

    @property
    def show_search_form(self) -> bool:
        """False in embed mode; while services load a spinner is shown instead."""
        return not self.is_embed and not self.loading_services and self.services is not None


class DependencyViewStatus(Enum):
    """What the dependency page renders. Checked in declaration order."""
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


@dataclass(frozen=True)
class DependencyGraphViewModel:
    """Props of the dependency page."""
    loading: bool
    error: Optional[FetchError]
    nodes: Optional[Tuple[GraphNode, ...]]
    links: Optional[Tuple[GraphLink, ...]]
    dependencies: Optional[Tuple[DependencyEdge, ...]]
    graph_types: Tuple[GraphType, ...]

    @property
    def status(self) -> DependencyViewStatus:
        if self.loading:
            return DependencyViewStatus.LOADING
        if self.error is not None:
            return DependencyViewStatus.ERROR
        if not self.nodes or not self.links:
            return DependencyViewStatus.EMPTY
        return DependencyViewStatus.READY
