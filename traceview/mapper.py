"""
Raw Store to State Mapper

Converts the raw nested store document (as produced by the fetch layer's
JSON payloads) into immutable state snapshots.

MAPPING RULES:
==============
1. Unknown fetch states fail fast, never guessed
2. Missing lists stay None ("not loaded"), never become empty
3. Backend ordering is preserved
4. Unchanged raw slices map to the same state objects, so identity-keyed
   selectors keep hitting their cache
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from traceview.state import (
    DependenciesState, DependencyEdge, FetchedState, FetchError, FetchErrorKind,
    RouterLocation, SearchResultSet, ServiceCatalogState, StoreSnapshot,
    TraceData, TraceDiffState, TraceRecord, TraceState,
)

# Stands in for absent slices so they keep one identity across snapshots
_EMPTY_SLICE: Mapping[str, Any] = MappingProxyType({})


def _slice(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = raw.get(name)
    return _EMPTY_SLICE if value is None else value


class StoreMapper:
    """
    Maps raw store documents to StoreSnapshot.

    Keeps the last raw slice and its mapped state per slice name; when the
    same raw object comes back, the previous state object is reused.
    """

    def __init__(self):
        self._slices: Dict[str, Tuple[Any, Any]] = {}

    # =========================================================================
    # SNAPSHOT
    # =========================================================================

    def map_store(self, raw: Mapping[str, Any]) -> StoreSnapshot:
        """Map a whole raw store document."""
        router = raw.get('router') or {}
        location = router.get('location') or {}
        return StoreSnapshot(
            trace=self._reuse('trace', _slice(raw, 'trace'), self.map_trace_state),
            trace_diff=self._reuse(
                'traceDiff', _slice(raw, 'traceDiff'), self.map_trace_diff_state
            ),
            services=self._reuse('services', _slice(raw, 'services'), self.map_services_state),
            dependencies=self._reuse(
                'dependencies', _slice(raw, 'dependencies'), self.map_dependencies_state
            ),
            router=RouterLocation(
                pathname=location.get('pathname', '/search'),
                search=location.get('search', ''),
            ),
            # Empty lets the page selector apply its configured default
            sort_by=raw.get('sortBy') or "",
        )

    def _reuse(self, name: str, raw_slice: Any, mapper):
        previous = self._slices.get(name)
        if previous is not None and previous[0] is raw_slice:
            return previous[1]
        mapped = mapper(raw_slice)
        self._slices[name] = (raw_slice, mapped)
        return mapped

    # =========================================================================
    # TRACE MAPPING
    # =========================================================================

    def map_trace_state(self, raw: Mapping[str, Any]) -> TraceState:
        traces = {
            trace_id: self.map_trace_record(trace_id, record)
            for trace_id, record in (raw.get('traces') or {}).items()
        }
        search = raw.get('search') or {}
        return TraceState(
            traces=traces,
            search=SearchResultSet(
                results=tuple(search.get('results') or ()),
                state=self._map_state(search.get('state')),
                error=self.map_error(search.get('error'), FetchErrorKind.TRACE_FETCH),
            ),
        )

    def map_trace_record(self, trace_id: str, raw: Mapping[str, Any]) -> TraceRecord:
        state = self._map_state(raw.get('state')) or FetchedState.LOADING
        data = raw.get('data')
        return TraceRecord(
            id=raw.get('id', trace_id),
            state=state,
            data=self.map_trace_data(data) if data is not None else None,
            error=self.map_error(raw.get('error'), FetchErrorKind.TRACE_FETCH),
        )

    def map_trace_data(self, raw: Mapping[str, Any]) -> TraceData:
        return TraceData(
            trace_id=raw['traceID'],
            spans=tuple(raw.get('spans') or ()),
            processes=dict(raw.get('processes') or {}),
            duration=raw.get('duration', 0),
            start_time=raw.get('startTime', 0),
            trace_name=raw.get('traceName'),
        )

    def map_trace_diff_state(self, raw: Mapping[str, Any]) -> TraceDiffState:
        return TraceDiffState(cohort=tuple(raw.get('cohort') or ()))

    # =========================================================================
    # SERVICE MAPPING
    # =========================================================================

    def map_services_state(self, raw: Mapping[str, Any]) -> ServiceCatalogState:
        services = raw.get('services')
        operations = raw.get('operationsForService') or {}
        return ServiceCatalogState(
            loading=bool(raw.get('loading', False)),
            services=tuple(services) if services is not None else None,
            operations_for_service={
                name: tuple(ops or ()) for name, ops in operations.items()
            },
            error=self.map_error(raw.get('error'), FetchErrorKind.SERVICE_FETCH),
        )

    # =========================================================================
    # DEPENDENCY MAPPING
    # =========================================================================

    def map_dependencies_state(self, raw: Mapping[str, Any]) -> DependenciesState:
        dependencies = raw.get('dependencies')
        return DependenciesState(
            dependencies=(
                tuple(self.map_edge(edge) for edge in dependencies)
                if dependencies is not None else None
            ),
            loading=bool(raw.get('loading', False)),
            error=self.map_error(raw.get('error'), FetchErrorKind.DEPENDENCY_FETCH),
        )

    def map_edge(self, raw: Mapping[str, Any]) -> DependencyEdge:
        return DependencyEdge(
            parent=raw['parent'],
            child=raw['child'],
            call_count=int(raw.get('callCount', 0)),
        )

    # =========================================================================
    # HELPERS
    # =========================================================================

    def map_error(self, raw: Any, kind: FetchErrorKind) -> Optional[FetchError]:
        """Errors arrive as {"message", "httpStatus"} objects or plain strings."""
        if raw is None:
            return None
        if isinstance(raw, FetchError):
            return raw
        if isinstance(raw, str):
            return FetchError(kind=kind, message=raw)
        return FetchError(
            kind=kind,
            message=str(raw.get('message', '')),
            http_status=raw.get('httpStatus'),
        )

    def _map_state(self, raw: Any) -> Optional[FetchedState]:
        if raw is None or isinstance(raw, FetchedState):
            return raw
        if not isinstance(raw, str):
            raise ValueError(f"Unknown fetched state: {raw!r}")
        try:
            return FetchedState(raw.upper())
        except ValueError:
            raise ValueError(f"Unknown fetched state: {raw!r}") from None
