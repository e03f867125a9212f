"""
State Access Layer

Read-only, immutable mirror of the client store.

PRINCIPLES:
1. Immutable (Frozen)
2. No Derivation (selectors derive, state only holds)
3. Explicit absence (None is "not loaded", never "empty")
"""

from .core import (
    FetchedState, CatalogStatus, FetchErrorKind, FetchError, StoreInvariantError
)
from .trace import (
    TraceData, TraceRecord, SearchResultSet, TraceState, TraceDiffState
)
from .services import ServiceCatalogState
from .dependencies import DependencyEdge, DependenciesState
from .store import RouterLocation, StoreSnapshot

__all__ = [
    'FetchedState', 'CatalogStatus', 'FetchErrorKind', 'FetchError', 'StoreInvariantError',
    'TraceData', 'TraceRecord', 'SearchResultSet', 'TraceState', 'TraceDiffState',
    'ServiceCatalogState',
    'DependencyEdge', 'DependenciesState',
    'RouterLocation', 'StoreSnapshot',
]
