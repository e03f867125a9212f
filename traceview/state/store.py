"""
Store Snapshot

One fully settled snapshot of the client store. Every selector is a pure
function of a snapshot passed in explicitly; there is no global store.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .trace import TraceState, TraceDiffState
from .services import ServiceCatalogState
from .dependencies import DependenciesState


@dataclass(frozen=True)
class RouterLocation:
    """Current router location. `search` is the raw query string."""
    pathname: str = "/search"
    search: str = ""


@dataclass(frozen=True)
class StoreSnapshot:
    """Immutable store snapshot consumed by the page selectors."""
    trace: TraceState = field(default_factory=TraceState)
    trace_diff: TraceDiffState = field(default_factory=TraceDiffState)
    services: ServiceCatalogState = field(default_factory=ServiceCatalogState)
    dependencies: DependenciesState = field(default_factory=DependenciesState)
    router: RouterLocation = field(default_factory=RouterLocation)
    # Current value of the search results sort form, empty for the configured default
    sort_by: str = ""
