"""
Service Catalog State

Services known to the query backend and the operations fetched per service.
Loading and error state are tracked independently of the trace slice.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from .core import CatalogStatus, FetchError


@dataclass(frozen=True)
class ServiceCatalogState:
    """
    Service slice of the store.

    EXPLICIT ABSENCE:
    =================
    services=None means the list was never loaded.
    services=() means it was loaded and is empty.
    """
    loading: bool = False
    services: Optional[Tuple[str, ...]] = None
    operations_for_service: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    error: Optional[FetchError] = None

    @property
    def status(self) -> CatalogStatus:
        if self.services is None:
            return CatalogStatus.UNLOADED
        if not self.services:
            return CatalogStatus.LOADED_EMPTY
        return CatalogStatus.LOADED
