"""
Dependency State

Service-call edges returned by the dependency endpoint.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from .core import FetchError


@dataclass(frozen=True)
class DependencyEdge:
    """
    A directed service call with its observed call count.

    The raw list may repeat a (parent, child) pair, for example when the
    backend aggregates several time windows.
    """
    parent: str
    child: str
    call_count: int

    def __post_init__(self):
        if self.call_count < 0:
            raise ValueError(f"call_count must be >= 0, got {self.call_count}")


@dataclass(frozen=True)
class DependenciesState:
    """Dependency slice of the store. None means not fetched yet."""
    dependencies: Optional[Tuple[DependencyEdge, ...]] = None
    loading: bool = False
    error: Optional[FetchError] = None
