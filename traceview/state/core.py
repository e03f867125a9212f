"""
Core State Types

Foundational enums and error types shared by every store slice.

ERRORS ARE DATA:
================
Fetch failures arrive from the fetch layer as FetchError values.
The selector pipeline passes them through, it never raises them.
The only exception raised here is StoreInvariantError, for snapshots
that break an upstream guarantee.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# =============================================================================
# FETCH STATES
# =============================================================================

class FetchedState(Enum):
    """
    Settled state of a fetch, as recorded in the store.

    None (not a member) means the fetch was never started.
    """
    LOADING = "LOADING"
    DONE = "DONE"
    ERROR = "ERROR"


# =============================================================================
# CATALOG STATUS (Explicit Absence)
# =============================================================================

class CatalogStatus(Enum):
    """
    Load status of the service catalog.

    "Not loaded yet" and "loaded but empty" are different states and must
    never collapse into one empty representation.
    """
    UNLOADED = "unloaded"
    LOADED_EMPTY = "loaded_empty"
    LOADED = "loaded"


# =============================================================================
# ERROR TYPES
# =============================================================================

class FetchErrorKind(Enum):
    """Origin of a fetch error."""
    TRACE_FETCH = auto()
    SERVICE_FETCH = auto()
    DEPENDENCY_FETCH = auto()


@dataclass(frozen=True)
class FetchError:
    """
    Immutable fetch error as stored by the fetch layer.
    Errors are data, not exceptions.
    """
    kind: FetchErrorKind
    message: str
    http_status: Optional[int] = None

    def __str__(self) -> str:
        if self.http_status is not None:
            return f"{self.message} (HTTP {self.http_status})"
        return self.message


class StoreInvariantError(LookupError):
    """
    A store snapshot broke a guarantee owned by the fetch layer.

    Raised instead of producing wrong data. Never caught by the pipeline.
    """
