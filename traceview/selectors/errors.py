"""Error aggregation across independent store slices."""

from __future__ import annotations
from typing import Optional, Tuple

from ..state import FetchError


def aggregate_errors(
    trace_error: Optional[FetchError],
    service_error: Optional[FetchError],
    *others: Optional[FetchError],
) -> Optional[Tuple[FetchError, ...]]:
    """
    Non-None errors in argument order (trace first, then service, then
    others), or None when there are none.
    """
    errors = tuple(
        error for error in (trace_error, service_error) + others
        if error is not None
    )
    return errors or None
