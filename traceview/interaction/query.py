"""
Query and Navigation Contracts

Responsibility:
Derive page flags from the URL query string, describe the fetches a page
needs on mount, and build navigation URLs.
No execution logic - fetch requests are pure intent, executed elsewhere.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote, unquote_plus

QueryValue = Union[str, None, Tuple[Optional[str], ...]]

# Service value the search form stores for "no service selected"
NO_SERVICE = "-"


def parse_query(search: str) -> Mapping[str, QueryValue]:
    """
    Parse a raw query string.

    Bare keys map to None (`?embed` -> {"embed": None}), while `?service=`
    keeps its empty string. Repeated keys collapse into a tuple of values.
    """
    parsed: dict = {}
    for part in search.lstrip('?').split('&'):
        if not part:
            continue
        if '=' in part:
            raw_key, raw_value = part.split('=', 1)
            key, value = unquote_plus(raw_key), unquote_plus(raw_value)
        else:
            key, value = unquote_plus(part), None
        if key not in parsed:
            parsed[key] = value
        elif isinstance(parsed[key], tuple):
            parsed[key] = parsed[key] + (value,)
        else:
            parsed[key] = (parsed[key], value)
    return parsed


def stringify_query(query: Mapping[str, QueryValue]) -> str:
    """Inverse of parse_query. Keys sorted, None rendered as a bare key."""
    parts: List[str] = []
    for key in sorted(query):
        values = query[key]
        if not isinstance(values, tuple):
            values = (values,)
        for value in values:
            if value is None:
                parts.append(quote(key, safe=''))
            else:
                parts.append(f"{quote(key, safe='')}={quote(str(value), safe='')}")
    return '&'.join(parts)


@dataclass(frozen=True)
class QueryFlags:
    """View flags toggled by the presence of query keys."""
    is_embed: bool
    hide_graph: bool
    disable_comparision: bool
    is_homepage: bool

    @classmethod
    def from_query(cls, query: Mapping[str, Any]) -> QueryFlags:
        return cls(
            is_embed='embed' in query,
            hide_graph='hideGraph' in query,
            disable_comparision='disableComparision' in query,
            is_homepage=not query,
        )


# =============================================================================
# INITIAL LOAD
# =============================================================================

class ActionType(Enum):
    """Fetches the search page may request."""
    SEARCH_TRACES = "search_traces"
    FETCH_MULTIPLE_TRACES = "fetch_multiple_traces"
    FETCH_SERVICES = "fetch_services"
    FETCH_SERVICE_OPERATIONS = "fetch_service_operations"


@dataclass(frozen=True)
class FetchRequest:
    """A fetch the page needs. Executed by the fetch layer."""
    action: ActionType
    payload: Any = None


def initial_requests(
    query: Mapping[str, QueryValue],
    cohort: Iterable[Any],
    last_search_service: Optional[str] = None,
) -> Tuple[FetchRequest, ...]:
    """
    Fetches to issue when the search page mounts, in issue order.

    `cohort` holds diff cohort entries; entries whose state is None have
    not been fetched yet.
    """
    requests = []
    if 'service' in query or 'traceID' in query:
        requests.append(FetchRequest(ActionType.SEARCH_TRACES, dict(query)))

    missing = tuple(entry.id for entry in cohort if entry.state is None)
    if missing:
        requests.append(FetchRequest(ActionType.FETCH_MULTIPLE_TRACES, missing))

    requests.append(FetchRequest(ActionType.FETCH_SERVICES))

    if last_search_service and last_search_service != NO_SERVICE:
        requests.append(FetchRequest(ActionType.FETCH_SERVICE_OPERATIONS, last_search_service))
    return tuple(requests)


# =============================================================================
# NAVIGATION
# =============================================================================

def prefix_url(path: str, prefix: str = "") -> str:
    return f"{prefix.rstrip('/')}{path}"


def trace_url(trace_id: str, is_embed: bool = False, prefix: str = "") -> str:
    """URL of the trace detail page, keeping embed mode."""
    path = f"/trace/{quote(trace_id, safe='')}"
    if is_embed:
        path += "?embed"
    return prefix_url(path, prefix)


def full_view_url(query: Mapping[str, QueryValue], prefix: str = "") -> str:
    """URL of the non-embedded search page for the same query."""
    without_embed = {key: value for key, value in query.items() if key != 'embed'}
    return prefix_url(f"/search?{stringify_query(without_embed)}", prefix)
