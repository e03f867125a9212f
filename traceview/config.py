"""
UI Configuration

Settings the pipeline reads from the UI config document.
Missing or falsy values fall back to the constants below.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Final

from .selectors.sort import SortKey


# Largest dependency list for which the DAG view is offered
FALLBACK_DAG_MAX_NUM_SERVICES: Final[int] = 100


def _get(doc: Optional[Mapping[str, Any]], path: str) -> Any:
    """Read a dotted path from nested mappings, None when any step is missing."""
    value: Any = doc
    for key in path.split('.'):
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


@dataclass(frozen=True)
class UIConfig:
    """Immutable UI configuration."""
    dag_max_num_services: int = FALLBACK_DAG_MAX_NUM_SERVICES
    path_prefix: str = ""
    default_sort: SortKey = SortKey.MOST_RECENT

    def __post_init__(self):
        if self.dag_max_num_services <= 0:
            raise ValueError(
                f"dag_max_num_services must be positive, got {self.dag_max_num_services}"
            )

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> UIConfig:
        """Build from the nested UI config document."""
        prefix = _get(raw, 'pathPrefix') or ""
        return cls(
            dag_max_num_services=(
                _get(raw, 'dependencies.dagMaxNumServices') or FALLBACK_DAG_MAX_NUM_SERVICES
            ),
            path_prefix=prefix.rstrip('/'),
            default_sort=SortKey.coerce(_get(raw, 'search.defaultSort')) or SortKey.MOST_RECENT,
        )


DEFAULT_CONFIG: Final[UIConfig] = UIConfig()
