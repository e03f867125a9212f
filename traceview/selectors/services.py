"""
Service/Operation Selector

Reshapes the service catalog into {name, operations} records for the
search form.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from ..state import CatalogStatus, FetchError, ServiceCatalogState
from .memo import TransformCell


@dataclass(frozen=True)
class ServiceViewModel:
    """A service and the operations known for it."""
    name: str
    operations: Tuple[str, ...]


@dataclass(frozen=True)
class ServicesView:
    """services is None until the catalog has loaded."""
    loading_services: bool
    services: Optional[Tuple[ServiceViewModel, ...]]
    service_error: Optional[FetchError]
    status: CatalogStatus


def derive_services(state: ServiceCatalogState) -> ServicesView:
    services = None
    if state.services is not None:
        services = tuple(
            ServiceViewModel(
                name=name,
                operations=tuple(state.operations_for_service.get(name, ())),
            )
            for name in state.services
        )
    return ServicesView(
        loading_services=state.loading,
        services=services,
        service_error=state.error,
        status=state.status,
    )


def make_services_selector() -> TransformCell[ServicesView]:
    """New private cell, keyed on the ServiceCatalogState reference."""
    return TransformCell(derive_services, name="services")
