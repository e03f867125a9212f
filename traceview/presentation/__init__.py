"""Page view models."""

from .viewmodels import SearchPageViewModel, DependencyGraphViewModel, DependencyViewStatus
from .search_page import SearchPageSelector
from .dependency_page import map_dependencies_to_view, available_graph_types

__all__ = [
    'SearchPageViewModel', 'DependencyGraphViewModel', 'DependencyViewStatus',
    'SearchPageSelector', 'map_dependencies_to_view', 'available_graph_types',
]
