"""
Dependency Page View Model

Runs once per dependency-fetch completion, not per render, so nothing here
is memoized.
"""

from __future__ import annotations

from traceview.config import DEFAULT_CONFIG, UIConfig
from traceview.state import DependenciesState
from traceview.visualization.graph import GraphType, build_dependency_graph
from .viewmodels import DependencyGraphViewModel


def available_graph_types(edge_count: int, config: UIConfig = DEFAULT_CONFIG):
    """Force-directed always; DAG only for small dependency lists."""
    if edge_count <= config.dag_max_num_services:
        return (GraphType.FORCE_DIRECTED, GraphType.DAG)
    return (GraphType.FORCE_DIRECTED,)


def map_dependencies_to_view(
    state: DependenciesState,
    config: UIConfig = DEFAULT_CONFIG,
) -> DependencyGraphViewModel:
    nodes = links = None
    if state.dependencies:
        graph = build_dependency_graph(state.dependencies)
        nodes, links = graph.nodes, graph.links

    return DependencyGraphViewModel(
        loading=state.loading,
        error=state.error,
        nodes=nodes,
        links=links,
        dependencies=state.dependencies,
        graph_types=available_graph_types(len(state.dependencies or ()), config),
    )
