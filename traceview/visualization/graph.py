"""
Dependency Graph Builder

Responsibility:
Deterministic transformation of raw service-call edges into the node and
link collections consumed by the force-directed and DAG views.

MERGE POLICY:
=============
- One node per distinct service name.
- One link per distinct (parent, child) pair.
- Duplicate pairs are merged by SUMMING their call counts.
- Nodes and links keep first-seen order, so unchanged input renders
  without jitter.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple
import networkx as nx

from ..state import DependencyEdge


class GraphType(Enum):
    """Graph views offered on the dependency page."""
    FORCE_DIRECTED = "Force Directed Graph"
    DAG = "DAG"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class GraphNode:
    """A service. call_count sums every edge touching it."""
    name: str
    call_count: int


@dataclass(frozen=True)
class GraphLink:
    """A directed service call; value is the merged call count."""
    source: str
    target: str
    value: int


@dataclass(frozen=True)
class ServiceGraph:
    """Node/link data for the graph views. No layout."""
    nodes: Tuple[GraphNode, ...]
    links: Tuple[GraphLink, ...]

    @property
    def is_empty(self) -> bool:
        return not self.nodes


def _to_digraph(edges: Iterable[DependencyEdge]) -> nx.DiGraph:
    graph = nx.DiGraph()
    for position, edge in enumerate(edges):
        for name in (edge.parent, edge.child):
            if name not in graph:
                graph.add_node(name, call_count=0)
            graph.nodes[name]['call_count'] += edge.call_count

        if graph.has_edge(edge.parent, edge.child):
            graph[edge.parent][edge.child]['value'] += edge.call_count
        else:
            graph.add_edge(edge.parent, edge.child, value=edge.call_count, position=position)
    return graph


def build_dependency_graph(edges: Iterable[DependencyEdge]) -> ServiceGraph:
    """Merge raw edges into a ServiceGraph."""
    graph = _to_digraph(edges)

    # networkx yields nodes in insertion order, edges grouped by source
    nodes = tuple(
        GraphNode(name=name, call_count=attrs['call_count'])
        for name, attrs in graph.nodes(data=True)
    )
    ordered_edges = sorted(graph.edges(data=True), key=lambda e: e[2]['position'])
    links = tuple(
        GraphLink(source=source, target=target, value=attrs['value'])
        for source, target, attrs in ordered_edges
    )
    return ServiceGraph(nodes=nodes, links=links)
