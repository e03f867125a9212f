"""Graph data for the dependency views."""

from .graph import GraphType, GraphNode, GraphLink, ServiceGraph, build_dependency_graph

__all__ = ['GraphType', 'GraphNode', 'GraphLink', 'ServiceGraph', 'build_dependency_graph']
