"""Graph construction from text descriptions.

This subpackage parses graph descriptions, validates them edge by edge
and checks that the resulting graph is connected.
"""

from .adjacency import AdjacencyList, adjacency_list, dfs
from .builder import GraphBuilder
from .reader import build_graph, build_graph_from_file, build_graph_from_string

__all__ = [
    "AdjacencyList",
    "GraphBuilder",
    "adjacency_list",
    "build_graph",
    "build_graph_from_file",
    "build_graph_from_string",
    "dfs",
]
