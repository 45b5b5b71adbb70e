"""Minimum spanning tree using Kruskal's algorithm.

The input graph is expected to come from ``GraphBuilder.build()``, so it
is connected and a spanning tree always exists.
"""

from typing import Iterator

from ..domain.models import Edge, Graph, SpanningTree
from .union_find import UnionFind


def _spanning_tree_edges(graph: Graph) -> Iterator[Edge]:
    union_find = UnionFind(graph.nodes_count)

    # sorted() is stable: equal weights keep their input order
    for edge in sorted(graph.edges, key=lambda e: e.weight):
        if union_find.merge_parents(edge.from_index, edge.to_index):
            yield edge


def calculate_min_total_weight(graph: Graph) -> int:
    """Compute the weight of a minimum spanning tree of ``graph``.

    Parameters
    ----------
    graph:
        Connected graph as produced by ``build_graph``.

    Returns
    -------
    int
        Sum of the weights of the minimum spanning tree edges.
    """
    return sum(edge.weight for edge in _spanning_tree_edges(graph))


def minimum_spanning_tree(graph: Graph) -> SpanningTree:
    """Compute a minimum spanning tree of ``graph``, keeping its edges."""
    edges = tuple(_spanning_tree_edges(graph))
    return SpanningTree(
        nodes_count=graph.nodes_count,
        edges=edges,
        total_weight=sum(edge.weight for edge in edges),
    )
