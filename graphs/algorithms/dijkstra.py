"""Shortest-path computation using Dijkstra's algorithm.

Edges are treated as undirected. Dijkstra's algorithm is only correct
for non-negative weights, so graphs holding a negative weight are
rejected before the search starts.
"""

from __future__ import annotations

import heapq
import math
from typing import Dict, List, Tuple

from ..domain.errors import (
    InvalidEndNodeError,
    InvalidStartNodeError,
    NegativeEdgeWeightError,
    UnreachableNodeError,
)
from ..domain.models import Graph, ShortestPath
from ..graph.adjacency import adjacency_list


def _is_node_index_valid(index: int, nodes_count: int) -> bool:
    return 1 <= index <= nodes_count


def validate_nodes(graph: Graph, start_node: int, end_node: int) -> None:
    """Check both nodes belong to ``graph`` and that no weight is negative.

    Raises:
        InvalidStartNodeError: If ``start_node`` is not in ``[1, nodes_count]``.
        InvalidEndNodeError: If ``end_node`` is not in ``[1, nodes_count]``.
        NegativeEdgeWeightError: If some edge has a negative weight.
    """
    if not _is_node_index_valid(start_node, graph.nodes_count):
        raise InvalidStartNodeError(
            f"start_node `{start_node}` is not in range 1..{graph.nodes_count}",
            start_node=start_node,
            nodes_count=graph.nodes_count,
        )
    if not _is_node_index_valid(end_node, graph.nodes_count):
        raise InvalidEndNodeError(
            f"end_node `{end_node}` is not in range 1..{graph.nodes_count}",
            end_node=end_node,
            nodes_count=graph.nodes_count,
        )

    for edge in graph.edges:
        if edge.weight < 0:
            raise NegativeEdgeWeightError(
                f"{edge!r} has a negative weight, "
                "shortest paths require non-negative weights",
                edge=edge,
            )


def _search(
    graph: Graph, start_node: int, end_node: int
) -> Tuple[int, Dict[int, int]]:
    """Run the search, returning the distance and the predecessor of each node."""
    validate_nodes(graph, start_node, end_node)

    adjacency = adjacency_list(graph.edges, graph.nodes_count)

    distances: List[float] = [math.inf] * (graph.nodes_count + 1)
    previous: Dict[int, int] = {}
    distances[start_node] = 0

    heap: List[Tuple[int, int]] = [(0, start_node)]

    while heap:
        distance, node = heapq.heappop(heap)

        if node == end_node:
            return distance, previous

        # a shorter way to this node was found after this entry was pushed
        if distance > distances[node]:
            continue

        for neighbour, weight in adjacency[node]:
            new_distance = distance + weight
            if new_distance < distances[neighbour]:
                distances[neighbour] = new_distance
                previous[neighbour] = node
                heapq.heappush(heap, (new_distance, neighbour))

    raise UnreachableNodeError(
        f"end_node `{end_node}` cannot be reached from start_node `{start_node}`",
        start_node=start_node,
        end_node=end_node,
    )


def find_shortest_path_length(graph: Graph, start_node: int, end_node: int) -> int:
    """Compute the length of the shortest path between two nodes.

    Parameters
    ----------
    graph:
        Graph as produced by ``build_graph``.
    start_node:
        Index of the node the path starts from (1-based).
    end_node:
        Index of the node the path ends at (1-based).

    Returns
    -------
    int
        Sum of edge weights along the shortest path, 0 when both nodes
        are the same.

    Raises
    ------
    InvalidStartNodeError, InvalidEndNodeError
        If a node index is not a node of ``graph``.
    NegativeEdgeWeightError
        If ``graph`` has an edge with a negative weight.
    UnreachableNodeError
        If ``end_node`` cannot be reached from ``start_node``.
    """
    distance, _ = _search(graph, start_node, end_node)
    return distance


def find_shortest_path(graph: Graph, start_node: int, end_node: int) -> ShortestPath:
    """Compute the shortest path between two nodes, with the nodes along it.

    Raises the same errors as ``find_shortest_path_length``.
    """
    distance, previous = _search(graph, start_node, end_node)

    path: List[int] = [end_node]
    while path[-1] != start_node:
        path.append(previous[path[-1]])
    path.reverse()

    return ShortestPath(
        start_node=start_node,
        end_node=end_node,
        path=tuple(path),
        distance=distance,
    )
