"""Adjacency list construction and depth-first search."""

from typing import Iterable, List, Tuple

from ..domain.models import Edge

# Index i holds (neighbour, weight) pairs of node i; index 0 is unused.
AdjacencyList = List[List[Tuple[int, int]]]


def adjacency_list(edges: Iterable[Edge], nodes_count: int) -> AdjacencyList:
    """Build an undirected adjacency list, every edge is stored both ways."""
    adjacency: AdjacencyList = [[] for _ in range(nodes_count + 1)]

    for edge in edges:
        adjacency[edge.from_index].append((edge.to_index, edge.weight))
        adjacency[edge.to_index].append((edge.from_index, edge.weight))

    return adjacency


def dfs(start_index: int, adjacency: AdjacencyList) -> List[bool]:
    """Iterative depth-first search.

    Parameters
    ----------
    start_index:
        Node the search starts from.
    adjacency:
        Adjacency list as produced by ``adjacency_list``.

    Returns
    -------
    list[bool]
        ``visited[i]`` is True when node ``i`` is reachable from
        ``start_index``.
    """
    visited = [False] * len(adjacency)
    stack = [start_index]
    visited[start_index] = True

    while stack:
        node = stack.pop()
        for neighbour, _ in adjacency[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                stack.append(neighbour)

    return visited
