"""Graph ports - Abstractions for graph loading and graph algorithms.

These protocols define the contracts for loading graph descriptions
and running algorithms on the resulting graphs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Union

if TYPE_CHECKING:
    import os

    from ..domain.models import Graph, ShortestPath, SpanningTree


class GraphRepositoryPort(Protocol):
    """Port for loading graphs.

    Implementation: adapters/graph/text_repository.py
    """

    def load(self, source: Union[str, os.PathLike[str]]) -> Graph:
        """Load and validate the graph described by ``source``.

        Args:
            source: Path to a graph description file.

        Returns:
            The validated graph.
        """
        ...

    def parse(self, text: str) -> Graph:
        """Build a graph from an in-memory description."""
        ...


class RouteSolverPort(Protocol):
    """Port for shortest path computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: Graph, start_node: int, end_node: int) -> ShortestPath:
        """Find the shortest path between two nodes.

        Args:
            graph: The graph to search.
            start_node: Index of the first node of the path.
            end_node: Index of the last node of the path.

        Returns:
            ShortestPath with the nodes along the path and its length.
        """
        ...


class SpanningTreeSolverPort(Protocol):
    """Port for minimum spanning tree computation.

    Implementation: adapters/graph/kruskal_solver.py
    """

    def solve(self, graph: Graph) -> SpanningTree:
        """Find a minimum spanning tree of ``graph``."""
        ...
