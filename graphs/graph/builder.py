"""Staging area used to assemble a validated Graph edge by edge."""

from __future__ import annotations

import logging
from typing import List

from ..domain.errors import (
    GraphNotConnectedError,
    TooFewEdgesError,
    TooManyEdgesError,
    WrongFromIndexError,
    WrongToIndexError,
)
from ..domain.models import Edge, Graph, GraphParameters
from .adjacency import adjacency_list, dfs

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Collects edges for a graph and validates them.

    The builder is sized from the declared ``GraphParameters``. Edges
    are checked as they are added; ``build()`` checks the edge count
    and connectivity and returns the immutable ``Graph``.

    Example:
        builder = GraphBuilder(GraphParameters(nodes_count=3, edges_count=2))
        builder.add_edge(Edge(1, 3, 250))
        builder.add_edge(Edge(2, 3, 180))
        graph = builder.build()
    """

    def __init__(self, parameters: GraphParameters) -> None:
        self.nodes_count = parameters.nodes_count
        self.max_edges_count = parameters.edges_count
        self._edges: List[Edge] = []

    @property
    def edges_count(self) -> int:
        return len(self._edges)

    def add_edge(self, edge: Edge) -> None:
        """Add an edge to the graph.

        Raises:
            TooManyEdgesError: If the declared number of edges was reached.
            WrongFromIndexError: If ``from_index`` is not in ``[1, nodes_count]``.
            WrongToIndexError: If ``to_index`` is not in ``[1, nodes_count]``.
        """
        if len(self._edges) >= self.max_edges_count:
            raise TooManyEdgesError(
                f"error adding edge - max allowed count of edges is "
                f"{self.max_edges_count} but you are trying to add a new edge {edge!r}",
                edge=edge,
                edges_count=self.max_edges_count,
            )

        if not self._is_node(edge.from_index):
            raise WrongFromIndexError(
                f"error adding edge - {edge!r} from_index field value "
                f"{self._out_of_range(edge.from_index)}",
                edge=edge,
                nodes_count=self.nodes_count,
            )

        if not self._is_node(edge.to_index):
            raise WrongToIndexError(
                f"error adding edge - {edge!r} to_index field value "
                f"{self._out_of_range(edge.to_index)}",
                edge=edge,
                nodes_count=self.nodes_count,
            )

        self._edges.append(edge)

    def _is_node(self, index: int) -> bool:
        return 1 <= index <= self.nodes_count

    def _out_of_range(self, index: int) -> str:
        if index < 1:
            return "must be at least 1 (nodes are indexed from 1) !"
        return f"is greater than nodes count `{self.nodes_count}` in graph !"

    def is_connected(self) -> bool:
        """Check that every node can be reached from node 1."""
        if self.nodes_count == 0:
            return True

        visited = dfs(1, adjacency_list(self._edges, self.nodes_count))
        return all(visited[1:])

    def build(self) -> Graph:
        """Build the graph.

        Raises:
            TooFewEdgesError: If fewer edges were added than declared.
            GraphNotConnectedError: If some node is unreachable from node 1.
        """
        if len(self._edges) < self.max_edges_count:
            raise TooFewEdgesError(
                f"current count of edges {len(self._edges)} is less than "
                f"declared {self.max_edges_count}",
                current_count=len(self._edges),
                declared=self.max_edges_count,
            )

        if not self.is_connected():
            raise GraphNotConnectedError("graph is not connected!")

        logger.debug(
            "Graph built",
            extra={"nodes_count": self.nodes_count, "edges_count": len(self._edges)},
        )
        return Graph(nodes_count=self.nodes_count, edges=tuple(self._edges))
