"""Dijkstra route solver adapter.

This adapter wraps the Dijkstra implementation and adds:
- Domain model output (ShortestPath)
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...algorithms.dijkstra import find_shortest_path
from ...domain.errors import DijkstraError
from ...domain.models import Graph, ShortestPath


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, start_node: int, end_node: int) -> ShortestPath:
        """Find the shortest path between two nodes.

        Raises:
            InvalidStartNodeError: If start_node is not a node of the graph.
            InvalidEndNodeError: If end_node is not a node of the graph.
            NegativeEdgeWeightError: If the graph has a negative weight.
            UnreachableNodeError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"start_node": start_node, "end_node": end_node},
        )

        try:
            result = find_shortest_path(graph, start_node, end_node)
        except DijkstraError as e:
            self._logger.warning(
                "No route computed",
                extra={"start_node": start_node, "end_node": end_node, "error": str(e)},
            )
            raise

        self._logger.info(
            "Route found",
            extra={
                "start_node": start_node,
                "end_node": end_node,
                "stops": result.num_stops,
                "distance": result.distance,
            },
        )
        return result
