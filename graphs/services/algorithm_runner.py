"""Algorithm runner service - loads a graph file and runs an algorithm on it."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Union

from ..config import AlgorithmConfig, AlgorithmName, AppConfig, get_config
from ..ports.graph import GraphRepositoryPort, RouteSolverPort, SpanningTreeSolverPort


@dataclass
class AlgorithmRunnerService:
    """Runs graph algorithms on graph description files.

    Attributes:
        graph_repository: Loads and validates graphs
        route_solver: Computes shortest paths
        spanning_tree_solver: Computes minimum spanning trees
        config: Algorithm selection defaults
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    spanning_tree_solver: SpanningTreeSolverPort
    config: AlgorithmConfig = field(default_factory=lambda: get_config().algorithm)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def run_kruskal(self, source: Union[str, os.PathLike[str]]) -> int:
        """Return the minimum spanning tree weight of the graph in ``source``."""
        graph = self.graph_repository.load(source)
        return self.spanning_tree_solver.solve(graph).total_weight

    def run_dijkstra(
        self,
        source: Union[str, os.PathLike[str]],
        start_node: int,
        end_node: int,
    ) -> int:
        """Return the shortest path length between two nodes of the graph in ``source``."""
        graph = self.graph_repository.load(source)
        return self.route_solver.solve(graph, start_node, end_node).distance

    def run(
        self,
        source: Union[str, os.PathLike[str]],
        algorithm: Optional[AlgorithmName] = None,
        start_node: Optional[int] = None,
        end_node: Optional[int] = None,
    ) -> int:
        """Run ``algorithm`` (or the configured default) on the graph in ``source``.

        Raises:
            ValueError: If the algorithm is unknown, or if Dijkstra is
                requested without both nodes.
            BuildGraphError: If the graph cannot be loaded.
            AlgorithmError: If the algorithm rejects its input.
        """
        algorithm = algorithm or self.config.default_algorithm

        self._logger.info(
            "Running algorithm",
            extra={"algorithm": algorithm, "source": str(source)},
        )

        if algorithm == "kruskal":
            return self.run_kruskal(source)
        if algorithm == "dijkstra":
            if start_node is None or end_node is None:
                raise ValueError("dijkstra requires both start_node and end_node")
            return self.run_dijkstra(source, start_node, end_node)

        raise ValueError(f"Unknown algorithm: {algorithm!r}")

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> AlgorithmRunnerService:
        """Create a service with the default adapters."""
        from ..adapters.graph import (
            DijkstraRouteSolver,
            KruskalSpanningTreeSolver,
            TextGraphRepository,
        )

        config = config or get_config()
        return cls(
            graph_repository=TextGraphRepository(config.graph),
            route_solver=DijkstraRouteSolver(),
            spanning_tree_solver=KruskalSpanningTreeSolver(),
            config=config.algorithm,
        )
