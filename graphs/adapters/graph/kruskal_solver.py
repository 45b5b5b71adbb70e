"""Kruskal spanning tree solver adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...algorithms.kruskal import minimum_spanning_tree
from ...domain.models import Graph, SpanningTree


@dataclass
class KruskalSpanningTreeSolver:
    """Minimum spanning tree solver using Kruskal's algorithm.

    This adapter implements SpanningTreeSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph) -> SpanningTree:
        tree = minimum_spanning_tree(graph)
        self._logger.info(
            "Spanning tree found",
            extra={
                "nodes_count": graph.nodes_count,
                "tree_edges": len(tree.edges),
                "total_weight": tree.total_weight,
            },
        )
        return tree
