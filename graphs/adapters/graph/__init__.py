"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextGraphRepository: Loads graphs from text description files
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
- KruskalSpanningTreeSolver: Finds minimum spanning trees using Kruskal's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .kruskal_solver import KruskalSpanningTreeSolver
from .text_repository import TextGraphRepository

__all__ = ["DijkstraRouteSolver", "KruskalSpanningTreeSolver", "TextGraphRepository"]
