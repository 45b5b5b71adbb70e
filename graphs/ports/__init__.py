"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the graph core and the adapters
that load graph files and run algorithms on them.
"""

from .graph import GraphRepositoryPort, RouteSolverPort, SpanningTreeSolverPort

__all__ = [
    "GraphRepositoryPort",
    "RouteSolverPort",
    "SpanningTreeSolverPort",
]
