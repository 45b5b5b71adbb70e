"""Immutable domain models for weighted graphs.

All models are frozen dataclasses with slots. They describe the input
graph (edges, declared parameters, the validated graph itself) and the
results produced by the algorithms.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

from .errors import (
    EdgesCountNotIntegerError,
    EmptyInputError,
    EmptyLineError,
    FromIndexNotIntegerError,
    MissingEdgesCountValueError,
    MissingToIndexFieldError,
    MissingWeightFieldError,
    NodesCountNotIntegerError,
    ParsingEdgeError,
    ToIndexNotIntegerError,
    WeightNotIntegerError,
)

U32_MAX = 2**32 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def parse_integer(raw: str, minimum: int, maximum: int) -> int | None:
    """Parse a decimal integer token, returning None if it is not in range.

    A minus sign is only allowed when ``minimum`` is negative, so ``-0`` is
    not an unsigned integer.
    """
    pattern = _INTEGER_RE if minimum < 0 else _UNSIGNED_RE
    if not pattern.fullmatch(raw):
        return None
    value = int(raw)
    if not minimum <= value <= maximum:
        return None
    return value


@dataclass(frozen=True, slots=True)
class Edge:
    """Weighted connection between two nodes.

    Attributes:
        from_index: Node where the edge starts (1-based)
        to_index: Node where the edge ends (1-based)
        weight: Edge weight (signed 32-bit)
    """

    from_index: int
    to_index: int
    weight: int

    @classmethod
    def parse(cls, line: str) -> Edge:
        """Parse a ``"<from_index> <to_index> <weight>"`` line.

        Raises:
            ParsingEdgeError: If a field is missing or is not an integer.
        """
        return EdgeDescription.from_line(line).to_edge()

    def __str__(self) -> str:
        return f"{self.from_index} {self.to_index} {self.weight}"


@dataclass(frozen=True, slots=True)
class EdgeDescription:
    """Raw tokens of an edge line, not yet converted to integers."""

    from_index: str
    to_index: str
    weight: str

    @classmethod
    def from_line(cls, line: str) -> EdgeDescription:
        tokens = line.split()

        if not tokens:
            raise EmptyLineError("error parsing edge - empty line")
        if len(tokens) < 2:
            raise MissingToIndexFieldError(
                "error parsing edge - missing `to_index` field"
            )
        if len(tokens) < 3:
            raise MissingWeightFieldError(
                "error parsing edge - missing `weight` field"
            )

        return cls(from_index=tokens[0], to_index=tokens[1], weight=tokens[2])

    def to_edge(self) -> Edge:
        from_index = _parse_field(
            self.from_index, 0, U32_MAX, "from_index", FromIndexNotIntegerError
        )
        to_index = _parse_field(
            self.to_index, 0, U32_MAX, "to_index", ToIndexNotIntegerError
        )
        weight = _parse_field(
            self.weight, I32_MIN, I32_MAX, "weight", WeightNotIntegerError
        )
        return Edge(from_index=from_index, to_index=to_index, weight=weight)


def _parse_field(
    raw: str,
    minimum: int,
    maximum: int,
    name: str,
    error_type: Callable[..., ParsingEdgeError],
) -> int:
    value = parse_integer(raw, minimum, maximum)
    if value is None:
        raise error_type(
            f"error parsing edge - {name} must be an integer, but it is: `{raw}`",
            raw_value=raw,
        )
    return value


@dataclass(frozen=True, slots=True)
class GraphParameters:
    """Declared number of nodes and edges, read from the first input line.

    Attributes:
        nodes_count: Number of nodes (indexed from 1 to ``nodes_count``)
        edges_count: Number of edge lines that must follow
    """

    nodes_count: int
    edges_count: int

    @classmethod
    def from_line(cls, line: str) -> GraphParameters:
        """Parse the ``"<nodes_count> <edges_count>"`` header line.

        Raises:
            GraphParametersParsingError: If a value is missing or not an integer.
        """
        tokens = line.split()

        if not tokens:
            raise EmptyInputError("error parsing graph parameters - empty input")

        raw_nodes_count = tokens[0]
        nodes_count = parse_integer(raw_nodes_count, 0, U32_MAX)
        if nodes_count is None:
            raise NodesCountNotIntegerError(
                "error parsing graph parameters - nodes count must be an "
                f"integer, but it is: `{raw_nodes_count}`",
                raw_value=raw_nodes_count,
            )

        if len(tokens) < 2:
            raise MissingEdgesCountValueError(
                "error parsing graph parameters - missing edges count value"
            )

        raw_edges_count = tokens[1]
        edges_count = parse_integer(raw_edges_count, 0, 2**63 - 1)
        if edges_count is None:
            raise EdgesCountNotIntegerError(
                "error parsing graph parameters - edges count must be an "
                f"integer, but it is: `{raw_edges_count}`",
                raw_value=raw_edges_count,
            )

        return cls(nodes_count=nodes_count, edges_count=edges_count)


@dataclass(frozen=True, slots=True)
class Graph:
    """Validated weighted graph.

    Instances are produced by ``GraphBuilder.build()``, which guarantees
    that every edge index lies in ``[1, nodes_count]``, that the number
    of edges matches the declared count and that the undirected graph is
    connected. Edges keep the direction they were declared with, the
    algorithms treat them as undirected.

    Attributes:
        nodes_count: Number of nodes (indexed from 1 to ``nodes_count``)
        edges: Edges in input order
    """

    nodes_count: int
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    @property
    def edges_count(self) -> int:
        return len(self.edges)


@dataclass(frozen=True, slots=True)
class ShortestPath:
    """Result of a shortest path search between two nodes.

    Attributes:
        start_node: Node the search started from
        end_node: Node the search was looking for
        path: Node indices from ``start_node`` to ``end_node`` (inclusive)
        distance: Sum of edge weights along ``path``
    """

    start_node: int
    end_node: int
    path: tuple[int, ...]
    distance: int

    @property
    def num_stops(self) -> int:
        """Return the number of nodes on the path."""
        return len(self.path)


@dataclass(frozen=True, slots=True)
class SpanningTree:
    """Minimum spanning tree found by Kruskal's algorithm.

    Attributes:
        nodes_count: Number of nodes of the source graph
        edges: Accepted edges, in the order they were accepted
        total_weight: Sum of the accepted edge weights
    """

    nodes_count: int
    edges: tuple[Edge, ...]
    total_weight: int
