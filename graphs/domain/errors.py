"""Typed domain errors for graph building and graph algorithms.

All errors inherit from GraphsError and can optionally wrap a root
cause exception for debugging. Errors raised while reading a single
line of a graph description are wrapped in GraphDescriptionLineError,
which adds the line number.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import Edge


@dataclass
class GraphsError(Exception):
    """Base error for the graphs package.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


# ---------------------------------------------------------------------------
# Building a graph
# ---------------------------------------------------------------------------


@dataclass
class BuildGraphError(GraphsError):
    """Graph description could not be turned into a valid graph."""


@dataclass
class GraphParametersParsingError(BuildGraphError):
    """First line (nodes and edges count) is missing or invalid."""


@dataclass
class EmptyInputError(GraphParametersParsingError):
    """Input contains no graph parameters at all."""


@dataclass
class MissingEdgesCountValueError(GraphParametersParsingError):
    """First line has no second value (edges count)."""


@dataclass
class NodesCountNotIntegerError(GraphParametersParsingError):
    """Nodes count is not a non-negative integer.

    Attributes:
        raw_value: The offending token
    """

    raw_value: str = ""


@dataclass
class EdgesCountNotIntegerError(GraphParametersParsingError):
    """Edges count is not a non-negative integer.

    Attributes:
        raw_value: The offending token
    """

    raw_value: str = ""


@dataclass
class ParsingEdgeError(BuildGraphError):
    """Edge line is missing a field or holds a non-integer value."""


@dataclass
class EmptyLineError(ParsingEdgeError):
    pass


@dataclass
class MissingToIndexFieldError(ParsingEdgeError):
    pass


@dataclass
class MissingWeightFieldError(ParsingEdgeError):
    pass


@dataclass
class FromIndexNotIntegerError(ParsingEdgeError):
    raw_value: str = ""


@dataclass
class ToIndexNotIntegerError(ParsingEdgeError):
    raw_value: str = ""


@dataclass
class WeightNotIntegerError(ParsingEdgeError):
    raw_value: str = ""


@dataclass
class AddingEdgeError(BuildGraphError):
    """Edge is valid on its own but cannot be added to the graph.

    Attributes:
        edge: The edge that was rejected
    """

    edge: Optional[Edge] = None


@dataclass
class TooManyEdgesError(AddingEdgeError):
    """Graph already holds the declared number of edges.

    Attributes:
        edges_count: Declared number of edges
    """

    edges_count: int = 0


@dataclass
class WrongFromIndexError(AddingEdgeError):
    """``from_index`` is not a node of the graph."""

    nodes_count: int = 0


@dataclass
class WrongToIndexError(AddingEdgeError):
    """``to_index`` is not a node of the graph."""

    nodes_count: int = 0


@dataclass
class TooFewEdgesError(BuildGraphError):
    """Fewer edges were supplied than declared.

    Attributes:
        current_count: Number of edges added to the builder
        declared: Declared number of edges
    """

    current_count: int = 0
    declared: int = 0


@dataclass
class GraphNotConnectedError(BuildGraphError):
    """At least one node cannot be reached from node 1."""


@dataclass
class GraphDescriptionLineError(BuildGraphError):
    """Error located on a specific edge line of a graph description.

    Line numbers count edge lines only: the first line after the graph
    parameters is line 1.

    Attributes:
        line_no: Number of the edge line that caused the error
        error: The error raised for that line
    """

    line_no: int = 0
    error: Optional[BuildGraphError] = None

    def __str__(self) -> str:
        if self.error is not None:
            return f"{self.message}: {self.error}"
        return super().__str__()


@dataclass
class GraphFileReadError(BuildGraphError):
    """Graph description file could not be read.

    Attributes:
        file_path: Path of the file
    """

    file_path: Optional[str] = None


# ---------------------------------------------------------------------------
# Algorithms
# ---------------------------------------------------------------------------


@dataclass
class AlgorithmError(GraphsError):
    """Algorithm cannot run on the given input."""


@dataclass
class DijkstraError(AlgorithmError):
    """Dijkstra's algorithm error."""


@dataclass
class InvalidStartNodeError(DijkstraError):
    """Start node is not a node of the graph.

    Attributes:
        start_node: Requested start node
        nodes_count: Number of nodes in the graph
    """

    start_node: int = 0
    nodes_count: int = 0


@dataclass
class InvalidEndNodeError(DijkstraError):
    """End node is not a node of the graph.

    Attributes:
        end_node: Requested end node
        nodes_count: Number of nodes in the graph
    """

    end_node: int = 0
    nodes_count: int = 0


@dataclass
class UnreachableNodeError(DijkstraError):
    """Search exhausted every reachable node without finding the end node."""

    start_node: int = 0
    end_node: int = 0


@dataclass
class NegativeEdgeWeightError(DijkstraError):
    """Graph contains an edge with a negative weight.

    Attributes:
        edge: First edge found with a negative weight
    """

    edge: Optional[Edge] = None


# ---------------------------------------------------------------------------
# Graph file generator
# ---------------------------------------------------------------------------


@dataclass
class GenerateGraphError(GraphsError):
    """Graph file could not be generated."""


@dataclass
class InvalidGeneratorParameterError(GenerateGraphError, ValueError):
    """Generator parameter is not a positive integer.

    Attributes:
        parameter_name: Name of the parameter
        value: The rejected value
    """

    parameter_name: str = ""
    value: object = None


@dataclass
class TooFewEdgesForConnectedGraphError(GenerateGraphError):
    """A connected graph with ``nodes_count`` nodes needs ``nodes_count - 1`` edges."""

    edges_count: int = 0
    nodes_count: int = 0


@dataclass
class GraphFileWriteError(GenerateGraphError):
    """Output directory or file could not be created or written.

    Attributes:
        file_path: Path of the output file
    """

    file_path: Optional[str] = None
