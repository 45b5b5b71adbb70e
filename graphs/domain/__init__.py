"""Domain layer - Core graph models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    AddingEdgeError,
    AlgorithmError,
    BuildGraphError,
    DijkstraError,
    EdgesCountNotIntegerError,
    EmptyInputError,
    EmptyLineError,
    FromIndexNotIntegerError,
    GenerateGraphError,
    GraphDescriptionLineError,
    GraphFileReadError,
    GraphFileWriteError,
    GraphNotConnectedError,
    GraphParametersParsingError,
    GraphsError,
    InvalidEndNodeError,
    InvalidGeneratorParameterError,
    InvalidStartNodeError,
    MissingEdgesCountValueError,
    MissingToIndexFieldError,
    MissingWeightFieldError,
    NegativeEdgeWeightError,
    NodesCountNotIntegerError,
    ParsingEdgeError,
    ToIndexNotIntegerError,
    TooFewEdgesError,
    TooFewEdgesForConnectedGraphError,
    TooManyEdgesError,
    UnreachableNodeError,
    WeightNotIntegerError,
    WrongFromIndexError,
    WrongToIndexError,
)
from .models import (
    Edge,
    EdgeDescription,
    Graph,
    GraphParameters,
    ShortestPath,
    SpanningTree,
)

__all__ = [
    # Models
    "Edge",
    "EdgeDescription",
    "Graph",
    "GraphParameters",
    "ShortestPath",
    "SpanningTree",
    # Errors
    "GraphsError",
    "BuildGraphError",
    "GraphParametersParsingError",
    "EmptyInputError",
    "MissingEdgesCountValueError",
    "NodesCountNotIntegerError",
    "EdgesCountNotIntegerError",
    "ParsingEdgeError",
    "EmptyLineError",
    "MissingToIndexFieldError",
    "MissingWeightFieldError",
    "FromIndexNotIntegerError",
    "ToIndexNotIntegerError",
    "WeightNotIntegerError",
    "AddingEdgeError",
    "TooManyEdgesError",
    "WrongFromIndexError",
    "WrongToIndexError",
    "TooFewEdgesError",
    "GraphNotConnectedError",
    "GraphDescriptionLineError",
    "GraphFileReadError",
    "AlgorithmError",
    "DijkstraError",
    "InvalidStartNodeError",
    "InvalidEndNodeError",
    "UnreachableNodeError",
    "NegativeEdgeWeightError",
    "GenerateGraphError",
    "InvalidGeneratorParameterError",
    "TooFewEdgesForConnectedGraphError",
    "GraphFileWriteError",
]
