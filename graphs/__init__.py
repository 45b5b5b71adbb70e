r"""Weighted graph toolkit.

Graphs are built from a text description (first line: number of nodes
and edges, then one ``from to weight`` line per edge), validated, and
handed to the algorithms:

    graph = build_graph_from_string("3 4\n1 2 100\n2 1 80\n3 1 90\n1 3 110")
    calculate_min_total_weight(graph)          # 170
    find_shortest_path_length(graph, 2, 3)     # 170
"""

from .algorithms import (
    UnionFind,
    calculate_min_total_weight,
    find_shortest_path,
    find_shortest_path_length,
    minimum_spanning_tree,
)
from .domain import (
    AddingEdgeError,
    AlgorithmError,
    BuildGraphError,
    DijkstraError,
    Edge,
    EdgeDescription,
    EdgesCountNotIntegerError,
    EmptyInputError,
    EmptyLineError,
    FromIndexNotIntegerError,
    GenerateGraphError,
    Graph,
    GraphDescriptionLineError,
    GraphFileReadError,
    GraphFileWriteError,
    GraphNotConnectedError,
    GraphParameters,
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
    ShortestPath,
    SpanningTree,
    ToIndexNotIntegerError,
    TooFewEdgesError,
    TooFewEdgesForConnectedGraphError,
    TooManyEdgesError,
    UnreachableNodeError,
    WeightNotIntegerError,
    WrongFromIndexError,
    WrongToIndexError,
)
from .generator import generate_graph_file
from .graph import (
    GraphBuilder,
    adjacency_list,
    build_graph,
    build_graph_from_file,
    build_graph_from_string,
    dfs,
)

__all__ = [
    # Models
    "Edge",
    "EdgeDescription",
    "Graph",
    "GraphParameters",
    "ShortestPath",
    "SpanningTree",
    # Building
    "GraphBuilder",
    "adjacency_list",
    "build_graph",
    "build_graph_from_file",
    "build_graph_from_string",
    "dfs",
    # Algorithms
    "UnionFind",
    "calculate_min_total_weight",
    "find_shortest_path",
    "find_shortest_path_length",
    "minimum_spanning_tree",
    # Generator
    "generate_graph_file",
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
