"""Building graphs from their text description.

The description format is::

    <nodes_count> <edges_count>
    <from_index> <to_index> <weight>
    ...                                  (edges_count lines)

Every error found on an edge line is reported together with the number
of that line, counting edge lines only (the line right after the graph
parameters is line 1).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from ..domain.errors import (
    BuildGraphError,
    EmptyInputError,
    GraphDescriptionLineError,
    GraphFileReadError,
)
from ..domain.models import Edge, Graph, GraphParameters
from .builder import GraphBuilder

logger = logging.getLogger(__name__)

GraphSource = Union[str, "os.PathLike[str]"]


def build_graph_from_string(text: str) -> Graph:
    """Build a graph from its text description.

    Args:
        text: Graph description.

    Returns:
        The validated graph.

    Raises:
        GraphParametersParsingError: If the first line is missing or invalid.
        GraphDescriptionLineError: If an edge line is invalid or cannot be added.
        TooFewEdgesError: If fewer edges were given than declared.
        GraphNotConnectedError: If the described graph is not connected.
    """
    lines = text.splitlines()
    if not lines:
        raise EmptyInputError("error parsing graph parameters - empty input")

    parameters = GraphParameters.from_line(lines[0])
    builder = GraphBuilder(parameters)

    logger.debug(
        "Parsing graph description",
        extra={
            "nodes_count": parameters.nodes_count,
            "edges_count": parameters.edges_count,
        },
    )

    for line_no, line in enumerate(lines[1:], start=1):
        try:
            builder.add_edge(Edge.parse(line))
        except BuildGraphError as e:
            raise GraphDescriptionLineError(
                f"error in line {line_no}",
                line_no=line_no,
                error=e,
                cause=e,
            ) from e

    return builder.build()


def build_graph_from_file(path: GraphSource, encoding: str = "utf-8") -> Graph:
    """Build a graph from a file holding its text description.

    Raises:
        GraphFileReadError: If the file cannot be read.
        BuildGraphError: If the description is invalid (see
            ``build_graph_from_string``).
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise GraphFileReadError(
            f"Failed to read graph file {file_path}",
            file_path=str(file_path),
            cause=e,
        ) from e

    logger.debug("Graph file read", extra={"file_path": str(file_path)})
    return build_graph_from_string(text)


def build_graph(source: GraphSource, encoding: str = "utf-8") -> Graph:
    """Build a graph from a path or from its text description.

    Path objects are always read as files. A string naming an existing
    file is read as a file. Any other string is a description when it
    spans several lines or holds several tokens (a description needs at
    least ``<nodes_count> <edges_count>``); a single token such as
    ``"graph.txt"`` is taken for a missing file and raises
    ``GraphFileReadError``.
    """
    if isinstance(source, str) and not os.path.isfile(source):
        if "\n" in source or len(source.split()) != 1:
            return build_graph_from_string(source)
    return build_graph_from_file(source, encoding=encoding)
