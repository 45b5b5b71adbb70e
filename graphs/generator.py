"""Random graph file generator.

Generated files follow the graph description format and always describe
a connected graph: node 1 is first connected with every other node, the
remaining edges are random (self loops and parallel edges included).

Example output for ``nodes_count=3, edges_count=5, max_weight=20``::

    3 5
    1 2 13
    1 3 1
    2 3 1
    1 1 11
    1 3 2
"""

from __future__ import annotations

import logging
import os
import random
from pathlib import Path
from typing import Optional, Union

from .domain.errors import (
    GraphFileWriteError,
    InvalidGeneratorParameterError,
    TooFewEdgesForConnectedGraphError,
)

logger = logging.getLogger(__name__)


def _require_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidGeneratorParameterError(
            f"{name} must be a positive integer, but it is: `{value}`",
            parameter_name=name,
            value=value,
        )


def edges_left(nodes_count: int, edges_count: int) -> int:
    """Number of random edges left after connecting node 1 with every other node.

    Raises:
        TooFewEdgesForConnectedGraphError: If ``edges_count`` cannot make
            a connected graph of ``nodes_count`` nodes.
    """
    left = edges_count + 1 - nodes_count
    if left < 0:
        raise TooFewEdgesForConnectedGraphError(
            f"{edges_count} edges is not enough to generate connected graph "
            f"with {nodes_count} nodes",
            edges_count=edges_count,
            nodes_count=nodes_count,
        )
    return left


def generate_graph_file(
    graph_file: Union[str, os.PathLike[str]],
    nodes_count: int,
    edges_count: int,
    max_weight: int,
    seed: Optional[int] = None,
) -> Path:
    """Write a random connected graph description to ``graph_file``.

    Args:
        graph_file: Output path; missing parent directories are created.
        nodes_count: Number of nodes (positive).
        edges_count: Number of edges (positive, at least ``nodes_count - 1``).
        max_weight: Largest edge weight (positive); weights are drawn from
            ``1..max_weight``.
        seed: Seed of the random generator, for reproducible files.

    Returns:
        Path of the written file.

    Raises:
        InvalidGeneratorParameterError: If a count is not a positive integer.
        TooFewEdgesForConnectedGraphError: If the graph cannot be connected.
        GraphFileWriteError: If the directory or file cannot be written.
    """
    _require_positive("nodes_count", nodes_count)
    _require_positive("edges_count", edges_count)
    _require_positive("max_weight", max_weight)

    random_edges = edges_left(nodes_count, edges_count)
    path = Path(graph_file)
    rng = random.Random(seed)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise GraphFileWriteError(
            f"creating directory for output file {path} failed",
            file_path=str(path),
            cause=e,
        ) from e

    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(f"{nodes_count} {edges_count}\n")

            for node in range(2, nodes_count + 1):
                f.write(f"1 {node} {rng.randint(1, max_weight)}\n")

            for _ in range(random_edges):
                f.write(
                    f"{rng.randint(1, nodes_count)} "
                    f"{rng.randint(1, nodes_count)} "
                    f"{rng.randint(1, max_weight)}\n"
                )
    except OSError as e:
        raise GraphFileWriteError(
            f"writing output file {path} failed",
            file_path=str(path),
            cause=e,
        ) from e

    logger.info(
        "Graph file generated",
        extra={
            "file_path": str(path),
            "nodes_count": nodes_count,
            "edges_count": edges_count,
        },
    )
    return path
