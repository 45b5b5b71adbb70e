"""Text graph repository adapter.

This adapter wraps the graph reader and adds:
- Configuration injection (data directory, encoding)
- Caching of already loaded graphs
- Logging
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Union

from ...config import GraphConfig, get_config
from ...domain.errors import BuildGraphError
from ...domain.models import Graph
from ...graph.reader import build_graph_from_file, build_graph_from_string


@dataclass
class TextGraphRepository:
    """Graph repository that loads graph description files.

    This adapter implements GraphRepositoryPort. Relative paths are
    resolved against ``config.data_dir``. Graphs are immutable, so a
    loaded graph is cached per resolved path.

    Attributes:
        config: Graph configuration (data directory, encoding)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graphs: Dict[Path, Graph] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self, source: Union[str, os.PathLike[str]]) -> Graph:
        """Load the graph described in the file ``source``.

        Returns:
            The validated graph.

        Raises:
            GraphFileReadError: If the file cannot be read.
            BuildGraphError: If the description is invalid.
        """
        path = self.config.resolve(Path(source))

        cached = self._graphs.get(path)
        if cached is not None:
            return cached

        self._logger.debug("Loading graph", extra={"file_path": str(path)})

        try:
            graph = build_graph_from_file(path, encoding=self.config.encoding)
        except BuildGraphError as e:
            self._logger.warning(
                "Failed to load graph",
                extra={"file_path": str(path), "error": str(e)},
            )
            raise

        self._graphs[path] = graph
        self._logger.info(
            "Graph loaded",
            extra={
                "file_path": str(path),
                "nodes_count": graph.nodes_count,
                "edges_count": graph.edges_count,
            },
        )
        return graph

    def parse(self, text: str) -> Graph:
        """Build a graph from an in-memory description (not cached)."""
        return build_graph_from_string(text)

    def clear_cache(self) -> None:
        """Clear cached graphs."""
        self._graphs.clear()
        self._logger.debug("Graph cache cleared")
