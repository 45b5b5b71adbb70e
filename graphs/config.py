"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- GRAPHS_GRAPH_DATA_DIR=/path/to/graph/files
- GRAPHS_ALGO_DEFAULT_ALGORITHM=dijkstra
- GRAPHS_GEN_MAX_WEIGHT=1000
- GRAPHS_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

AlgorithmName = Literal["kruskal", "dijkstra"]


class GraphConfig(BaseSettings):
    """Graph description files configuration.

    Environment variables prefixed with GRAPHS_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHS_GRAPH_")

    data_dir: Path = Field(default_factory=Path.cwd)
    encoding: str = "utf-8"

    def resolve(self, path: Path) -> Path:
        """Resolve a relative graph file path against ``data_dir``."""
        if path.is_absolute():
            return path
        return self.data_dir / path


class AlgorithmConfig(BaseSettings):
    """Algorithm selection.

    Environment variables prefixed with GRAPHS_ALGO_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHS_ALGO_")

    default_algorithm: AlgorithmName = "kruskal"


class GeneratorConfig(BaseSettings):
    """Random graph file generator defaults.

    Environment variables prefixed with GRAPHS_GEN_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHS_GEN_")

    max_weight: int = Field(default=100, gt=0)
    seed: Optional[int] = None


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with GRAPHS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHS_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.data_dir)
        print(config.algorithm.default_algorithm)

    Environment variables prefixed with GRAPHS_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHS_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    algorithm: AlgorithmConfig = Field(default_factory=AlgorithmConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
