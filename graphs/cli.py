"""Command line runner.

Two subcommands are available:

    graphs generate-graph-file -g graph.txt -n 5 -e 8 -m 100   (alias: ggf)
    graphs run-algorithm -t graph.txt                          (alias: t)
    graphs run-algorithm -t graph.txt -a dijkstra -s 1 -d 4
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from .config import AppConfig, GraphConfig, ObservabilityConfig, get_config
from .domain.errors import GraphsError
from .generator import generate_graph_file
from .services import AlgorithmRunnerService

APP_NAME = "graphs"


def configure_logging(config: ObservabilityConfig, level: Optional[str] = None) -> None:
    logging.basicConfig(level=(level or config.level).upper(), format=config.format)


def positive_integer(value: str) -> int:
    """argparse type accepting positive integers only."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be a positive integer '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer '{value}'")
    return number


def existing_file(config: GraphConfig) -> Callable[[str], Path]:
    """argparse type resolving a graph file against ``config.data_dir``.

    The resolved path is returned, so the file that was checked is the
    file that gets loaded.
    """

    def check(value: str) -> Path:
        path = config.resolve(Path(value))
        if not path.is_file():
            raise argparse.ArgumentTypeError(f"the file does not exist: {path}")
        return path.resolve()

    return check


def build_parser(config: AppConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Graph theory algorithms: minimum spanning tree and shortest path",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"logging level (default: {config.observability.level})",
    )
    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate-graph-file",
        aliases=["ggf"],
        help="generate a file containing random connected graph data",
    )
    generate.add_argument("-g", "--graph-file", type=Path, required=True, help="output filename")
    generate.add_argument(
        "-n",
        "--nodes-count",
        type=positive_integer,
        required=True,
        help="number of nodes (indexed from 1 to nodes count)",
    )
    generate.add_argument(
        "-e", "--edges-count", type=positive_integer, required=True, help="number of edges"
    )
    generate.add_argument(
        "-m",
        "--max-weight",
        type=positive_integer,
        default=config.generator.max_weight,
        help="maximum weight of an edge (default: %(default)s)",
    )
    generate.add_argument(
        "--seed", type=int, default=config.generator.seed, help="random seed"
    )
    generate.set_defaults(handler=_generate_graph_file)

    run = subparsers.add_parser(
        "run-algorithm",
        aliases=["t"],
        help="run an algorithm using data from a graph file",
    )
    run.add_argument(
        "-t",
        "--task-file",
        type=existing_file(config.graph),
        required=True,
        help="file containing graph data, relative paths are resolved against the data directory",
    )
    run.add_argument(
        "-a",
        "--algorithm",
        choices=["kruskal", "dijkstra"],
        default=config.algorithm.default_algorithm,
        help="algorithm to run (default: %(default)s)",
    )
    run.add_argument("-s", "--start-node", type=positive_integer, help="dijkstra start node")
    run.add_argument("-d", "--end-node", type=positive_integer, help="dijkstra end node")
    run.set_defaults(handler=_run_algorithm)

    return parser


def _generate_graph_file(args: argparse.Namespace, config: AppConfig) -> None:
    path = generate_graph_file(
        args.graph_file,
        nodes_count=args.nodes_count,
        edges_count=args.edges_count,
        max_weight=args.max_weight,
        seed=args.seed,
    )
    print(f"Graph file with path {str(path)!r} successfully generated!")


def _run_algorithm(args: argparse.Namespace, config: AppConfig) -> None:
    service = AlgorithmRunnerService.create_default(config)
    result = service.run(
        args.task_file,
        algorithm=args.algorithm,
        start_node=args.start_node,
        end_node=args.end_node,
    )
    print(result)


def main(argv: Optional[List[str]] = None, config: Optional[AppConfig] = None) -> int:
    """Entry point of the ``graphs`` command, returns the exit code."""
    config = config or get_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 2

    if args.handler is _run_algorithm and args.algorithm == "dijkstra":
        if args.start_node is None or args.end_node is None:
            parser.error("dijkstra requires --start-node and --end-node")

    configure_logging(config.observability, args.log_level)

    try:
        args.handler(args, config)
    except GraphsError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
