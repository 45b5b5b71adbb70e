from dataclasses import replace
from itertools import combinations
from pathlib import Path

import pytest

from graphs.algorithms.kruskal import calculate_min_total_weight, minimum_spanning_tree
from graphs.domain.models import Edge, Graph
from graphs.generator import generate_graph_file
from graphs.graph import build_graph, build_graph_from_file, build_graph_from_string

DATA_DIR = Path(__file__).resolve().parent / "data"


def _brute_force_min_weight(graph: Graph) -> int:
    """Minimum over every subset of nodes_count - 1 edges forming a spanning tree."""
    tree_size = graph.nodes_count - 1
    best = None

    for subset in combinations(graph.edges, tree_size):
        components = {node: {node} for node in range(1, graph.nodes_count + 1)}
        is_tree = True
        for edge in subset:
            a = components[edge.from_index]
            b = components[edge.to_index]
            if a is b:
                is_tree = False
                break
            a |= b
            for node in b:
                components[node] = a
        if is_tree:
            total = sum(edge.weight for edge in subset)
            best = total if best is None else min(best, total)

    assert best is not None
    return best


@pytest.mark.parametrize(
    "dataset, expected",
    [(1, 170), (2, 0), (3, 0), (4, 11), (5, -7), (6, 900)],
)
def test_passing_datasets(dataset, expected):
    graph = build_graph_from_file(DATA_DIR / "passing" / f"{dataset}.txt")

    assert calculate_min_total_weight(graph) == expected


def test_duplicates_and_cycles_are_discarded():
    graph = build_graph_from_string("3 4\n1 2 100\n2 1 80\n3 1 90\n1 3 110")

    tree = minimum_spanning_tree(graph)

    assert tree.total_weight == 170
    assert tree.edges == (Edge(2, 1, 80), Edge(3, 1, 90))


def test_graph_is_not_modified():
    graph = build_graph_from_string("3 3\n1 2 30\n2 3 10\n1 3 20")
    edges_before = graph.edges

    calculate_min_total_weight(graph)

    assert graph.edges == edges_before


def test_results_are_identical_on_copies():
    graph = build_graph_from_file(DATA_DIR / "passing" / "4.txt")

    first = calculate_min_total_weight(replace(graph))
    second = calculate_min_total_weight(replace(graph))

    assert first == second


def test_equal_weights_keep_input_order():
    graph = build_graph_from_string("3 3\n1 2 5\n2 3 5\n1 3 5")

    tree = minimum_spanning_tree(graph)

    assert tree.edges == (Edge(1, 2, 5), Edge(2, 3, 5))


def test_spanning_tree_has_nodes_count_minus_one_edges():
    graph = build_graph_from_file(DATA_DIR / "passing" / "4.txt")

    tree = minimum_spanning_tree(graph)

    assert len(tree.edges) == graph.nodes_count - 1
    assert tree.nodes_count == graph.nodes_count
    assert tree.total_weight == sum(edge.weight for edge in tree.edges)


@pytest.mark.parametrize("seed", range(15))
def test_matches_brute_force_on_random_graphs(tmp_path, seed):
    graph_file = generate_graph_file(
        tmp_path / "graph.txt", nodes_count=5, edges_count=8, max_weight=20, seed=seed
    )
    graph = build_graph(graph_file)

    assert calculate_min_total_weight(graph) == _brute_force_min_weight(graph)
