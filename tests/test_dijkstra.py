import pytest

from graphs.algorithms.dijkstra import find_shortest_path, find_shortest_path_length
from graphs.domain.errors import (
    DijkstraError,
    InvalidEndNodeError,
    InvalidStartNodeError,
    NegativeEdgeWeightError,
    UnreachableNodeError,
)
from graphs.domain.models import Edge, Graph
from graphs.generator import generate_graph_file
from graphs.graph import build_graph, build_graph_from_string


def _brute_force_distance(graph: Graph, start: int, end: int) -> int:
    """Minimum weight over every simple path from start to end."""
    neighbours = {node: [] for node in range(1, graph.nodes_count + 1)}
    for edge in graph.edges:
        neighbours[edge.from_index].append((edge.to_index, edge.weight))
        neighbours[edge.to_index].append((edge.from_index, edge.weight))

    best = None

    def walk(node, visited, total):
        nonlocal best
        if node == end:
            best = total if best is None else min(best, total)
            return
        for other, weight in neighbours[node]:
            if other not in visited:
                walk(other, visited | {other}, total + weight)

    walk(start, {start}, 0)
    assert best is not None
    return best


@pytest.fixture
def five_nodes_graph():
    # node 5 only hangs off node 2, the 1 -> 4 answer goes through node 3
    return build_graph_from_string("5 4\n1 2 50\n1 3 40\n3 4 20\n2 5 70")


def test_shortest_path_goes_through_cheaper_node(five_nodes_graph):
    assert find_shortest_path_length(five_nodes_graph, 1, 4) == 60


def test_shortest_path_nodes(five_nodes_graph):
    result = find_shortest_path(five_nodes_graph, 1, 4)

    assert result.path == (1, 3, 4)
    assert result.distance == 60
    assert result.num_stops == 3


def test_edges_are_undirected(five_nodes_graph):
    assert find_shortest_path_length(five_nodes_graph, 4, 1) == 60
    assert find_shortest_path(five_nodes_graph, 5, 4).path == (5, 2, 1, 3, 4)


def test_same_start_and_end_is_zero(five_nodes_graph):
    assert find_shortest_path_length(five_nodes_graph, 3, 3) == 0
    assert find_shortest_path(five_nodes_graph, 3, 3).path == (3,)


def test_indirect_path_is_shorter_than_direct_edge():
    graph = build_graph_from_string("3 3\n1 3 10\n1 2 3\n2 3 4")

    result = find_shortest_path(graph, 1, 3)

    assert result.distance == 7
    assert result.path == (1, 2, 3)


def test_stale_heap_entries_are_skipped():
    # node 3 is first reached with 100, then improved to 2 through node 2
    graph = build_graph_from_string("4 4\n1 3 100\n1 2 1\n2 3 1\n3 4 1")

    assert find_shortest_path_length(graph, 1, 4) == 3


@pytest.mark.parametrize("start_node", [0, 6, 100])
def test_invalid_start_node(five_nodes_graph, start_node):
    with pytest.raises(InvalidStartNodeError) as exc_info:
        find_shortest_path_length(five_nodes_graph, start_node, 1)

    assert exc_info.value.start_node == start_node
    assert exc_info.value.nodes_count == 5


@pytest.mark.parametrize("end_node", [0, 6])
def test_invalid_end_node(five_nodes_graph, end_node):
    with pytest.raises(InvalidEndNodeError) as exc_info:
        find_shortest_path_length(five_nodes_graph, 1, end_node)

    assert exc_info.value.end_node == end_node
    assert exc_info.value.nodes_count == 5


def test_start_node_is_validated_first(five_nodes_graph):
    with pytest.raises(InvalidStartNodeError):
        find_shortest_path_length(five_nodes_graph, 9, 9)


def test_negative_weight_is_rejected():
    graph = build_graph_from_string("3 2\n1 2 5\n2 3 -1")

    with pytest.raises(NegativeEdgeWeightError) as exc_info:
        find_shortest_path_length(graph, 1, 3)

    assert exc_info.value.edge == Edge(2, 3, -1)
    assert isinstance(exc_info.value, DijkstraError)


def test_unreachable_node_raises_instead_of_crashing():
    # built directly: the builder would refuse this disconnected graph
    graph = Graph(nodes_count=3, edges=(Edge(1, 2, 5),))

    with pytest.raises(UnreachableNodeError) as exc_info:
        find_shortest_path_length(graph, 1, 3)

    assert exc_info.value.start_node == 1
    assert exc_info.value.end_node == 3


def test_zero_weight_edges():
    graph = build_graph_from_string("3 2\n1 2 0\n2 3 0")

    assert find_shortest_path_length(graph, 1, 3) == 0


@pytest.mark.parametrize("seed", range(15))
def test_matches_brute_force_on_random_graphs(tmp_path, seed):
    graph_file = generate_graph_file(
        tmp_path / "graph.txt", nodes_count=6, edges_count=9, max_weight=30, seed=seed
    )
    graph = build_graph(graph_file)

    for start in range(1, graph.nodes_count + 1):
        for end in range(1, graph.nodes_count + 1):
            assert find_shortest_path_length(graph, start, end) == _brute_force_distance(
                graph, start, end
            )


@pytest.mark.parametrize("seed", range(5))
def test_path_weights_add_up_to_distance(tmp_path, seed):
    graph_file = generate_graph_file(
        tmp_path / "graph.txt", nodes_count=8, edges_count=14, max_weight=50, seed=seed
    )
    graph = build_graph(graph_file)
    weights = {}
    for edge in graph.edges:
        for key in ((edge.from_index, edge.to_index), (edge.to_index, edge.from_index)):
            weights[key] = min(weights.get(key, edge.weight), edge.weight)

    result = find_shortest_path(graph, 1, graph.nodes_count)

    assert result.path[0] == 1
    assert result.path[-1] == graph.nodes_count
    assert sum(weights[pair] for pair in zip(result.path, result.path[1:])) == result.distance
