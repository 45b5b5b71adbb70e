"""Graph theory algorithms working on validated graphs.

* Kruskal's algorithm: weight (and edges) of a minimum spanning tree
* Dijkstra's algorithm: shortest path between two nodes
"""

from .dijkstra import find_shortest_path, find_shortest_path_length
from .kruskal import calculate_min_total_weight, minimum_spanning_tree
from .union_find import UnionFind

__all__ = [
    "UnionFind",
    "calculate_min_total_weight",
    "find_shortest_path",
    "find_shortest_path_length",
    "minimum_spanning_tree",
]
