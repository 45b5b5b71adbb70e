"""Disjoint set (Union-Find) with path halving and union by rank."""

from __future__ import annotations

from typing import List


class UnionFind:
    """Disjoint sets of the node indices ``0..n``.

    Index 0 is allocated so node indices can be used directly, but it is
    never part of a graph.

    Example:
        union_find = UnionFind(3)
        union_find.merge_parents(1, 2)   # True
        union_find.merge_parents(2, 1)   # False, already in one set
    """

    def __init__(self, n: int) -> None:
        self.parent: List[int] = list(range(n + 1))
        self.rank: List[int] = [0] * (n + 1)

    def __len__(self) -> int:
        return len(self.parent)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.parent):
            raise IndexError(
                f"index {index} out of range 0..{len(self.parent) - 1}"
            )

    def find_parent(self, index: int) -> int:
        """Return the representative of ``index`` without modifying the sets."""
        self._check_index(index)

        current = index
        while self.parent[current] != current:
            current = self.parent[current]
        return current

    def find_mut_parent(self, index: int) -> int:
        """Return the representative of ``index``, halving the path to it.

        Every visited node is re-attached to its grandparent.
        """
        self._check_index(index)

        parent = self.parent[index]
        while parent != index:
            grandparent = self.parent[parent]
            self.parent[index] = grandparent
            index = parent
            parent = grandparent
        return index

    def union(self, x: int, y: int) -> bool:
        """Merge the sets containing ``x`` and ``y``.

        The root of the lower-ranked tree is attached under the other
        root. On a tie the root of ``x`` wins and its rank grows.

        Returns:
            True if two different sets were merged.
        """
        if x == y:
            return False

        x_root = self.find_mut_parent(x)
        y_root = self.find_mut_parent(y)
        if x_root == y_root:
            return False

        x_rank = self.rank[x_root]
        y_rank = self.rank[y_root]

        if x_rank < y_rank:
            self.parent[x_root] = y_root
        elif x_rank > y_rank:
            self.parent[y_root] = x_root
        else:
            self.parent[y_root] = x_root
            self.rank[x_root] += 1

        return True

    def merge_parents(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y`` if they are different.

        Returns:
            True if a merge happened.
        """
        x_parent = self.find_parent(x)
        y_parent = self.find_parent(y)
        if x_parent == y_parent:
            return False
        return self.union(x_parent, y_parent)

    def connected(self, x: int, y: int) -> bool:
        return self.find_parent(x) == self.find_parent(y)
