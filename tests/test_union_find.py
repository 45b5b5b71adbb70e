import pytest

from graphs.algorithms.union_find import UnionFind


def test_new_creates_singletons_including_unused_zero():
    union_find = UnionFind(4)

    assert len(union_find) == 5
    assert [union_find.find_parent(i) for i in range(5)] == [0, 1, 2, 3, 4]
    assert union_find.rank == [0, 0, 0, 0, 0]


def test_union_of_same_element_is_noop():
    union_find = UnionFind(3)

    assert union_find.union(2, 2) is False
    assert union_find.parent == [0, 1, 2, 3]


def test_union_tie_makes_first_root_the_parent():
    union_find = UnionFind(3)

    assert union_find.union(1, 2) is True
    assert union_find.parent[2] == 1
    assert union_find.rank[1] == 1


def test_union_attaches_lower_rank_under_higher_rank():
    union_find = UnionFind(4)
    union_find.union(1, 2)  # rank[1] == 1

    assert union_find.union(3, 1) is True

    assert union_find.parent[3] == 1
    assert union_find.rank[1] == 1


def test_union_of_already_merged_sets_returns_false():
    union_find = UnionFind(3)
    union_find.union(1, 2)

    assert union_find.union(2, 1) is False
    assert union_find.merge_parents(1, 2) is False


def test_merge_parents_merges_representatives():
    union_find = UnionFind(5)

    assert union_find.merge_parents(1, 2) is True
    assert union_find.merge_parents(3, 4) is True
    assert union_find.merge_parents(2, 4) is True

    root = union_find.find_parent(1)
    assert all(union_find.find_parent(i) == root for i in range(1, 5))
    assert union_find.find_parent(5) == 5
    assert union_find.connected(1, 4)
    assert not union_find.connected(1, 5)


def test_find_parent_does_not_compress():
    union_find = UnionFind(4)
    union_find.parent = [0, 1, 1, 2, 3]  # chain 4 -> 3 -> 2 -> 1

    assert union_find.find_parent(4) == 1
    assert union_find.parent == [0, 1, 1, 2, 3]


def test_find_mut_parent_halves_the_path():
    union_find = UnionFind(5)
    union_find.parent = [0, 1, 1, 2, 3, 4]  # chain 5 -> 4 -> 3 -> 2 -> 1

    assert union_find.find_mut_parent(5) == 1

    # 5 skips to 3, 3 skips to 1
    assert union_find.parent[5] == 3
    assert union_find.parent[3] == 1
    assert union_find.find_parent(5) == 1
    assert union_find.find_parent(4) == 1


@pytest.mark.parametrize("index", [-1, 4])
def test_out_of_range_index_raises(index):
    union_find = UnionFind(3)

    with pytest.raises(IndexError):
        union_find.find_parent(index)
    with pytest.raises(IndexError):
        union_find.find_mut_parent(index)
