import pytest

from orgtree.counting import count_descendants, count_subtree
from orgtree.errors import CyclicHierarchyError
from orgtree.tree import Tree, build_tree


def reachable(tree, node_id):
    seen = set()
    stack = list(tree.children_of.get(node_id, []))
    while stack:
        current = stack.pop()
        seen.add(current)
        stack.extend(tree.children_of.get(current, []))
    return len(seen)


def test_sample_counts(sample_records):
    counts = count_descendants(build_tree(sample_records))

    assert counts["0"] == 11
    assert counts["1"] == 3
    assert counts["2"] == 4
    assert counts["3"] == 1
    assert counts["8"] == 2
    for leaf in ("4", "5", "6", "7", "9", "10", "11"):
        assert counts[leaf] == 0
    assert len(counts) == 12


def test_count_matches_reachable_nodes(sample_records):
    tree = build_tree(sample_records)
    counts = count_descendants(tree)
    for item in sample_records:
        assert counts[item["id"]] == reachable(tree, item["id"])


def test_childless_root():
    assert count_descendants(build_tree([{"id": "solo"}])) == {"solo": 0}


def test_empty_tree():
    assert count_descendants(Tree()) == {}


@pytest.mark.parametrize("n", [1, 2, 7])
def test_chain(chain, n):
    counts = count_descendants(build_tree(chain(n)))
    assert counts["r"] == n
    for i in range(1, n + 1):
        assert counts[f"c{i}"] == n - i


def test_deep_chain_does_not_hit_recursion_limit(chain):
    counts = count_descendants(build_tree(chain(5000)))
    assert counts["r"] == 5000
    assert counts["c5000"] == 0


def test_orphan_subtree_excluded():
    records = [
        {"id": "A"},
        {"id": "B", "parentId": "A"},
        {"id": "C", "parentId": "Z"},
        {"id": "D", "parentId": "C"},
    ]
    counts = count_descendants(build_tree(records))

    assert counts == {"A": 1, "B": 0}


def test_multiple_roots():
    records = [{"id": "a"}, {"id": "b"}, {"id": "a1", "parentId": "a"}]
    assert count_descendants(build_tree(records)) == {"a": 1, "a1": 0, "b": 0}


def test_count_subtree_for_inner_node(sample_records):
    tree = build_tree(sample_records)
    assert count_subtree(tree, "2") == 4
    assert count_subtree(tree, "11") == 0
    assert count_subtree(tree, "missing") == 0


def test_cycle_reachable_from_root_raises():
    # "a" is both a root and, through a duplicate record, a report of "b"
    records = [{"id": "a"}, {"id": "b", "parentId": "a"}, {"id": "a", "parentId": "b"}]

    with pytest.raises(CyclicHierarchyError) as exc:
        count_descendants(build_tree(records))

    assert exc.value.node_id == "a"
    assert "cyclic hierarchy detected referencing id a" in str(exc.value)


def test_self_reference_raises():
    tree = Tree(roots=["a"], children_of={"a": ["a"]})
    with pytest.raises(CyclicHierarchyError):
        count_descendants(tree)


def test_unreachable_cycle_is_ignored():
    records = [{"id": "r"}, {"id": "x", "parentId": "y"}, {"id": "y", "parentId": "x"}]
    assert count_descendants(build_tree(records)) == {"r": 0}


def test_does_not_mutate_tree(sample_records):
    tree = build_tree(sample_records)
    before = {k: list(v) for k, v in tree.children_of.items()}
    count_descendants(tree)
    assert tree.children_of == before
    assert tree.roots == ["0"]
