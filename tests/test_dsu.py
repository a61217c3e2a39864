import io

import pytest

from dsakit.dsu import DisjointSet, count_components, main


def test_fresh_elements_are_their_own_roots():
    dsu = DisjointSet([1, 2, 3])
    assert [dsu.find(v) for v in (1, 2, 3)] == [1, 2, 3]
    assert dsu.size_of(2) == 1


def test_union_merges_sets():
    dsu = DisjointSet(range(1, 6))
    assert dsu.union(1, 2) is True
    assert dsu.union(3, 2) is True
    assert dsu.find(1) == dsu.find(3)
    assert dsu.size_of(3) == 3
    assert dsu.find(4) != dsu.find(1)


def test_union_of_same_set_is_noop():
    dsu = DisjointSet("ab")
    dsu.union("a", "b")
    assert dsu.union("b", "a") is False
    assert dsu.size_of("a") == 2


def test_larger_set_becomes_root():
    dsu = DisjointSet(range(4))
    dsu.union(0, 1)
    dsu.union(0, 2)
    root = dsu.find(0)
    dsu.union(3, 0)
    assert dsu.find(3) == root


def test_unknown_element_raises():
    dsu = DisjointSet([1])
    with pytest.raises(KeyError):
        dsu.find(99)


def test_make_and_membership():
    dsu = DisjointSet()
    dsu.make("x")
    assert "x" in dsu
    assert len(dsu) == 1


def test_count_components_without_edges():
    assert count_components(7, []) == 7


def test_count_components_with_edges():
    assert count_components(5, [(1, 2), (3, 4)]) == 3


def test_main_prints_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 2\n1 2\n2 3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "2"