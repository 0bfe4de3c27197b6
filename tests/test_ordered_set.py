import pytest

from algoshelf.ordered_set import IndexedSet, run_queries


def test_elements_are_sorted_and_unique():
    s = IndexedSet([5, 1, 5, 3])
    assert list(s) == [1, 3, 5]
    assert len(s) == 3


def test_find_by_rank():
    s = IndexedSet([10, 30, 20])
    assert [s.find(k) for k in range(len(s))] == [10, 20, 30]


def test_find_out_of_range():
    s = IndexedSet([1, 2])
    with pytest.raises(IndexError):
        s.find(2)
    with pytest.raises(IndexError):
        s.find(-1)


def test_position_is_inverse_of_find():
    s = IndexedSet([4, 8, 15, 16, 23, 42])
    for k in range(len(s)):
        assert s.position(s.find(k)) == k


def test_position_of_absent_value():
    s = IndexedSet([4, 8, 15])
    assert s.position(9) == s.position(15)
    assert s.position(100) == len(s)
    assert s.position(-100) == 0


def test_add_and_remove():
    s = IndexedSet()
    s.add(7)
    s.add(7)
    s.add(2)
    assert len(s) == 2
    s.remove(7)
    s.remove(99)
    assert list(s) == [2]
    assert 7 not in s


def test_run_queries():
    queries = [
        ("add", 5),
        ("add", 3),
        ("find", 0),
        ("findpos", 4),
        ("find", 5),
        ("remove", 3),
        ("find", 0),
        ("bogus", 1),
    ]
    assert run_queries(queries) == [3, 1, -1, 5]