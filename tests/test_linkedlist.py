import pytest

from ftprintf.linkedlist import LinkedList


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_preserves_order():
    assert list(LinkedList(["a", "b", "c"])) == ["a", "b", "c"]


def test_add_front_prepends():
    lst = LinkedList(["b"])
    lst.add_front("a")
    assert list(lst) == ["a", "b"]
    assert lst.last() == "b"


def test_add_back_appends():
    lst = LinkedList(["a"])
    lst.add_back("b")
    assert list(lst) == ["a", "b"]
    assert lst.last() == "b"


def test_add_back_on_empty_list():
    lst = LinkedList()
    lst.add_back("only")
    assert list(lst) == ["only"]
    assert len(lst) == 1


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    lst.add_front("x")
    assert lst.last() == "x"


def test_len_counts_elements():
    lst = LinkedList(range(5))
    lst.add_front(-1)
    lst.add_back(5)
    assert len(lst) == 7


def test_clear_calls_delete_in_order_and_empties():
    seen = []
    lst = LinkedList(["one", "two", "three"])
    lst.clear(seen.append)
    assert seen == ["one", "two", "three"]
    assert len(lst) == 0
    assert list(lst) == []


def test_clear_then_reuse():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.add_back(3)
    assert list(lst) == [3]
    assert lst.last() == 3


def test_iterate_visits_every_content():
    seen = []
    LinkedList(["x", "y"]).iterate(seen.append)
    assert seen == ["x", "y"]


def test_map_reverses_order():
    lst = LinkedList(["a", "b", "c"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["C", "B", "A"]
    assert list(lst) == ["a", "b", "c"]


def test_map_length_matches():
    lst = LinkedList(range(10))
    assert len(lst.map(lambda v: v)) == len(lst)


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(value):
        if value == "boom":
            raise RuntimeError("failed")
        return value + "!"

    lst = LinkedList(["a", "b", "boom", "c"])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == ["b!", "a!"]


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str.upper)) == []