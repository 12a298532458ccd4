import pytest

from pipechain.linked import LinkedList


def test_init_preserves_order():
    items = ["ls", "-l", "wc"]
    assert list(LinkedList(items)) == items
    assert len(LinkedList(items)) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []


def test_push_front_reverses():
    lst = LinkedList()
    for item in [1, 2, 3]:
        lst.push_front(item)
    assert list(lst) == [3, 2, 1]


def test_push_back_appends():
    lst = LinkedList([1])
    lst.push_back(2)
    lst.push_front(0)
    assert list(lst) == [0, 1, 2]
    assert len(lst) == 3


def test_last_returns_tail():
    lst = LinkedList(["a", "b"])
    assert lst.last() == "b"
    lst.push_back("c")
    assert lst.last() == "c"


def test_last_after_push_front_on_empty():
    lst = LinkedList()
    lst.push_front("only")
    assert lst.last() == "only"


def test_last_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_clear_calls_delete_on_every_item():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []


def test_clear_then_reuse():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(5)
    assert list(lst) == [5]
    assert lst.last() == 5


def test_for_each_visits_in_order():
    seen = []
    LinkedList(["x", "y", "z"]).for_each(seen.append)
    assert seen == ["x", "y", "z"]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10)
    assert list(mapped) == [x * 10 for x in [1, 2, 3]]
    assert list(original) == [1, 2, 3]
    assert len(mapped) == len(original)


def test_map_on_empty_list():
    assert list(LinkedList().map(str)) == []


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [101, 102]


@pytest.mark.parametrize("items", [[], [0], list(range(10))])
def test_len_matches_iteration(items):
    lst = LinkedList(items)
    assert len(lst) == len(list(lst))