import pytest

from dsakit.linked_queue import LinkedQueue


def test_example_sequence():
    q = LinkedQueue()
    q.push(10)
    q.push(20)
    q.push(30)
    assert q.front() == 10
    assert len(q) == 3
    q.pop()
    assert q.front() == 20


def test_fifo_order():
    q = LinkedQueue()
    items = list(range(6))
    for x in items:
        q.push(x)
    assert list(q) == items
    assert [q.pop() for _ in items] == items
    assert q.is_empty()


def test_empty_pop_raises():
    with pytest.raises(IndexError):
        LinkedQueue().pop()


def test_empty_front_raises():
    with pytest.raises(IndexError):
        LinkedQueue().front()


def test_reuse_after_emptying():
    q = LinkedQueue()
    q.push("a")
    q.pop()
    q.push("b")
    assert list(q) == ["b"]
    assert len(q) == 1