import pytest

from dsakit.array_stack import ArrayStack, StackEmptyError, StackFullError


def test_example_sequence():
    s = ArrayStack(5)
    assert str(s) == "Stack is Empty"
    s.push(1)
    assert str(s) == "1"
    s.push(2)
    s.push(3)
    assert str(s) == "3 2 1"
    s.pop()
    assert str(s) == "2 1"
    assert not s.is_empty()
    assert not s.is_full()
    assert s.top() == 2
    assert s.top_and_pop() == 2
    assert str(s) == "1"
    s.clear()
    assert str(s) == "Stack is Empty"


def test_full_stack_rejects_push():
    s = ArrayStack(2)
    s.push(1)
    s.push(2)
    assert s.is_full()
    with pytest.raises(StackFullError):
        s.push(3)
    assert list(s) == [2, 1]


@pytest.mark.parametrize("op", ["pop", "top", "top_and_pop"])
def test_empty_operations_raise(op):
    with pytest.raises(StackEmptyError):
        getattr(ArrayStack(3), op)()


def test_lifo_round_trip():
    s = ArrayStack(10)
    values = list(range(10))
    for v in values:
        s.push(v)
    assert len(s) == 10
    assert [s.top_and_pop() for _ in values] == values[::-1]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ArrayStack(-1)