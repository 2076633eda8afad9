import pytest

from datastructs.stack import Stack


def test_empty_stack_raises():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.peek()
    with pytest.raises(IndexError):
        stack.pop()
    assert len(stack) == 0
    assert stack.is_empty()
    assert stack.capacity == 5


def test_count_peek_is_empty():
    stack = Stack()

    stack.push(1)
    assert len(stack) == 1
    assert not stack.is_empty()
    assert stack.peek() == 1

    stack.push(15)
    assert len(stack) == 2
    assert not stack.is_empty()
    assert stack.peek() == 15

    stack.push(25)
    assert len(stack) == 3
    assert stack.peek() == 25

    stack.push(15)
    assert len(stack) == 4
    assert stack.peek() == 15

    stack.push(95)
    assert len(stack) == 5
    assert stack.peek() == 95
    assert stack.capacity == 5

    stack.push(100)
    assert len(stack) == 6
    assert stack.peek() == 100
    assert stack.capacity == 10

    assert stack.pop() == 100
    assert len(stack) == 5
    assert stack.capacity == 10
    assert stack.peek() == 95

    assert stack.pop() == 95
    assert len(stack) == 4
    assert stack.capacity == 10
    assert stack.peek() == 15

    assert stack.pop() == 15
    assert len(stack) == 3
    assert stack.capacity == 10
    assert stack.peek() == 25

    assert stack.pop() == 25
    assert len(stack) == 2
    assert stack.capacity == 5
    assert stack.peek() == 15

    assert stack.pop() == 15
    assert len(stack) == 1
    assert stack.capacity == 5
    assert stack.peek() == 1


def test_pop_returns_items_in_reverse_order():
    stack = Stack()
    for value in range(12):
        stack.push(value)
    popped = [stack.pop() for _ in range(12)]
    assert popped == list(reversed(range(12)))
    assert stack.is_empty()
    assert stack.capacity >= 5