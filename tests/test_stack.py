import pytest

from drills.stack import Stack


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty()
    assert len(stack) == 0


def test_push_then_peek_returns_last_pushed():
    stack = Stack()
    stack.push("Apple")
    stack.push("Melon")
    stack.push("Mangoes")
    assert stack.peek() == "Mangoes"
    assert list(stack) == ["Apple", "Melon", "Mangoes"]


def test_peek_does_not_remove():
    stack = Stack()
    stack.push("Apple")
    assert stack.peek() == "Apple"
    assert stack.peek() == "Apple"
    assert len(stack) == 1


def test_pop_removes_top_and_push_continues():
    stack = Stack()
    for fruit in ("Apple", "Melon", "Mangoes"):
        stack.push(fruit)
    assert stack.pop() == "Mangoes"
    assert list(stack) == ["Apple", "Melon"]
    stack.push("Pineapple")
    assert list(stack) == ["Apple", "Melon", "Pineapple"]


def test_pop_order_is_reverse_of_push():
    items = ["a", "b", "c", "d"]
    stack = Stack()
    for item in items:
        stack.push(item)
    popped = [stack.pop() for _ in items]
    assert popped == list(reversed(items))
    assert stack.is_empty()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()