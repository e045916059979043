"""A last-in, first-out stack of strings."""

from __future__ import annotations

from collections.abc import Iterator


class Stack:
    """LIFO container: items are pushed on top and popped from the top."""

    def __init__(self) -> None:
        self._nodes: list[str] = []

    def push(self, element: str) -> None:
        """Place ``element`` on top of the stack."""
        self._nodes.append(element)

    def peek(self) -> str:
        """Return the top element without removing it."""
        if not self._nodes:
            raise IndexError("peek from an empty stack")
        return self._nodes[-1]

    def pop(self) -> str:
        """Remove and return the top element."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.pop()

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self._nodes!r})"