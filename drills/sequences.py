"""Puzzles over sequences: sorting, merging, duplicates and sliding windows."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Sequence


def big_sorting(unsorted: Iterable[str]) -> list[str]:
    """Sort numeric strings of any length by their integer value.

    A shorter string is the smaller number; strings of equal length compare
    lexicographically.
    """
    return sorted(unsorted, key=lambda value: (len(value), value))


def _insertion_steps(state: list[int]) -> Iterator[list[int]]:
    target = state[-1]
    position = len(state) - 2
    while position >= 0 and state[position] > target:
        state[position + 1] = state[position]
        yield list(state)
        position -= 1
    state[position + 1] = target
    yield list(state)


def insertion_sort_steps(arr: Sequence[int]) -> list[list[int]]:
    """Insert the last element of an otherwise sorted list into place.

    Returns a snapshot of the list after every shift and a final snapshot
    after the insertion. The input is left unchanged.
    """
    if not arr:
        raise ValueError("cannot insert into an empty list")
    return list(_insertion_steps(list(arr)))


def find_duplicates(nums: Iterable[int]) -> list[int]:
    """Find the repeated values in a list of numbers taken from 1..n.

    Uses a cyclic sort; the values left out of their home position after
    sorting are the duplicates, reported in position order.
    """
    values = list(nums)
    size = len(values)
    if any(not 1 <= value <= size for value in values):
        raise ValueError(f"every value must lie between 1 and {size}")
    index = 0
    while index < size:
        home = values[index] - 1
        if values[index] != values[home]:
            values[index], values[home] = values[home], values[index]
        else:
            index += 1
    return [value for position, value in enumerate(values, start=1) if value != position]


def longest_consecutive(arr: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers found in ``arr``."""
    numbers = set(arr)
    longest = 0
    for number in numbers:
        if number - 1 in numbers:
            continue
        length = 1
        while number + length in numbers:
            length += 1
        longest = max(longest, length)
    return longest


def merge_sorted_arrays(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list.

    On equal values the element from ``first`` comes before the one from
    ``second``.
    """
    return list(heapq.merge(first, second))


def reverse_in_place(items: list) -> None:
    """Reverse ``items`` in place."""
    items.reverse()


def segment(x: int, space: Sequence[int]) -> int:
    """Return the largest of the minima of every window of ``x`` items.

    When ``x`` exceeds the length of ``space`` the single window is the
    whole sequence.
    """
    if x < 1:
        raise ValueError("window size must be at least 1")
    if not space:
        raise ValueError("space must not be empty")
    width = min(x, len(space))
    window: deque[int] = deque()
    best: int | None = None
    for index, value in enumerate(space):
        while window and space[window[-1]] >= value:
            window.pop()
        window.append(index)
        if window[0] <= index - width:
            window.popleft()
        if index >= width - 1:
            minimum = space[window[0]]
            best = minimum if best is None else max(best, minimum)
    assert best is not None
    return best