"""Small exercises: a calculator, closures, filters and parallel searching."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextlib import ExitStack
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Calculation:
    """The operands of an operation and its result."""

    x: int
    y: int
    result: float


def add(x: int, y: int) -> Calculation:
    """Return ``x + y``."""
    return Calculation(x, y, float(x + y))


def subtract(x: int, y: int) -> Calculation:
    """Return ``x - y``."""
    return Calculation(x, y, float(x - y))


def multiply(x: int, y: int) -> Calculation:
    """Return ``x * y``."""
    return Calculation(x, y, float(x * y))


def divide(x: int, y: int) -> Calculation:
    """Return ``x / y``; raises ZeroDivisionError when ``y`` is zero."""
    if y == 0:
        raise ZeroDivisionError("You can not divide by zero")
    return Calculation(x, y, x / y)


def string_to_number(text: str) -> int:
    """Parse a base-10 integer; text that is not one yields 0."""
    if not _INTEGER.fullmatch(text):
        return 0
    return int(text)


def incremented_return() -> int:
    """Return 1, raised by a cleanup step that runs before the value leaves."""
    value = 1

    def bump() -> None:
        nonlocal value
        value += 1

    with ExitStack() as cleanup:
        cleanup.callback(bump)
    return value


def int_min(a: int, b: int) -> int:
    """Return the smaller of two integers."""
    return a if a < b else b


def filter_unique(names: Iterable[str]) -> list[str]:
    """Return the distinct names in the order they first appear."""
    return list(dict.fromkeys(names))


def filter_by_age_range(from_age: int, to_age: int, ages: Iterable[int]) -> list[int]:
    """Return the ages between ``from_age`` and ``to_age`` inclusive."""
    return [age for age in ages if from_age <= age <= to_age]


def incrementor() -> Callable[[], int]:
    """Return a counter that yields 1, 2, 3, ... on successive calls."""
    count = 0

    def increment() -> int:
        nonlocal count
        count += 1
        return count

    return increment


def multiplier(factor: int) -> Callable[[int], int]:
    """Return a function that multiplies its argument by ``factor``."""

    def multiply_by(x: int) -> int:
        return x * factor

    return multiply_by


def find_containing(strings: Sequence[str], substring: str, chunk_size: int) -> list[str]:
    """Strings that contain ``substring``, searched chunk by chunk in parallel.

    Results keep the order of ``strings``.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    chunks = [strings[start:start + chunk_size] for start in range(0, len(strings), chunk_size)]
    if not chunks:
        return []

    def search(chunk: Sequence[str]) -> list[str]:
        return [value for value in chunk if substring in value]

    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        return [match for found in pool.map(search, chunks) for match in found]