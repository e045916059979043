"""String puzzles: word counts, reductions, password checks and more."""

from __future__ import annotations

import string
from collections import Counter
from itertools import combinations, pairwise

_NUMBERS = frozenset(string.digits)
_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_SPECIAL = frozenset("!@#$%^&*()-+")
_MIN_PASSWORD_LENGTH = 6

_ALPHABET = {letter: position for position, letter in enumerate(string.ascii_uppercase)}

_DURATION_UNITS = (
    ("year", 365 * 24 * 60 * 60),
    ("day", 24 * 60 * 60),
    ("hour", 60 * 60),
    ("minute", 60),
    ("second", 1),
)


def camelcase(s: str) -> int:
    """Count the words in a camelCase string (first word is lowercase)."""
    return 1 + sum(1 for char in s if char.isupper())


def super_reduced_string(s: str) -> str:
    """Repeatedly delete adjacent equal pairs; return what is left."""
    stack: list[str] = []
    for char in s:
        if stack and stack[-1] == char:
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack) if stack else "Empty String"


def minimum_number(password: str) -> int:
    """Return how many characters must be added to make ``password`` strong."""
    seen = set()
    for char in password:
        for name, group in (
            ("number", _NUMBERS),
            ("lower", _LOWER),
            ("upper", _UPPER),
            ("special", _SPECIAL),
        ):
            if char in group:
                seen.add(name)
                break
    missing = 4 - len(seen)
    if len(password) + missing < _MIN_PASSWORD_LENGTH:
        return _MIN_PASSWORD_LENGTH - len(password)
    return missing


def _alternates(s: str, first: str, second: str) -> bool:
    last = None
    for char in s:
        if char != first and char != second:
            continue
        if char == last:
            return False
        last = char
    return True


def alternate(s: str) -> int:
    """Length of the longest string of two alternating characters left
    after deleting every other character; 0 if none can be formed."""
    counts = Counter(s)
    return max(
        (
            counts[first] + counts[second]
            for first, second in combinations(counts, 2)
            if _alternates(s, first, second)
        ),
        default=0,
    )


def reverse_only_letters(s: str) -> str:
    """Reverse the letters of ``s`` while every other character keeps its place."""
    letters = [char for char in s if char.isalpha()]
    return "".join(letters.pop() if char.isalpha() else char for char in s)


def is_palindrome_permutation(s: str) -> bool:
    """Return True if some permutation of ``s`` is a palindrome."""
    odd: set[str] = set()
    for char in s:
        odd ^= {char}
    return len(odd) <= 1


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for end, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = end
        best = max(best, end - start + 1)
    return best


def get_time(s: str) -> int:
    """Total rotation time to type ``s`` on a circular A-Z wheel starting at 'A'.

    Each step adds the position difference of the previous letter minus the
    next one, wrapped to the short way round when it exceeds half the wheel.
    Characters outside A-Z count as position 0.
    """
    half = len(_ALPHABET) // 2
    total = 0
    for current, following in pairwise("A" + s):
        step = _ALPHABET.get(current, 0) - _ALPHABET.get(following, 0)
        if step > half:
            step = len(_ALPHABET) - step
        total += step
    return total


def format_duration(seconds: int) -> str:
    """Render a number of seconds as human-readable text."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    if seconds == 0:
        return "now"
    parts = []
    for name, size in _DURATION_UNITS:
        if seconds >= size:
            count, seconds = divmod(seconds, size)
            parts.append(f"{count} {name}{'s' if count > 1 else ''}")
    if len(parts) > 1:
        return f"{', '.join(parts[:-1])} and {parts[-1]}"
    return parts[0]