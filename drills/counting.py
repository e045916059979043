"""Puzzles solved by counting: cards, socks, ratings, PINs and recipes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from itertools import product

_KEYPAD = {
    "1": ("1", "2", "4"),
    "2": ("1", "2", "3", "5"),
    "3": ("2", "3", "6"),
    "4": ("1", "4", "5", "7"),
    "5": ("2", "4", "5", "6", "8"),
    "6": ("3", "5", "6", "9"),
    "7": ("4", "7", "8"),
    "8": ("0", "5", "7", "8", "9"),
    "9": ("6", "8", "9"),
    "0": ("0", "8"),
}


def winning_card(cards: Iterable[Iterable[int]]) -> int:
    """Highest card that appears exactly once across all hands, or -1."""
    frequency = Counter(card for hand in cards for card in hand)
    return max((card for card, count in frequency.items() if count == 1), default=-1)


def sock_merchant(socks: Iterable[int]) -> int:
    """Number of matching pairs among socks identified by colour."""
    return sum(count // 2 for count in Counter(socks).values())


def most_loved_dish(ratings: Iterable[Sequence[int]]) -> int:
    """ID of the dish with the highest average rating; ties go to the smaller ID.

    Only dishes with a positive average qualify; -1 when none does.
    """
    totals: dict[int, list[int]] = {}
    for dish, rating in ratings:
        entry = totals.setdefault(dish, [0, 0])
        entry[0] += rating
        entry[1] += 1
    averages = {dish: total / count for dish, (total, count) in totals.items()}
    candidates = [(dish, avg) for dish, avg in averages.items() if avg > 0]
    if not candidates:
        return -1
    return min(candidates, key=lambda item: (-item[1], item[0]))[0]


def _halve(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return value // 2 if value >= 0 else -(-value // 2)


def most_loved_dish_running(reviews: Iterable[Sequence[int]]) -> tuple[int, int]:
    """Pick a dish by a running score and return ``(dish, score)``.

    A dish's first rating (or any rating while its score is zero) counts in
    full; later ratings add half their value, truncated. The dish with the
    highest positive score wins, the earliest-reviewed one on ties;
    ``(0, 0)`` when no score is positive.
    """
    scores: dict[int, int] = {}
    for dish, rating in reviews:
        current = scores.get(dish, 0)
        scores[dish] = current + (rating if current == 0 else _halve(rating))
    best_dish, best_score = 0, 0
    for dish, score in scores.items():
        if score > best_score:
            best_dish, best_score = dish, score
    return best_dish, best_score


def get_pins(observed: str) -> list[str]:
    """All PINs that could have been meant by ``observed``, sorted.

    Every digit may be itself or a horizontally or vertically adjacent key.
    A '0' after the first position is taken as typed.
    """
    if not observed:
        raise ValueError("observed PIN must not be empty")
    unknown = set(observed) - _KEYPAD.keys()
    if unknown:
        raise ValueError(f"not keypad digits: {''.join(sorted(unknown))}")
    first, rest = observed[0], observed[1:]
    options = [_KEYPAD[first]]
    options.extend(("0",) if digit == "0" else _KEYPAD[digit] for digit in rest)
    return sorted("".join(choice) for choice in product(*options))


def partial_sums(nums: Sequence[int], parts: int) -> list[int]:
    """Split ``nums`` into ``parts`` nearly equal chunks and sum them concurrently.

    Chunks hold ceil(len / parts) items each; trailing chunks may be short or
    empty. The sums are returned in chunk order.
    """
    if parts < 1:
        raise ValueError("parts must be at least 1")
    size = -(-len(nums) // parts)
    chunks = [nums[index * size:(index + 1) * size] for index in range(parts)]
    with ThreadPoolExecutor(max_workers=parts) as pool:
        return list(pool.map(sum, chunks))


def count_recipes(recipes: Iterable[str], counts: Mapping[str, int] | None = None) -> dict[str, int]:
    """Add one to the tally of every recipe seen, starting from ``counts``.

    ``counts`` is not modified; a new mapping is returned.
    """
    tally = Counter(counts or {})
    tally.update(recipes)
    return dict(tally)