"""Delivery windows, token expiry, date reformatting and timeout settings."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

DEFAULT_GRAPHQL_TIMEOUT = timedelta(seconds=5)
TOKEN_LIFETIME = timedelta(hours=24)

_HOUR_DIGITS = re.compile(r"[+-]?[0-9]+")
_SECONDS = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_RFC3339 = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})[Tt]"
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<zone>[Zz]|[+-][0-9]{2}:[0-9]{2})"
)


class TokenExpiredError(Exception):
    """Raised when a token is used after its lifetime has passed."""


def convert_to_24h(time: str) -> int:
    """Convert an hour such as ``"7AM"`` or ``"11PM"`` to a 24-hour number.

    The last two characters are the suffix; 12 is added whenever the text
    contains ``PM``. Raises ValueError when the hour is not a number.
    """
    digits = time[:-2]
    if len(time) < 2 or not _HOUR_DIGITS.fullmatch(digits):
        raise ValueError(f"invalid hour: {time!r}")
    hour = int(digits)
    if "PM" in time:
        hour += 12
    return hour


def _window_field(delivery: str, index: int) -> str:
    fields = delivery.split(" ")
    if len(fields) <= index:
        raise ValueError(f"invalid delivery window: {delivery!r}")
    return fields[index]


def get_start_time(delivery: str) -> int:
    """Start hour of a window written like ``"Wednesday 7AM - 7PM"``."""
    return convert_to_24h(_window_field(delivery, 1))


def get_end_time(delivery: str) -> int:
    """End hour of a window written like ``"Wednesday 7AM - 7PM"``."""
    return convert_to_24h(_window_field(delivery, 3))


def _parse_rfc3339(value: str) -> datetime:
    match = _RFC3339.fullmatch(value)
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {value!r}")
    zone = match["zone"]
    if zone in ("Z", "z"):
        tzinfo = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        offset = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
        tzinfo = timezone(sign * offset)
    fraction = match["fraction"] or ""
    microsecond = int((fraction + "000000")[:6])
    return datetime(
        int(match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
        microsecond,
        tzinfo=tzinfo,
    )


def is_expired(created_at: str, now: datetime | None = None) -> bool:
    """Check a token created at the RFC 3339 time ``created_at``.

    Returns False while the token is younger than 24 hours and raises
    TokenExpiredError once that has passed. Raises ValueError when the
    timestamp cannot be parsed.
    """
    created = _parse_rfc3339(created_at)
    current = now if now is not None else datetime.now(timezone.utc)
    if current > created + TOKEN_LIFETIME:
        raise TokenExpiredError("token has expired")
    return False


def format_valuation_date(value: str) -> str:
    """Turn ``"YYYY/MM/DD"`` into ``"YYYY-MM-DD"``."""
    parts = value.split("/")
    if len(parts) != 3:
        raise ValueError("Wrong format")
    return "-".join(parts)


def graphql_timeout(value: str) -> timedelta:
    """Timeout from a number of seconds given as text.

    Text that is not a number, or that gives zero, yields the 5 second default.
    """
    if _SECONDS.fullmatch(value):
        timeout = timedelta(seconds=float(value))
        if timeout:
            return timeout
    return DEFAULT_GRAPHQL_TIMEOUT