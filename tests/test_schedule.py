from datetime import datetime, timedelta, timezone

import pytest

from drills.schedule import (
    TokenExpiredError,
    convert_to_24h,
    format_valuation_date,
    get_end_time,
    get_start_time,
    graphql_timeout,
    is_expired,
)

WINDOW = "Wednesday 7AM - 7PM"
CREATED = "2023-04-28T15:37:42.514862Z"
CREATED_AT = datetime(2023, 4, 28, 15, 37, 42, 514862, tzinfo=timezone.utc)


def test_am_hour_is_unchanged():
    assert convert_to_24h("7AM") == 7


def test_pm_adds_twelve():
    assert convert_to_24h("11PM") == convert_to_24h("11AM") + 12


@pytest.mark.parametrize("bad", ["PM", "xxPM", "", "A"])
def test_invalid_hour_raises(bad):
    with pytest.raises(ValueError):
        convert_to_24h(bad)


def test_window_start_and_end():
    assert get_start_time(WINDOW) == convert_to_24h("7AM")
    assert get_end_time(WINDOW) == convert_to_24h("7PM")


def test_short_window_raises():
    with pytest.raises(ValueError):
        get_end_time("Wednesday 7AM")


def test_fresh_token_is_not_expired():
    assert is_expired(CREATED, CREATED_AT + timedelta(hours=1)) is False


def test_old_token_raises():
    with pytest.raises(TokenExpiredError):
        is_expired(CREATED, CREATED_AT + timedelta(hours=25))


def test_offset_timestamp_is_understood():
    created = "2023-04-28T17:37:42+02:00"
    assert is_expired(created, CREATED_AT + timedelta(hours=23)) is False
    with pytest.raises(TokenExpiredError):
        is_expired(created, CREATED_AT + timedelta(hours=24, seconds=1))


def test_unparseable_timestamp_raises():
    with pytest.raises(ValueError):
        is_expired("yesterday", CREATED_AT)


def test_valuation_date_reformat():
    assert format_valuation_date("2023/04/01") == "2023-04-01"


def test_valuation_date_wrong_format():
    with pytest.raises(ValueError, match="Wrong format"):
        format_valuation_date("2023-04-01")


def test_timeout_from_seconds():
    assert graphql_timeout("10") == timedelta(seconds=10)


@pytest.mark.parametrize("value", ["", "abc", "0", "10ms"])
def test_timeout_falls_back_to_default(value):
    assert graphql_timeout(value) == timedelta(seconds=5)