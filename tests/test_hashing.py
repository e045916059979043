import base64

import pytest

from drills.hashing import HASH_SIZE, SALT_SIZE, check_hash_key, hash_key_with_salt, hash_vin

MADE_UP_VIN = "TESTVIN0000000001"


def test_hash_vin_of_empty_string_is_offset_basis():
    assert hash_vin("") == "2166136261"


def test_hash_vin_known_vector():
    assert hash_vin("a") == "3826002220"


def test_hash_vin_is_deterministic_decimal():
    first = hash_vin(MADE_UP_VIN)
    assert first == hash_vin(MADE_UP_VIN)
    assert first.isdigit()
    assert 0 <= int(first) < 2**32


def test_hash_vin_differs_for_different_input():
    assert hash_vin(MADE_UP_VIN) != hash_vin(MADE_UP_VIN[:-1] + "2")


def test_hash_round_trip():
    key = "secret"
    hashed = hash_key_with_salt(key)
    assert check_hash_key(key, hashed) is True


def test_wrong_key_does_not_match():
    hashed = hash_key_with_salt("secret")
    assert check_hash_key("password", hashed) is False


def test_hash_layout_is_key_then_salt():
    hashed = hash_key_with_salt("token")
    assert len(base64.b64decode(hashed)) == HASH_SIZE + SALT_SIZE


def test_salt_makes_hashes_differ_but_both_verify():
    first = hash_key_with_salt("secret")
    second = hash_key_with_salt("secret")
    assert first != second
    assert check_hash_key("secret", first) and check_hash_key("secret", second)


def test_invalid_base64_raises():
    with pytest.raises(ValueError):
        check_hash_key("secret", "not base64 !!")


def test_too_short_hash_raises():
    short = base64.b64encode(b"abc").decode()
    with pytest.raises(ValueError):
        check_hash_key("secret", short)