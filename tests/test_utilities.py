import zlib

import pytest

from coinfall.utilities import (
    RAND_LOCAL_MAX,
    PseudoRandom,
    copy_reversed,
    crc32,
    crc32_finalize,
    crc32_init,
    crc32_update,
    nibble_to_hex_char,
)


def test_crc32_check_value():
    assert crc32(b"123456789") == 0xCBF43926


@pytest.mark.parametrize("data", [b"", b"a", b"HELLO", bytes(range(256)), b"\xff" * 40])
def test_crc32_matches_reference(data):
    assert crc32(data) == zlib.crc32(data)


def test_crc32_none_is_zero():
    assert crc32(None) == 0
    assert crc32_update(crc32_init(), None) == 0


def test_incremental_crc_matches_one_shot():
    data = b"the quick brown fox jumps over the lazy dog"
    crc = crc32_init()
    for start in range(0, len(data), 7):
        crc = crc32_update(crc, data[start:start + 7])
    assert crc32_finalize(crc) == crc32(data)


def test_finalize_is_self_inverse():
    value = crc32_update(crc32_init(), b"abc")
    assert crc32_finalize(crc32_finalize(value)) == value


@pytest.mark.parametrize("value", list(range(16)))
def test_nibble_digits(value):
    assert nibble_to_hex_char(value) == format(value, "X")


def test_nibble_out_of_range():
    assert nibble_to_hex_char(16) == "?"
    assert nibble_to_hex_char(255) == "?"
    with pytest.raises(ValueError):
        nibble_to_hex_char(-1)


def test_copy_reversed_round_trip():
    data = b"\x01\x02\x03\xfe"
    reversed_once = copy_reversed(data)
    assert reversed_once == bytes(reversed(data))
    assert copy_reversed(reversed_once) == data


def test_same_seed_same_sequence():
    first = PseudoRandom()
    first.seed(1234)
    second = PseudoRandom(1234)
    assert [first.next_int() for _ in range(20)] == [second.next_int() for _ in range(20)]


def test_default_seed_is_one():
    default = PseudoRandom()
    seeded = PseudoRandom()
    seeded.seed(1)
    assert [default.next_int() for _ in range(5)] == [seeded.next_int() for _ in range(5)]


def test_reseed_restarts_sequence():
    rng = PseudoRandom(99)
    first = [rng.next_int() for _ in range(10)]
    rng.seed(99)
    assert [rng.next_int() for _ in range(10)] == first


def test_next_int_bounds():
    rng = PseudoRandom(7)
    assert all(0 <= rng.next_int() < RAND_LOCAL_MAX for _ in range(1000))


def test_randr_within_range():
    rng = PseudoRandom(42)
    values = [rng.randr(-5, 5) for _ in range(2000)]
    assert min(values) >= -5 and max(values) <= 5
    assert len(set(values)) > 5


def test_randr_single_value():
    rng = PseudoRandom(3)
    assert {rng.randr(8, 8) for _ in range(50)} == {8}


def test_randr_empty_range():
    with pytest.raises(ValueError):
        PseudoRandom().randr(10, 9)