"""Portable pseudo-random numbers, byte helpers and CRC-32 checksums."""

from __future__ import annotations

from collections.abc import Iterable

_MASK32 = 0xFFFFFFFF

RAND_LOCAL_MAX = 2147483647
CRC32_POLYNOMIAL_REVERSED = 0xEDB88320


class PseudoRandom:
    """Linear congruential generator giving the same sequence on every platform."""

    def __init__(self, seed: int = 1) -> None:
        self._state = seed & _MASK32

    def seed(self, value: int) -> None:
        """Reset the generator state to ``value``."""
        self._state = value & _MASK32

    def next_int(self) -> int:
        """Advance the generator and return a value in ``[0, RAND_LOCAL_MAX)``."""
        self._state = (self._state * 1103515245 + 12345) & _MASK32
        return self._state % RAND_LOCAL_MAX

    def randr(self, minimum: int, maximum: int) -> int:
        """Return a pseudo-random integer in ``[minimum, maximum]``."""
        if maximum < minimum:
            raise ValueError(f"empty range: {minimum}..{maximum}")
        return self.next_int() % (maximum - minimum + 1) + minimum


def copy_reversed(data: Iterable[int]) -> bytes:
    """Return the bytes of ``data`` in reverse order."""
    return bytes(reversed(bytes(data)))


def nibble_to_hex_char(value: int) -> str:
    """Convert a nibble to an upper-case hex digit, or ``'?'`` if out of range."""
    if value < 0:
        raise ValueError(f"nibble must not be negative: {value}")
    if value < 10:
        return chr(ord("0") + value)
    if value < 16:
        return chr(ord("A") + value - 10)
    return "?"


def crc32_init() -> int:
    """Return the initial value of an incremental CRC-32."""
    return _MASK32


def crc32_update(crc: int, data: bytes | bytearray | None) -> int:
    """Feed ``data`` into a running CRC-32; ``None`` yields 0."""
    if data is None:
        return 0
    crc &= _MASK32
    for byte in data:
        crc ^= byte
        for _ in range(8):
            crc = (crc >> 1) ^ (CRC32_POLYNOMIAL_REVERSED if crc & 1 else 0)
    return crc


def crc32_finalize(crc: int) -> int:
    """Finish an incremental CRC-32."""
    return ~crc & _MASK32


def crc32(data: bytes | bytearray | None) -> int:
    """Compute the CCITT CRC-32 of ``data``; ``None`` yields 0."""
    if data is None:
        return 0
    return crc32_finalize(crc32_update(crc32_init(), data))