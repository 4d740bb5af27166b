"""Bitmaps for the player ship, silver coins and asteroids.

Each bitmap holds big-endian RGB565 pixels, row by row, two bytes per pixel.
Colour 0x0000 is drawn as transparent by default.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence


def _pixel_art(palette: Mapping[str, int], rows: Sequence[str]) -> bytes:
    """Encode rows of palette characters as big-endian RGB565 bytes."""
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows of a bitmap must have the same width")
    return b"".join(palette[char].to_bytes(2, "big") for row in rows for char in row)


_PLAYER_PALETTE = {
    ".": 0x0000,
    "o": 0x782E,
    "m": 0xF81F,
    "s": 0xF2DE,
    "w": 0xFFFF,
}

PLAYER_WIDTH = 16
PLAYER_HEIGHT = 16
PLAYER_SPRITE = _pixel_art(
    _PLAYER_PALETTE,
    (
        ".......oo.......",
        "......ommo......",
        "......ommo......",
        ".....omssmo.....",
        ".....omssmo.....",
        "....omswwsmo....",
        "....omswwsmo....",
        "...oomswwsmoo...",
        "...oomswwsmoo...",
        "...omswwwwsmo...",
        "...omswwwwsmo...",
        ".oomswwwwwwsmoo.",
        "ommswwwwwwwwsmmo",
        "omssssssssssssmo",
        "ommmmmmmmmmmmmmo",
        ".oooooooooooooo.",
    ),
)

_COIN_PALETTE = {
    ".": 0x0000,
    "d": 0x2945,
    "g": 0x39C7,
    "l": 0x4228,
}

SILVER_COIN_WIDTH = 16
SILVER_COIN_HEIGHT = 16
SILVER_COIN_SPRITE = _pixel_art(
    _COIN_PALETTE,
    (
        "....dddddddd....",
        "...dggggggggd...",
        "..dgllllllllgd..",
        ".dglgggggggglgd.",
        "dglggddddddgglgd",
        "dglgdd....ddglgd",
        "dglgd......dglgd",
        "dglgd......dglgd",
        "dglgd......dglgd",
        "dglgd......dglgd",
        "dglgdd....ddglgd",
        "dglggddddddgglgd",
        ".dglgggggggglgd.",
        "..dgllllllllgd..",
        "...dggggggggd...",
        "....dddddddd....",
    ),
)

_ASTEROID_PALETTE = {
    ".": 0x0000,
    "a": 0xFFF5,
    "b": 0xFFEC,
    "c": 0xFFE0,
    "e": 0xD4C2,
    "f": 0xD382,
    "h": 0xC224,
    "i": 0x8226,
    "j": 0x51A6,
    "k": 0x2124,
    "g": 0x39C7,
    "m": 0x4A69,
    "n": 0x630C,
}

ASTEROID_WIDTH = 8
ASTEROID_HEIGHT = 16
ASTEROID_SPRITE = _pixel_art(
    _ASTEROID_PALETTE,
    (
        "........",
        ".....a..",
        "..b.abb.",
        ".bc.bccb",
        "bceaceec",
        "cefceffe",
        "ehhffhff",
        "fiihhiih",
        "ijkkkkji",
        "jkggggkj",
        "kggmmggk",
        "kgmnnmgk",
        "kgmnnmgk",
        "kggmmggk",
        ".kggggk.",
        "..kkkk..",
    ),
)