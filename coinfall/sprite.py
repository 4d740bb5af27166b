"""Bitmap sprites with a position and a box collider."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from coinfall.collider import SquareCollider
from coinfall.vector2d import Vector2D


class _PixelTarget(Protocol):
    def draw_pixel(self, x: int, y: int, color: int) -> None: ...


class Sprite:
    """An RGB565 bitmap drawn at a movable position, with transparent pixels skipped."""

    def __init__(
        self,
        bitmap: bytes,
        width: int,
        height: int,
        transparent_color: int = 0x0000,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"sprite size must not be negative: {width}x{height}")
        data = bytes(bitmap)
        if len(data) < width * height * 2:
            raise ValueError(
                f"bitmap holds {len(data)} bytes, {width}x{height} needs {width * height * 2}"
            )
        self.bitmap = data
        self.width = width
        self.height = height
        self.transparent_color = transparent_color
        self.position: Vector2D[int] = Vector2D(0, 0)
        self.collider = SquareCollider(self.position, width, height)

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def set_position(self, x: int, y: int) -> None:
        self.position.x = x
        self.position.y = y

    def move(self, dx: int, dy: int) -> None:
        self.position.x += dx
        self.position.y += dy

    def _color(self, col: int, row: int) -> int:
        index = (row * self.width + col) * 2
        return (self.bitmap[index] << 8) | self.bitmap[index + 1]

    def _opaque(self, width: int, height: int, source) -> Iterator[tuple[int, int, int]]:
        for row in range(height):
            for col in range(width):
                color = self._color(*source(col, row))
                if color != self.transparent_color:
                    yield col, row, color

    def draw(self, display: _PixelTarget) -> None:
        """Draw every non-transparent pixel at the sprite's position."""
        origin_x, origin_y = self.x, self.y
        for col, row, color in self._opaque(self.width, self.height, lambda c, r: (c, r)):
            display.draw_pixel(origin_x + col, origin_y + row, color)

    def draw_scaled(self, display: _PixelTarget, scale: float) -> None:
        """Draw the sprite resized by ``scale`` using nearest-neighbour sampling."""
        origin_x, origin_y = self.x, self.y
        new_width = int(self.width * scale)
        new_height = int(self.height * scale)

        def source(col: int, row: int) -> tuple[int, int]:
            return (
                min(int(col / scale), self.width - 1),
                min(int(row / scale), self.height - 1),
            )

        for col, row, color in self._opaque(new_width, new_height, source):
            display.draw_pixel(origin_x + col, origin_y + row, color)

    def collides_with(self, other: Sprite) -> bool:
        return self.collider.collides_with(other.collider)

    def __repr__(self) -> str:
        return f"Sprite(x={self.x}, y={self.y}, width={self.width}, height={self.height})"