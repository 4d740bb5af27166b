"""Axis-aligned box collision tied to a shared position."""

from __future__ import annotations

from coinfall.vector2d import Vector2D


class SquareCollider:
    """A rectangle whose corner follows a position vector shared with its owner."""

    def __init__(self, position: Vector2D[int], width: int, height: int) -> None:
        self.position = position
        self.width = width
        self.height = height

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def collides_with(self, other: SquareCollider) -> bool:
        """Return True if the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def __repr__(self) -> str:
        return (
            f"SquareCollider(x={self.x}, y={self.y}, "
            f"width={self.width}, height={self.height})"
        )