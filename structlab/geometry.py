"""Integer points in the plane with vector addition."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """A point with integer coordinates; addition is componentwise."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point2D) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    @classmethod
    def parse(cls, text: str) -> Point2D:
        """Read a point written as two whitespace-separated integers."""
        tokens = text.split()
        if len(tokens) != 2:
            raise ValueError(f"expected two coordinates, got {len(tokens)} value(s)")
        return cls(int(tokens[0]), int(tokens[1]))