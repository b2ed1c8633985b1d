"""Axis-aligned integer rectangles with half-open edges."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangle covering ``left <= x < right`` and ``top <= y < bottom``."""

    left: float
    top: float
    right: float
    bottom: float

    def is_empty(self) -> bool:
        """Return True when the rectangle covers no area."""
        return self.right <= self.left or self.bottom <= self.top

    def intersection(self, other: Rect) -> Rect | None:
        """Return the overlapping part of two rectangles, or None if they do not overlap."""
        common = Rect(
            max(self.left, other.left),
            max(self.top, other.top),
            min(self.right, other.right),
            min(self.bottom, other.bottom),
        )
        if self.is_empty() or other.is_empty() or common.is_empty():
            return None
        return common

    def intersects(self, other: Rect) -> bool:
        """Return True when the two rectangles share some area."""
        return self.intersection(other) is not None

    def contains(self, x: float, y: float) -> bool:
        """Return True when the point lies inside; right and bottom edges are outside."""
        return self.left <= x < self.right and self.top <= y < self.bottom

    def moved(self, dx: float, dy: float) -> Rect:
        """Return a copy shifted by ``dx`` and ``dy``."""
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)


def rect_around(x: float, y: float, size: float) -> Rect:
    """Return the square of side ``size`` centred on ``(x, y)``."""
    half = size // 2 if isinstance(size, int) else size / 2
    return Rect(x - half, y - half, x + half, y + half)