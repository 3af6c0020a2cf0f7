"""Axis-aligned rectangles used for collision checks."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left corner and its size."""

    x: float
    y: float
    width: float
    height: float

    def _edges(self) -> tuple[float, float, float, float]:
        left = min(self.x, self.x + self.width)
        right = max(self.x, self.x + self.width)
        top = min(self.y, self.y + self.height)
        bottom = max(self.y, self.y + self.height)
        return left, top, right, bottom

    def intersects(self, other: Rect) -> bool:
        """Return True if both rectangles share an area larger than zero."""
        left1, top1, right1, bottom1 = self._edges()
        left2, top2, right2, bottom2 = other._edges()
        return max(left1, left2) < min(right1, right2) and max(top1, top2) < min(
            bottom1, bottom2
        )

    def moved(self, dx: float, dy: float) -> Rect:
        """Return a copy of this rectangle shifted by (dx, dy)."""
        return replace(self, x=self.x + dx, y=self.y + dy)