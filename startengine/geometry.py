"""Integer rectangles used for frames, widget areas and hit tests."""

from dataclasses import dataclass


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def contains(self, x, y):
        """Return True when the point lies inside; right and bottom edges are excluded."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h