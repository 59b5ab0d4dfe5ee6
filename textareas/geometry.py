"""Axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle given by its top-left corner and its size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def overlaps(self, other: Rectangle) -> bool:
        """Return True if the interiors of the two rectangles intersect."""
        if (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        ):
            return True
        return (
            other.x < self.x + self.width
            and other.x + other.width > self.x
            and other.y < self.y + self.height
            and other.y + other.height > self.y
        )