"""Axis-aligned boxes in the plane."""

from __future__ import annotations

import math
from functools import total_ordering

from terrain_trees.primitives import Point


def _copy_point(point: Point | None) -> Point:
    if point is None:
        return Point()
    return Point(point.coordinate(0), point.coordinate(1))


@total_ordering
class Box:
    """A planar box spanned by a minimum and a maximum corner.

    The corners are copied on construction, so the box never shares them with the caller.
    """

    __slots__ = ("min_point", "max_point")

    def __init__(self, min_point: Point | None = None, max_point: Point | None = None) -> None:
        self.min_point: Point = _copy_point(min_point)
        self.max_point: Point = _copy_point(max_point)

    def copy(self) -> Box:
        """Return an independent copy of the box."""
        return Box(self.min_point, self.max_point)

    def diagonal(self) -> float:
        """Length of the box diagonal."""
        return math.hypot(
            self.max_point.x - self.min_point.x, self.max_point.y - self.min_point.y
        )

    def intersects(self, other: Box) -> bool:
        """Tell whether two boxes, taken as closed, overlap."""
        return not (
            self.max_point.x < other.min_point.x
            or self.min_point.x > other.max_point.x
            or self.max_point.y < other.min_point.y
            or self.min_point.y > other.max_point.y
        )

    def completely_contains(self, other: Box) -> bool:
        """Tell whether ``other`` lies strictly inside this box."""
        return (
            self.min_point.x < other.min_point.x
            and self.min_point.y < other.min_point.y
            and self.max_point.x > other.max_point.x
            and self.max_point.y > other.max_point.y
        )

    def contains_closed(self, point: Point) -> bool:
        """Tell whether ``point`` lies in the box, all faces taken as closed."""
        return all(
            self.min_point.coords[i] <= point.coords[i] <= self.max_point.coords[i]
            for i in range(point.dimension)
        )

    def contains(self, point: Point, domain_max: Point) -> bool:
        """Tell whether ``point`` lies in the box.

        Faces through the minimum corner are closed; faces through the maximum corner
        are open unless they lie on the border of the domain whose maximum corner is
        ``domain_max``.
        """
        for i in range(point.dimension):
            low = self.min_point.coords[i]
            high = self.max_point.coords[i]
            coord = point.coords[i]
            if high == domain_max.coords[i]:
                if high < coord:
                    return False
            elif high <= coord:
                return False
            if low > coord:
                return False
        return True

    def resize(self, point: Point) -> None:
        """Enlarge the box, if needed, so that it contains ``point``."""
        if self.contains_closed(point):
            return
        for i in range(point.dimension):
            coord = point.coords[i]
            if coord < self.min_point.coords[i]:
                self.min_point.set_coordinate(i, coord)
            if coord > self.max_point.coords[i]:
                self.max_point.set_coordinate(i, coord)

    def min_distance(self, point: Point) -> float:
        """Smallest distance between ``point`` and the box (zero inside it)."""
        squared = 0.0
        for i in range(self.min_point.dimension):
            coord = point.coords[i]
            if coord < self.min_point.coords[i]:
                squared += (coord - self.min_point.coords[i]) ** 2
            elif coord > self.max_point.coords[i]:
                squared += (coord - self.max_point.coords[i]) ** 2
        return math.sqrt(squared)

    def _key(self) -> tuple[Point, Point]:
        return (self.min_point, self.max_point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"{self.min_point} {self.max_point}"

    def __repr__(self) -> str:
        return f"Box({self.min_point!r}, {self.max_point!r})"