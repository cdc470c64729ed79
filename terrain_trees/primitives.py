"""Planar points and terrain vertices carrying one or more field values."""

from __future__ import annotations

import math
from functools import total_ordering


@total_ordering
class Point:
    """A point in the plane, ordered lexicographically by (x, y)."""

    __slots__ = ("coords",)

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.coords: list[float] = [float(x), float(y)]

    @property
    def x(self) -> float:
        return self.coords[0]

    @x.setter
    def x(self, value: float) -> None:
        self.coords[0] = float(value)

    @property
    def y(self) -> float:
        return self.coords[1]

    @y.setter
    def y(self, value: float) -> None:
        self.coords[1] = float(value)

    @property
    def dimension(self) -> int:
        """Number of spatial coordinates."""
        return len(self.coords)

    def coordinate(self, pos: int) -> float:
        """Return the coordinate at position ``pos``."""
        return self.coords[pos]

    def set_coordinate(self, pos: int, value: float) -> None:
        """Set the coordinate at position ``pos``."""
        self.coords[pos] = float(value)

    def distance(self, other: Point) -> float:
        """Euclidean distance between the planar coordinates of two points."""
        return math.dist(self.coords[: other.dimension], other.coords[: other.dimension])

    def _key(self) -> tuple[float, ...]:
        return tuple(self.coords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g}"

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


class Vertex(Point):
    """A terrain vertex: a planar point with field values, the first being the elevation.

    Equality and ordering consider only the planar coordinates.
    """

    __slots__ = ("fields",)

    def __init__(self, x: float = 0.0, y: float = 0.0, *fields: float) -> None:
        super().__init__(x, y)
        self.fields: list[float] = [float(f) for f in fields] if fields else [0.0]

    @property
    def z(self) -> float:
        """The elevation, i.e. the first field value."""
        return self.fields[0]

    @z.setter
    def z(self, value: float) -> None:
        self.fields[0] = float(value)

    def coordinate(self, pos: int) -> float:
        """Return a planar coordinate, or the elevation when ``pos`` equals the dimension."""
        if pos == self.dimension:
            return self.fields[0]
        return self.coords[pos]

    def set_coordinate(self, pos: int, value: float) -> None:
        """Set a planar coordinate, or the elevation when ``pos`` equals the dimension."""
        if pos == self.dimension:
            self.fields[0] = float(value)
        else:
            self.coords[pos] = float(value)

    def add_field(self, value: float) -> None:
        """Append a field value."""
        self.fields.append(float(value))

    def norm(self, other: Vertex) -> float:
        """Length of the 3D vector from this vertex to ``other``."""
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    def scalar_product(self, v1: Vertex, v2: Vertex) -> float:
        """Dot product of the 3D vectors ``v1 - self`` and ``v2 - self``."""
        return (
            (v1.x - self.x) * (v2.x - self.x)
            + (v1.y - self.y) * (v2.y - self.y)
            + (v1.z - self.z) * (v2.z - self.z)
        )

    def __str__(self) -> str:
        return " ".join(f"{value:g}" for value in (*self.coords, *self.fields))

    def __repr__(self) -> str:
        values = ", ".join(repr(value) for value in (*self.coords, *self.fields))
        return f"Vertex({values})"