"""Small records pairing vertices and edges with the triangles incident to them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class VertexTrianglePair:
    """A vertex index and an incident triangle index, ordered by the vertex alone."""

    v: int = 0
    t: int = field(default=0, compare=False)


@dataclass(frozen=True, eq=False)
class EdgeTriangleTuple:
    """An edge (two vertex indices) with an incident triangle and the edge's position in it.

    Two tuples are equal when they describe the same edge; ordering also breaks ties
    on the triangle index.
    """

    v1: int = 0
    v2: int = 0
    t: int = 0
    f_pos: int = 0

    @classmethod
    def create(cls, v1: int, v2: int, t: int, f_pos: int = 0) -> EdgeTriangleTuple:
        """Build a tuple with the vertex indices sorted."""
        return cls(min(v1, v2), max(v1, v2), t, f_pos)

    def has_not(self, v: int) -> bool:
        """Tell whether ``v`` is not an endpoint of the edge."""
        return v != self.v1 and v != self.v2

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeTriangleTuple):
            return NotImplemented
        return self.v1 == other.v1 and self.v2 == other.v2

    def __hash__(self) -> int:
        return hash((self.v1, self.v2))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EdgeTriangleTuple):
            return NotImplemented
        return (self.v1, self.v2, self.t) < (other.v1, other.v2, other.t)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, EdgeTriangleTuple):
            return NotImplemented
        return other < self

    def __str__(self) -> str:
        return f"{self.v1} {self.v2} {self.t} {self.f_pos}"