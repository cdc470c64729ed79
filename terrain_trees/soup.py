"""Triangle soups: triangles that carry their vertices' coordinates explicitly."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from terrain_trees.box import Box
from terrain_trees.primitives import Vertex


class ExplicitTriangle:
    """A triangle holding its vertices themselves instead of indices."""

    __slots__ = ("vertices",)

    def __init__(self, vertices: Iterable[Vertex] = ()) -> None:
        self.vertices: list[Vertex] = list(vertices)

    def add_vertex(self, vertex: Vertex) -> None:
        """Append a vertex to the triangle."""
        self.vertices.append(vertex)

    def vertex(self, pos: int) -> Vertex:
        """The vertex at position ``pos`` (counted from 0)."""
        return self.vertices[pos]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __str__(self) -> str:
        return "".join(f"{v}\n" for v in self.vertices)


class Soup:
    """A domain box and a list of explicit triangles, addressed from index 1."""

    __slots__ = ("domain", "triangles")

    def __init__(
        self, triangles: Iterable[ExplicitTriangle] = (), domain: Box | None = None
    ) -> None:
        self.domain: Box = domain.copy() if domain is not None else Box()
        self.triangles: list[ExplicitTriangle] = list(triangles)

    @property
    def triangles_num(self) -> int:
        return len(self.triangles)

    def add_triangle(self, triangle: ExplicitTriangle) -> int:
        """Append a triangle and return its position index."""
        self.triangles.append(triangle)
        return len(self.triangles)

    def triangle(self, t_id: int) -> ExplicitTriangle:
        """The triangle with position index ``t_id`` (counted from 1)."""
        if not 1 <= t_id <= len(self.triangles):
            raise IndexError(f"triangle index {t_id} out of range 1..{len(self.triangles)}")
        return self.triangles[t_id - 1]

    def clear(self) -> None:
        """Remove every triangle; the domain is kept."""
        self.triangles.clear()

    def __len__(self) -> int:
        return len(self.triangles)

    def __iter__(self) -> Iterator[ExplicitTriangle]:
        return iter(self.triangles)