"""Set-like operations on sorted containers and on lists of sorted containers.

The operations follow multiset semantics over sorted sequences and compare items
with ``<`` only, so items that are equivalent under ordering are matched.
Python sets given as operands are sorted first.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, MutableSet, Sequence
from enum import Enum, auto
from typing import Any

_DONE = object()


class _Side(Enum):
    LEFT = auto()
    RIGHT = auto()
    BOTH = auto()


def _ordered(container: Iterable[Any]) -> list[Any]:
    if isinstance(container, (set, frozenset)):
        return sorted(container)
    return list(container)


def _walk(first: Iterable[Any], second: Iterable[Any]) -> Iterator[tuple[_Side, Any]]:
    """Merge two sorted sequences, tagging each item by where it was found."""
    left, right = iter(_ordered(first)), iter(_ordered(second))
    a, b = next(left, _DONE), next(right, _DONE)
    while a is not _DONE and b is not _DONE:
        if a < b:
            yield _Side.LEFT, a
            a = next(left, _DONE)
        elif b < a:
            yield _Side.RIGHT, b
            b = next(right, _DONE)
        else:
            yield _Side.BOTH, a
            a, b = next(left, _DONE), next(right, _DONE)
    while a is not _DONE:
        yield _Side.LEFT, a
        a = next(left, _DONE)
    while b is not _DONE:
        yield _Side.RIGHT, b
        b = next(right, _DONE)


def _pairs(first: Sequence[Any], second: Sequence[Any]) -> Iterator[tuple[Any, Any]]:
    if len(second) < len(first):
        raise ValueError(
            f"second holds {len(second)} containers, fewer than the {len(first)} of first"
        )
    return zip(first, second)


def count_nested_elements(containers: Iterable[Iterable[Any]]) -> int:
    """Total number of items held by a container of containers."""
    return sum(len(inner) for inner in containers)  # type: ignore[arg-type]


def format_container(container: Iterable[Any], caption: str | None = None) -> str:
    """Render the items, each followed by a space; a caption adds a prefix and a newline."""
    body = "".join(f"{item} " for item in container)
    if caption is None:
        return body
    return f"{caption}{body}\n"


def format_nested_container(
    containers: Iterable[Iterable[Any]], caption: str | None = None
) -> str:
    """Render every non-empty inner container on a line tagged with its position."""
    lines = "".join(
        f"  C[{pos}] {format_container(inner)}\n"
        for pos, inner in enumerate(containers)
        if len(inner) > 0  # type: ignore[arg-type]
    )
    if caption is None:
        return lines
    return f"{caption}\n{lines}"


def intersect_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Items found in both sorted containers, taken from the first."""
    return [item for side, item in _walk(first, second) if side is _Side.BOTH]


def union_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Sorted union of two sorted containers; common items are taken from the first."""
    return [item for _, item in _walk(first, second)]


def difference_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Items of the first sorted container that the second does not hold."""
    return [item for side, item in _walk(first, second) if side is _Side.LEFT]


def intersect_nested(
    first: Sequence[Iterable[Any]], second: Sequence[Iterable[Any]], sort: bool = False
) -> list[list[Any]]:
    """Intersect the containers of ``first`` with those of ``second``, position by position.

    With ``sort`` the inner containers are sorted before intersecting.
    """
    return [
        intersect_sorted(sorted(a), sorted(b)) if sort else intersect_sorted(a, b)
        for a, b in _pairs(first, second)
    ]


def exists_intersection(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """Tell whether two sorted containers share at least one item."""
    return any(side is _Side.BOTH for side, _ in _walk(first, second))


def exists_nested_intersection(
    first: Sequence[Iterable[Any]], second: Sequence[Iterable[Any]]
) -> bool:
    """Tell whether any pair of containers at the same position shares an item."""
    return any(exists_intersection(sorted(a), sorted(b)) for a, b in _pairs(first, second))


def union_nested(
    first: Sequence[Iterable[Any]], second: Sequence[Iterable[Any]]
) -> list[list[Any]]:
    """Sort and unite the containers of ``first`` and ``second``, position by position."""
    return [union_sorted(sorted(a), sorted(b)) for a, b in _pairs(first, second)]


def difference_nested(
    first: Sequence[Iterable[Any]], second: Sequence[Iterable[Any]]
) -> list[list[Any]]:
    """Sort and subtract the containers of ``second`` from those of ``first``."""
    return [difference_sorted(sorted(a), sorted(b)) for a, b in _pairs(first, second)]


def erase_first(container: MutableSequence[Any] | MutableSet[Any], value: Any) -> bool:
    """Remove the first occurrence of ``value``; tell whether anything was removed."""
    if isinstance(container, MutableSet):
        if value in container:
            container.discard(value)
            return True
        return False
    try:
        container.remove(value)
    except ValueError:
        return False
    return True