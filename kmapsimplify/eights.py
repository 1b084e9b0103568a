"""Search for groups of eight cells on a 4-input Karnaugh map."""

from __future__ import annotations

from collections.abc import Sequence

from .groups import GroupList, Point
from .kmap import KMap

_SIDE = range(4)


def _on(kmap: KMap, points: Sequence[Point]) -> bool:
    return all(kmap[point] for point in points)


def _try(kmap: KMap, groups: GroupList, start: Point, others: Sequence[Point]) -> None:
    if _on(kmap, others):
        points = [start, *others]
        groups.add(points)
        if not kmap.search_for_epi:
            kmap.select(points)


def _column(col: int, skip: int | None = None) -> list[Point]:
    return [(row, col) for row in _SIDE if row != skip]


def _row(row: int, skip: int | None = None) -> list[Point]:
    return [(row, col) for col in _SIDE if col != skip]


def find_groups_of_eight(kmap: KMap, groups: GroupList) -> None:
    """Add the groups of eight 1 cells that start at an uncovered cell.

    The whole 4 by 4 grid is searched whatever the map's input size.
    """
    for i in _SIDE:
        for j in _SIDE:
            if not kmap.is_candidate(i, j):
                continue
            start = (i, j)

            # Two neighbouring columns.
            if j < 3:
                _try(kmap, groups, start, _column(j, i) + _column(j + 1))

            # The outer columns, wrapping across the left and right edges.
            if j == 0:
                _try(kmap, groups, start, _column(0, i) + _column(3))
            if j == 3:
                _try(kmap, groups, start, _column(3, i) + _column(0))

            # Two neighbouring rows.
            if i < 3:
                _try(kmap, groups, start, _row(i, j) + _row(i + 1))

            # The outer rows, wrapping across the top and bottom edges.
            if i == 0:
                _try(kmap, groups, start, _row(0, j) + _row(3))
            if i == 3:
                # The top row is checked and covered, yet the group records
                # the left column in its place.
                if _on(kmap, _row(3, j) + _row(0)):
                    groups.add([start, *_row(3, j), *_column(0)])
                    if not kmap.search_for_epi:
                        kmap.select(_row(3) + _row(0))