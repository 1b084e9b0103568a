"""Searches for single cells and groups of two and four on a Karnaugh map.

Each search walks the map row by row and, from every cell that is 1 and
not yet covered, tries the shapes that can start there. Found groups are
appended to a :class:`GroupList`. When the map is no longer searching for
essential prime implicants, the cells of each group found are marked as
covered as soon as the group is found.
"""

from __future__ import annotations

from collections.abc import Sequence

from .groups import GroupList, Point
from .kmap import KMap


def _on(kmap: KMap, points: Sequence[Point]) -> bool:
    return all(kmap[point] for point in points)


def _take(kmap: KMap, groups: GroupList, points: Sequence[Point]) -> None:
    groups.add(points)
    if not kmap.search_for_epi:
        kmap.select(points)


def _try(kmap: KMap, groups: GroupList, start: Point, others: Sequence[Point]) -> None:
    if _on(kmap, others):
        _take(kmap, groups, [start, *others])


def find_single_bits(kmap: KMap, groups: GroupList) -> None:
    """Add every uncovered 1 cell as a group of one."""
    for row in range(kmap.rows):
        for col in range(kmap.cols):
            if kmap.is_candidate(row, col):
                _take(kmap, groups, [(row, col)])


def find_groups_of_two(kmap: KMap, groups: GroupList) -> None:
    """Add the pairs of adjacent 1 cells that start at an uncovered cell."""
    rows, cols = kmap.rows, kmap.cols
    for i in range(rows):
        for j in range(cols):
            if not kmap.is_candidate(i, j):
                continue
            start = (i, j)

            # Neighbour to the right, wrapping only on a four-row map.
            if j < cols - 1:
                _try(kmap, groups, start, [(i, j + 1)])
            elif rows > 2:
                _try(kmap, groups, start, [(i, 0)])

            # Neighbour below, wrapping only on a four-column map.
            if i < rows - 1:
                _try(kmap, groups, start, [(i + 1, j)])
            elif cols > 2:
                _try(kmap, groups, start, [(0, j)])

            # Neighbours above and to the left.
            if i > 0:
                _try(kmap, groups, start, [(i - 1, j)])
            if j > 0:
                _try(kmap, groups, start, [(i, j - 1)])

            # Cells on the opposite edge.
            if i == 0 and rows > 2:
                _try(kmap, groups, start, [(rows - 1, j)])
            if j == 0 and cols > 2:
                _try(kmap, groups, start, [(i, cols - 1)])


def find_groups_of_four(kmap: KMap, groups: GroupList) -> None:
    """Add the groups of four 1 cells that start at an uncovered cell.

    Only 3- and 4-input maps have groups of four.
    """
    if kmap.input_size not in (3, 4):
        raise ValueError(
            f"groups of four need a 3- or 4-input map, not {kmap.input_size}"
        )
    rows, cols = kmap.rows, kmap.cols
    for i in range(rows):
        for j in range(cols):
            if not kmap.is_candidate(i, j):
                continue
            start = (i, j)

            # Square with its neighbours.
            if i < rows - 1 and j < cols - 1:
                _try(kmap, groups, start, [(i + 1, j), (i, j + 1), (i + 1, j + 1)])
            elif i < rows - 1 and j == cols - 1:
                _try(kmap, groups, start, [(i + 1, j), (i, j - 1), (i + 1, j - 1)])
            elif i == rows - 1 and j < cols - 1:
                _try(kmap, groups, start, [(i, j + 1), (i - 1, j), (i - 1, j + 1)])

            # Square above and to the left.
            if i > 0 and j > 0:
                _try(kmap, groups, start, [(i - 1, j), (i, j - 1), (i - 1, j - 1)])

            # Squares wrapping across the left and right edges.
            if i < rows - 1:
                if j == 0:
                    _try(kmap, groups, start, [(i + 1, 0), (i, 3), (i + 1, 3)])
                elif j == 3:
                    _try(kmap, groups, start, [(i + 1, j), (i, 0), (i + 1, 0)])
            elif j == 0:
                # Only the row above is checked here, yet (i, 3) joins the group.
                if _on(kmap, [(i - 1, j), (i - 1, 3)]):
                    _take(kmap, groups, [start, (i - 1, j), (i, 3), (i - 1, 3)])
            elif j == 3:
                _try(kmap, groups, start, [(i - 1, j), (i, 0), (i - 1, 0)])

            # Squares wrapping across the top and bottom edges.
            if j < cols - 1:
                if i == 0:
                    _try(kmap, groups, start, [(i, j + 1), (3, j), (3, j + 1)])
                elif i == 3:
                    _try(kmap, groups, start, [(i, j + 1), (0, j), (0, j + 1)])
            elif i in (0, 3):
                other = 3 if i == 0 else 0
                points = [start, (i, j - 1), (other, j), (other, j - 1)]
                if _on(kmap, points[1:]):
                    groups.add(points)
                # These cells are covered whether or not the group was found.
                if not kmap.search_for_epi:
                    kmap.select(points)

            # Four down a column and four along a row.
            _try(kmap, groups, start, [(r, j) for r in range(4) if r != i])
            _try(kmap, groups, start, [(i, c) for c in range(4) if c != j])

            # The four corners of a 4-input map.
            if rows == 4:
                corners = [(0, 0), (0, 3), (3, 0), (3, 3)]
                if start in corners:
                    _try(kmap, groups, start, [p for p in corners if p != start])