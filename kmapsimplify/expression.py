"""Turning Karnaugh-map groups into a sum-of-products expression.

Rows and columns of the map are in Gray-code order. On a 2-input map
``a`` is the row and ``b`` the column. On a 3-input map ``a`` is the row,
``b`` is set in columns 2 and 3 and ``c`` in columns 1 and 2. On a
4-input map ``a`` and ``b`` follow the rows the way ``b`` and ``c`` follow
the columns on a 3-input map, and ``c`` and ``d`` follow the columns.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .groups import GroupList, Point

_COMPLEMENT = "'"


def _points(group: Iterable[Iterable[int]]) -> list[Point]:
    points = [(int(row), int(col)) for row, col in group]
    if not points:
        raise ValueError("group has no points")
    return points


def _literal(name: str, all_set: bool, all_clear: bool) -> str:
    if all_set:
        return name
    if all_clear:
        return name + _COMPLEMENT
    return ""


def _upper_half(values: Sequence[int]) -> tuple[bool, bool]:
    return all(v > 1 for v in values), all(v <= 1 for v in values)


def _middle(values: Sequence[int]) -> tuple[bool, bool]:
    return all(0 < v < 3 for v in values), all(v in (0, 3) for v in values)


def _used(points: list[Point], sizes: tuple[int, ...]) -> list[Point]:
    # Groups of an unexpected size are read from their first point alone.
    return points if len(points) in sizes else points[:1]


def product_of_two(group: Iterable[Point]) -> str:
    """Return the product term for a group on a 2-input map."""
    points = _used(_points(group), (2,))
    rows = [row for row, _ in points]
    cols = [col for _, col in points]
    return _literal("a", all(rows), not any(rows)) + _literal(
        "b", all(cols), not any(cols)
    )


def product_of_three(group: Iterable[Point]) -> str:
    """Return the product term for a group on a 3-input map."""
    points = _used(_points(group), (4, 2))
    rows = [row for row, _ in points]
    cols = [col for _, col in points]

    term = _literal("a", all(rows), not any(rows))
    term += _literal("b", *_upper_half(cols))

    inside, outside = _middle(cols)
    if len(points) == 2:
        # A pair takes c' whenever its first cell is in column 0, its second
        # in column 3, or the first in column 3 and the second in column 0.
        first, second = cols
        outside = first == 0 or (first == 3 and second == 0) or second == 3
    term += _literal("c", inside, outside)
    return term


def product_of_four(group: Iterable[Point]) -> str:
    """Return the product term for a group on a 4-input map.

    Only a group of four can take ``d'``; other groups leave ``d`` out
    when their columns are all outer ones.
    """
    points = _used(_points(group), (8, 4, 2))
    rows = [row for row, _ in points]
    cols = [col for _, col in points]

    term = _literal("a", *_upper_half(rows))
    term += _literal("b", *_middle(rows))
    term += _literal("c", *_upper_half(cols))

    inside, outside = _middle(cols)
    term += _literal("d", inside, outside and len(points) == 4)
    return term


_PRODUCTS = {2: product_of_two, 3: product_of_three, 4: product_of_four}


def simplified_function(all_groups: Sequence[GroupList], input_size: int) -> str:
    """Return the sum of the product terms of every group, in order.

    After each non-empty group list one ``" + "`` is written for every
    later list that is not empty.
    """
    try:
        product = _PRODUCTS[input_size]
    except KeyError:
        raise ValueError(
            f"input size {input_size} is not supported (use 2, 3 or 4)"
        ) from None

    lists = list(all_groups)
    parts: list[str] = []
    for index, group_list in enumerate(lists):
        if len(group_list) == 0:
            continue
        parts.append(" + ".join(product(group) for group in group_list))
        parts.extend(" + " for later in lists[index + 1:] if len(later) > 0)
    return "".join(parts)