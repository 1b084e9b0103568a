"""Ordered collections of Karnaugh-map groups.

A group is a tuple of ``(row, col)`` points. A :class:`GroupList` keeps
groups in insertion order and renders them the way the report prints them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

Point = tuple[int, int]
Group = tuple[Point, ...]


def _as_group(points: Iterable[Iterable[int]]) -> Group:
    group = []
    for point in points:
        row, col = point
        group.append((int(row), int(col)))
    return tuple(group)


def format_group(group: Iterable[Point]) -> str:
    """Return one group as a tab-indented run of ``(row,col) `` pairs."""
    group = _as_group(group)
    if not group:
        raise ValueError("group has no points")
    return "\t" + "".join(f"({row},{col}) " for row, col in group)


class GroupList:
    """An ordered list of groups of map points."""

    def __init__(self, groups: Iterable[Iterable[Point]] = ()) -> None:
        self._groups: list[Group] = []
        for group in groups:
            self.add(group)

    def add(self, points: Iterable[Point]) -> Group:
        """Append a copy of ``points`` as a new group and return it."""
        group = _as_group(points)
        self._groups.append(group)
        return group

    def remove(self, group: Iterable[Point]) -> None:
        """Remove the first group equal to ``group``."""
        target = _as_group(group)
        try:
            self._groups.remove(target)
        except ValueError:
            raise ValueError(f"group {target!r} is not in the list") from None

    def clear(self) -> None:
        """Drop every group."""
        self._groups.clear()

    def format(self, group_size: int) -> str:
        """Return the report block listing these groups."""
        if not self._groups:
            return f"No Groups of {group_size} found.\n\n"
        parts = [f"Groups of {group_size} found: \n\n"]
        parts.extend(format_group(group) + "\n" for group in self._groups)
        parts.append("\n")
        return "".join(parts)

    def __iter__(self) -> Iterator[Group]:
        return iter(list(self._groups))

    def __len__(self) -> int:
        return len(self._groups)

    def __getitem__(self, index: int) -> Group:
        return self._groups[index]

    def __contains__(self, group: object) -> bool:
        try:
            return _as_group(group) in self._groups  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GroupList):
            return self._groups == other._groups
        return NotImplemented

    def __repr__(self) -> str:
        return f"GroupList({self._groups!r})"