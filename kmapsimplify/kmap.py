"""The Karnaugh map and the record of which cells are already covered."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

_GRAY = (0, 1, 3, 2)
_SHAPES = {2: (2, 2), 3: (2, 4), 4: (4, 4)}
_RULE = {2: " _ _ _ _\n", 3: " _ _ _ _ _ _ _ _\n", 4: " _ _ _ _ _ _ _ _\n"}
_SEPARATOR = {2: " _ _ _ _\n", 3: " _ _ _ _ _ _ _ _\n", 4: " _ _ _ _ _ _ _ _ \n"}
_GRID = 4


def _blank() -> list[list[int]]:
    return [[0] * _GRID for _ in range(_GRID)]


def _check_size(input_size: int) -> None:
    if input_size not in _SHAPES:
        raise ValueError(f"input size {input_size} is not supported (use 2, 3 or 4)")


@dataclass
class KMap:
    """A 2-, 3- or 4-input Karnaugh map held in a 4 by 4 grid.

    Cells outside the map's own shape stay 0. ``selected`` marks cells
    already covered by a chosen group; ``search_for_epi`` tells the group
    searches whether they are still looking for essential prime implicants.
    """

    input_size: int
    cells: list[list[int]] = field(default_factory=_blank)
    selected: list[list[int]] = field(default_factory=_blank)
    search_for_epi: bool = True

    def __post_init__(self) -> None:
        _check_size(self.input_size)

    @property
    def rows(self) -> int:
        return _SHAPES[self.input_size][0]

    @property
    def cols(self) -> int:
        return _SHAPES[self.input_size][1]

    @classmethod
    def from_outputs(cls, outputs: Sequence[int], input_size: int) -> KMap:
        """Lay truth-table outputs out in Gray-code order."""
        _check_size(input_size)
        size = 2**input_size
        values = list(outputs)
        if len(values) < size:
            raise ValueError(f"expected {size} outputs, got {len(values)}")
        kmap = cls(input_size)
        for index, value in enumerate(values[:size]):
            if not value:
                continue
            if input_size == 2:
                row, col = divmod(index, 2)
            elif input_size == 3:
                row, col = index // 4, _GRAY[index % 4]
            else:
                row, col = _GRAY[index // 4], _GRAY[index % 4]
            kmap.cells[row][col] = 1
        return kmap

    def __getitem__(self, point: tuple[int, int]) -> int:
        row, col = point
        if not (0 <= row < _GRID and 0 <= col < _GRID):
            raise IndexError(f"cell {point!r} is outside the map")
        return self.cells[row][col]

    def is_candidate(self, row: int, col: int) -> bool:
        """True when the cell is 1 and not yet selected."""
        return bool(self[row, col]) and not self.selected[row][col]

    def select(self, points: Iterable[tuple[int, int]]) -> None:
        """Mark the given cells as covered."""
        for row, col in points:
            if not (0 <= row < _GRID and 0 <= col < _GRID):
                raise IndexError(f"cell {(row, col)!r} is outside the map")
            self.selected[row][col] = 1

    def render(self) -> str:
        """Return the map drawn as text, followed by a blank line."""
        n = self.input_size
        parts = [f"2^{n} K Map: \n", _RULE[n]]
        for row in self.cells[: self.rows]:
            cells = "".join(f"{value} | " for value in row[: self.cols])
            parts.append(f"| {cells}\n{_SEPARATOR[n]}")
        parts.append("\n")
        return "".join(parts)