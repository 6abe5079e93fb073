# wordgame/board.py

from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from .constants import BOARD_SIZE
from .types import PendingPlacement, PlacedTile


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Board:
    """Read-only 15x15 grid of committed tiles.

    Writes never touch the existing grid: `with_placements` copies the
    underlying array and returns a new Board.
    """

    def __init__(self, cells: Optional[np.ndarray] = None):
        if cells is None:
            cells = np.full((BOARD_SIZE, BOARD_SIZE), None, dtype=object)
        elif cells.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {cells.shape}")
        else:
            # Never freeze the caller's array
            cells = cells.copy()
        cells.setflags(write=False)
        self._cells = cells

    @classmethod
    def empty(cls) -> 'Board':
        return cls()

    def __getitem__(self, pos: Tuple[int, int]) -> Optional[PlacedTile]:
        row, col = pos
        return self._cells[row, col]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return all(a == b for a, b in zip(self._cells.flat, other._cells.flat))

    def __hash__(self):
        return hash(tuple(self._cells.flat))

    def __repr__(self):
        return f"Board({self.tile_count()} tiles)"

    def is_occupied(self, row: int, col: int) -> bool:
        return in_bounds(row, col) and self._cells[row, col] is not None

    def is_empty(self) -> bool:
        return self.tile_count() == 0

    def tile_count(self) -> int:
        return sum(1 for cell in self._cells.flat if cell is not None)

    def occupied(self) -> Iterator[Tuple[int, int, PlacedTile]]:
        """Yield (row, col, tile) for every occupied cell, row-major"""
        for (row, col), cell in np.ndenumerate(self._cells):
            if cell is not None:
                yield row, col, cell

    def with_placements(self, placements: Iterable[PendingPlacement], owner: int) -> 'Board':
        """Return a new Board with the placements written in as `owner`'s tiles"""
        cells = self._cells.copy()
        for placement in placements:
            cells[placement.row, placement.col] = PlacedTile.from_tile(placement.tile, owner)
        return Board(cells)

    def to_rows(self) -> Tuple[str, ...]:
        """Letters row by row, '.' for empty cells"""
        return tuple(
            ''.join(cell.letter if cell is not None else '.' for cell in row)
            for row in self._cells
        )
