"""Index of unoccupied board cells."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from gridsnake.coord import Coord


class BoardFull(RuntimeError):
    """Raised when a free cell is requested but every cell is occupied."""


class FreeCellIndex:
    """Set of free cells with O(1) membership, insert, remove and random pick.

    Cells live in a dense list so a uniform pick is a single index draw.
    ``_positions`` maps each cell to its slot; removal moves the last cell
    into the vacated slot.
    """

    def __init__(self, cells: Iterable[Coord] = ()):
        self._cells: list[Coord] = []
        self._positions: dict[Coord, int] = {}
        for cell in cells:
            self.insert(cell)

    @classmethod
    def full_board(cls, size: int, occupied: Iterable[Coord] = ()) -> FreeCellIndex:
        """Build the index of every cell of a ``size`` x ``size`` board.

        Args:
            size: Board side length
            occupied: Cells to leave out of the index

        Returns:
            Index holding all remaining cells, in row-major order
        """
        taken = set(occupied)
        return cls(
            Coord(x, y)
            for y in range(size)
            for x in range(size)
            if Coord(x, y) not in taken
        )

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._positions

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._cells)

    def contains(self, cell: Coord) -> bool:
        return cell in self._positions

    def insert(self, cell: Coord) -> None:
        if cell in self._positions:
            return
        self._positions[cell] = len(self._cells)
        self._cells.append(cell)

    def remove(self, cell: Coord) -> None:
        """Remove a cell known to be free.

        Raises:
            KeyError: If ``cell`` is not in the index
        """
        index = self._positions.pop(cell)
        last = self._cells.pop()
        if index < len(self._cells):
            self._cells[index] = last
            self._positions[last] = index

    def pick_uniform(self, rng: np.random.Generator) -> Coord:
        """Select a free cell uniformly at random without removing it.

        Raises:
            BoardFull: If no cell is free
        """
        if not self._cells:
            raise BoardFull("No free cell left on the board")
        return self._cells[int(rng.integers(len(self._cells)))]
