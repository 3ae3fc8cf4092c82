"""Grid coordinates for the playing field."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A cell on the grid, addressed by row and column."""

    row: int
    column: int

    def moved(self, rows: int, columns: int) -> Position:
        """Return the position shifted by the given number of rows and columns."""
        return Position(self.row + rows, self.column + columns)