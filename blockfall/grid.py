"""The playing field: a fixed grid of cell values."""

from __future__ import annotations

import pygame

from .colors import get_cell_colors

NUM_ROWS = 20
NUM_COLUMNS = 10
CELL_SIZE = 30
BOARD_OFFSET = 11


class Grid:
    """A 20 by 10 board where 0 is an empty cell and other values are block ids."""

    def __init__(self) -> None:
        self.rows = NUM_ROWS
        self.columns = NUM_COLUMNS
        self.cell_size = CELL_SIZE
        self.colors = get_cell_colors()
        self.cells: list[list[int]] = []
        self.initialize()

    def initialize(self) -> None:
        """Empty every cell."""
        self.cells = [[0] * self.columns for _ in range(self.rows)]

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self.cells
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Paint every cell of the board onto a surface."""
        size = self.cell_size
        for row_index, row in enumerate(self.cells):
            for column_index, value in enumerate(row):
                rect = pygame.Rect(
                    column_index * size + BOARD_OFFSET,
                    row_index * size + BOARD_OFFSET,
                    size - 1,
                    size - 1,
                )
                pygame.draw.rect(surface, self.colors[value], rect)

    def is_cell_outside(self, row: int, column: int) -> bool:
        """Tell whether a position lies beyond the board's edges."""
        return not (0 <= row < self.rows and 0 <= column < self.columns)

    def is_cell_empty(self, row: int, column: int) -> bool:
        """Tell whether a cell on the board holds no block."""
        if self.is_cell_outside(row, column):
            raise IndexError(f"cell ({row}, {column}) is outside the grid")
        return self.cells[row][column] == 0

    def clear_full_rows(self) -> int:
        """Remove full rows, drop the rows above them, and return how many were removed."""
        completed = 0
        for row in reversed(range(self.rows)):
            if self._is_row_full(row):
                self._clear_row(row)
                completed += 1
            elif completed:
                self._move_row_down(row, completed)
        return completed

    def _is_row_full(self, row: int) -> bool:
        return all(self.cells[row])

    def _clear_row(self, row: int) -> None:
        self.cells[row] = [0] * self.columns

    def _move_row_down(self, row: int, distance: int) -> None:
        self.cells[row + distance] = self.cells[row]
        self.cells[row] = [0] * self.columns