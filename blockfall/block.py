"""A falling piece with its rotation states and offset on the grid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import pygame

from .colors import get_cell_colors
from .position import Position

CELL_SIZE = 30


class Block:
    """A piece made of cells, with one cell layout per rotation state."""

    def __init__(
        self,
        block_id: int,
        cells: Sequence[Iterable[Position]],
        start_row: int = 0,
        start_column: int = 0,
    ) -> None:
        rotations = tuple(tuple(layout) for layout in cells)
        if not rotations:
            raise ValueError("a block needs at least one rotation state")
        self.id = block_id
        self.cells = rotations
        self.cell_size = CELL_SIZE
        self.rotation_state = 0
        self.colors = get_cell_colors()
        self.row_offset = 0
        self.column_offset = 0
        self.move(start_row, start_column)

    def draw(self, surface: pygame.Surface, offset_x: int, offset_y: int) -> None:
        """Paint the block's cells onto a surface at the given pixel offset."""
        size = self.cell_size
        color = self.colors[self.id]
        for position in self.cell_positions():
            rect = pygame.Rect(
                position.column * size + offset_x,
                position.row * size + offset_y,
                size - 1,
                size - 1,
            )
            pygame.draw.rect(surface, color, rect)

    def move(self, rows: int, columns: int) -> None:
        """Shift the block by the given number of rows and columns."""
        self.row_offset += rows
        self.column_offset += columns

    def cell_positions(self) -> list[Position]:
        """Return the grid positions the block occupies in its current state."""
        return [
            cell.moved(self.row_offset, self.column_offset)
            for cell in self.cells[self.rotation_state]
        ]

    def rotate(self) -> None:
        """Advance to the next rotation state, wrapping around."""
        self.rotation_state = (self.rotation_state + 1) % len(self.cells)

    def undo_rotation(self) -> None:
        """Step back to the previous rotation state, wrapping around."""
        self.rotation_state = (self.rotation_state - 1) % len(self.cells)