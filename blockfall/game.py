"""Game rules: moving, rotating and locking pieces, clearing rows and scoring."""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Protocol

import pygame

from .block import Block
from .blocks import all_blocks
from .grid import Grid

BOARD_OFFSET = 11


class Key(Enum):
    """Keys the game reacts to; OTHER stands for any other key press."""

    LEFT = auto()
    RIGHT = auto()
    DOWN = auto()
    UP = auto()
    OTHER = auto()


class _SoundPlayer(Protocol):
    def play_rotate(self) -> None: ...

    def play_clear(self) -> None: ...


class SilentSounds:
    """Sound effects that make no sound."""

    def play_rotate(self) -> None:
        """Do nothing in place of the rotation sound."""

    def play_clear(self) -> None:
        """Do nothing in place of the row-clear sound."""


class Game:
    """The state of one game: board, current and next piece, score and speed."""

    def __init__(
        self,
        rng: random.Random | None = None,
        sounds: _SoundPlayer | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.sounds = sounds if sounds is not None else SilentSounds()
        self.grid = Grid()
        self.blocks: list[Block] = all_blocks()
        self.current_block = self._get_random_block()
        self.next_block = self._get_random_block()
        self.game_over = False
        self.score = 0
        self.speed = 1.0

    def _get_random_block(self) -> Block:
        if not self.blocks:
            self.blocks = all_blocks()
        return self.blocks.pop(self.rng.randrange(len(self.blocks)))

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the board, the falling piece and the preview of the next piece."""
        self.grid.draw(surface)
        self.current_block.draw(surface, BOARD_OFFSET, BOARD_OFFSET)
        if self.next_block.id == 3:
            self.next_block.draw(surface, 255, 290)
        elif self.next_block.id == 4:
            self.next_block.draw(surface, 255, 280)
        else:
            self.next_block.draw(surface, 270, 270)

    def handle_input(self, key: Key | None) -> None:
        """React to a key press; None means no key was pressed."""
        if key is None:
            return
        if self.game_over:
            self.game_over = False
            self.reset()
        if key is Key.LEFT:
            self.move_block_left()
        elif key is Key.RIGHT:
            self.move_block_right()
        elif key is Key.DOWN:
            self.move_block_down()
            self.update_score(0, 1)
        elif key is Key.UP:
            self.rotate_block()

    def _try_move(self, rows: int, columns: int) -> bool:
        self.current_block.move(rows, columns)
        if self._is_block_outside() or not self._block_fits():
            self.current_block.move(-rows, -columns)
            return False
        return True

    def move_block_left(self) -> None:
        """Shift the falling piece one column left if there is room."""
        if not self.game_over:
            self._try_move(0, -1)

    def move_block_right(self) -> None:
        """Shift the falling piece one column right if there is room."""
        if not self.game_over:
            self._try_move(0, 1)

    def move_block_down(self) -> None:
        """Drop the falling piece one row, locking it when it cannot go further."""
        if not self.game_over and not self._try_move(1, 0):
            self._lock_block()

    def rotate_block(self) -> None:
        """Rotate the falling piece if the new orientation fits."""
        if self.game_over:
            return
        self.current_block.rotate()
        if self._is_block_outside() or not self._block_fits():
            self.current_block.undo_rotation()
        else:
            self.sounds.play_rotate()

    def _is_block_outside(self) -> bool:
        return any(
            self.grid.is_cell_outside(cell.row, cell.column)
            for cell in self.current_block.cell_positions()
        )

    def _block_fits(self) -> bool:
        return all(
            self.grid.is_cell_empty(cell.row, cell.column)
            for cell in self.current_block.cell_positions()
        )

    def _lock_block(self) -> None:
        for cell in self.current_block.cell_positions():
            self.grid.cells[cell.row][cell.column] = self.current_block.id
        self.current_block = self.next_block
        if not self._block_fits():
            self.game_over = True
        self.next_block = self._get_random_block()
        rows_cleared = self.grid.clear_full_rows()
        if rows_cleared > 0:
            self.speed -= 0.01
            self.sounds.play_clear()
            self.update_score(rows_cleared, 0)

    def reset(self) -> None:
        """Start over with an empty board, a fresh set of pieces and no score."""
        self.grid.initialize()
        self.blocks = all_blocks()
        self.current_block = self._get_random_block()
        self.next_block = self._get_random_block()
        self.score = 0

    def update_score(self, lines_cleared: int, move_down_points: int) -> None:
        """Add points for cleared lines and for rows moved down by the player."""
        self.score += {1: 100, 2: 300, 3: 500}.get(lines_cleared, 0)
        self.score += move_down_points