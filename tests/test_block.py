import pygame
import pytest

from blockfall.block import Block
from blockfall.colors import get_cell_colors
from blockfall.position import Position

ROTATIONS = [
    [Position(0, 0), Position(0, 1)],
    [Position(0, 0), Position(1, 0)],
    [Position(1, 0), Position(1, 1)],
]


def make_block(start_row=0, start_column=0):
    return Block(2, ROTATIONS, start_row, start_column)


def test_initial_positions_apply_start_offset():
    block = make_block(2, 5)
    expected = [cell.moved(2, 5) for cell in ROTATIONS[0]]
    assert block.cell_positions() == expected


def test_move_shifts_all_cells():
    block = make_block()
    before = block.cell_positions()
    block.move(3, -1)
    assert block.cell_positions() == [p.moved(3, -1) for p in before]


def test_move_back_restores_positions():
    block = make_block(1, 1)
    before = block.cell_positions()
    block.move(4, 2)
    block.move(-4, -2)
    assert block.cell_positions() == before


def test_rotate_uses_next_layout():
    block = make_block()
    block.rotate()
    assert block.cell_positions() == ROTATIONS[1]


def test_rotate_wraps_after_all_states():
    block = make_block(3, 3)
    start = block.cell_positions()
    for _ in range(len(ROTATIONS)):
        block.rotate()
    assert block.cell_positions() == start


def test_undo_rotation_wraps_to_last_state():
    block = make_block()
    block.undo_rotation()
    assert block.cell_positions() == ROTATIONS[-1]


def test_undo_rotation_reverses_rotate():
    block = make_block(0, 4)
    block.rotate()
    block.rotate()
    block.undo_rotation()
    block.undo_rotation()
    assert block.cell_positions() == [p.moved(0, 4) for p in ROTATIONS[0]]


def test_single_state_rotation_is_stable():
    block = Block(4, [ROTATIONS[0]])
    block.rotate()
    assert block.cell_positions() == ROTATIONS[0]
    block.undo_rotation()
    assert block.cell_positions() == ROTATIONS[0]


def test_block_needs_a_rotation():
    with pytest.raises(ValueError):
        Block(1, [])


def test_draw_paints_cells_in_block_colour():
    block = Block(3, [[Position(0, 0)]])
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    block.draw(surface, 10, 10)
    expected = pygame.Color(*get_cell_colors()[3])
    assert surface.get_at((10, 10)) == expected
    assert surface.get_at((10 + block.cell_size - 2, 10)) == expected
    assert surface.get_at((10 + block.cell_size - 1, 10)) == pygame.Color(0, 0, 0)