import pytest

from blockfall.blocks import (
    IBlock,
    JBlock,
    LBlock,
    OBlock,
    SBlock,
    TBlock,
    ZBlock,
    all_blocks,
)
from blockfall.grid import Grid

BLOCK_TYPES = [IBlock, JBlock, LBlock, OBlock, SBlock, TBlock, ZBlock]


def test_all_blocks_covers_every_piece_once():
    blocks = all_blocks()
    assert [type(block) for block in blocks] == BLOCK_TYPES
    assert sorted(block.id for block in blocks) == list(range(1, 8))


def test_all_blocks_returns_fresh_instances():
    first = all_blocks()
    first[0].move(5, 0)
    second = all_blocks()
    assert second[0].cell_positions() == IBlock().cell_positions()


def test_every_layout_has_four_distinct_cells():
    for block in all_blocks():
        for _ in range(len(block.cells)):
            positions = block.cell_positions()
            assert len(set(positions)) == 4
            block.rotate()


@pytest.mark.parametrize("block_type", BLOCK_TYPES)
def test_spawn_position_is_inside_grid(block_type):
    grid = Grid()
    for position in block_type().cell_positions():
        assert not grid.is_cell_outside(position.row, position.column)


def test_full_rotation_cycle_returns_to_start():
    for block in all_blocks():
        start = block.cell_positions()
        for _ in range(len(block.cells)):
            block.rotate()
        assert block.cell_positions() == start


def test_o_block_has_one_state():
    block = OBlock()
    start = block.cell_positions()
    block.rotate()
    assert len(block.cells) == 1
    assert block.cell_positions() == start


@pytest.mark.parametrize("block_type", [IBlock, JBlock, LBlock, SBlock, TBlock, ZBlock])
def test_rotation_states_differ(block_type):
    block = block_type()
    shapes = {frozenset(layout) for layout in block.cells}
    assert len(shapes) == len(block.cells)


def test_i_block_spawns_on_top_row():
    assert {position.row for position in IBlock().cell_positions()} == {0}