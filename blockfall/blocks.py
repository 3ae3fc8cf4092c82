"""The seven standard pieces."""

from __future__ import annotations

from .block import Block
from .position import Position


def _layout(*cells: tuple[int, int]) -> tuple[Position, ...]:
    return tuple(Position(row, column) for row, column in cells)


class LBlock(Block):
    """The L piece."""

    def __init__(self) -> None:
        super().__init__(
            1,
            [
                _layout((0, 2), (1, 0), (1, 1), (1, 2)),
                _layout((0, 1), (1, 1), (2, 1), (2, 2)),
                _layout((1, 0), (1, 1), (1, 2), (2, 0)),
                _layout((0, 0), (0, 1), (1, 1), (2, 1)),
            ],
            0,
            3,
        )


class JBlock(Block):
    """The J piece."""

    def __init__(self) -> None:
        super().__init__(
            2,
            [
                _layout((0, 0), (1, 0), (1, 1), (1, 2)),
                _layout((0, 1), (0, 2), (1, 1), (2, 1)),
                _layout((1, 0), (1, 1), (1, 2), (2, 2)),
                _layout((0, 1), (1, 1), (2, 0), (2, 1)),
            ],
            0,
            3,
        )


class IBlock(Block):
    """The I piece."""

    def __init__(self) -> None:
        super().__init__(
            3,
            [
                _layout((1, 0), (1, 1), (1, 2), (1, 3)),
                _layout((0, 2), (1, 2), (2, 2), (3, 2)),
                _layout((2, 0), (2, 1), (2, 2), (2, 3)),
                _layout((0, 1), (1, 1), (2, 1), (3, 1)),
            ],
            -1,
            3,
        )


class OBlock(Block):
    """The O piece; it has a single rotation state."""

    def __init__(self) -> None:
        super().__init__(
            4,
            [_layout((0, 0), (0, 1), (1, 0), (1, 1))],
            0,
            4,
        )


class SBlock(Block):
    """The S piece."""

    def __init__(self) -> None:
        super().__init__(
            5,
            [
                _layout((0, 1), (0, 2), (1, 0), (1, 1)),
                _layout((0, 1), (1, 1), (1, 2), (2, 2)),
                _layout((1, 1), (1, 2), (2, 0), (2, 1)),
                _layout((0, 0), (1, 0), (1, 1), (2, 1)),
            ],
            0,
            3,
        )


class TBlock(Block):
    """The T piece."""

    def __init__(self) -> None:
        super().__init__(
            6,
            [
                _layout((0, 1), (1, 0), (1, 1), (1, 2)),
                _layout((0, 1), (1, 1), (1, 2), (2, 1)),
                _layout((1, 0), (1, 1), (1, 2), (2, 1)),
                _layout((0, 1), (1, 0), (1, 1), (2, 1)),
            ],
            0,
            3,
        )


class ZBlock(Block):
    """The Z piece."""

    def __init__(self) -> None:
        super().__init__(
            7,
            [
                _layout((0, 0), (0, 1), (1, 1), (1, 2)),
                _layout((0, 2), (1, 1), (1, 2), (2, 1)),
                _layout((1, 0), (1, 1), (2, 1), (2, 2)),
                _layout((0, 1), (1, 0), (1, 1), (2, 0)),
            ],
            0,
            3,
        )


def all_blocks() -> list[Block]:
    """Return a fresh instance of every piece."""
    return [IBlock(), JBlock(), LBlock(), OBlock(), SBlock(), TBlock(), ZBlock()]