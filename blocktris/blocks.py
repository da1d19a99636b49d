"""Tetromino shapes and random piece selection."""

from __future__ import annotations

import random
from enum import IntEnum

Shape = tuple[tuple[int, int, int, int], ...]


class BlockKind(IntEnum):
    """The kinds of piece the game can hand out."""

    I = 0  # noqa: E741
    T = 1
    S = 2
    S2 = 3
    L = 4


_SHAPES: dict[BlockKind, Shape] = {
    BlockKind.I: (
        (1, 1, 1, 1),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    ),
    BlockKind.T: (
        (0, 1, 0, 0),
        (1, 1, 1, 0),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    ),
    BlockKind.S: (
        (0, 0, 1, 1),
        (0, 1, 1, 0),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    ),
    BlockKind.S2: (
        (1, 1, 0, 0),
        (1, 1, 0, 0),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    ),
    BlockKind.L: (
        (1, 0, 0, 0),
        (1, 0, 0, 0),
        (1, 1, 0, 0),
        (0, 0, 0, 0),
    ),
}


def block_shape(kind: BlockKind | int) -> Shape:
    """Return the 4x4 occupancy matrix of a piece kind.

    Raises ValueError for an unknown kind.
    """
    return _SHAPES[BlockKind(kind)]


def next_block(rng: random.Random | None = None) -> Shape:
    """Pick a piece kind uniformly at random and return its shape."""
    source = rng if rng is not None else random
    kind = BlockKind(source.randrange(len(BlockKind)))
    return block_shape(kind)