"""The seven tetromino shapes and their four rotations."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

__all__ = ["PieceKind", "Rotation", "Piece", "shape", "random_piece"]

Shape = tuple[tuple[int, ...], ...]

SPAWN_X = 4
SPAWN_Y = 3


class PieceKind(IntEnum):
    I = 0  # noqa: E741
    O = 1
    L = 2
    J = 3
    T = 4
    S = 5
    Z = 6


class Rotation(IntEnum):
    NORMAL = 0
    LEFT = 1
    RIGHT = 2
    REVERSE = 3


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Piece:
    """A falling piece: its kind, rotation and the position of its shape's origin."""

    kind: PieceKind
    rotation: Rotation = Rotation.NORMAL
    x: int = SPAWN_X
    y: int = SPAWN_Y


def _grid(*rows: str) -> Shape:
    padded = list(rows) + [""] * (4 - len(rows))
    return tuple(tuple(int(ch) for ch in row.ljust(4, "0")) for row in padded)


_SHAPES: dict[PieceKind, tuple[Shape, ...]] = {
    PieceKind.I: (
        _grid("1", "1", "1", "1"),
        _grid("1111"),
        _grid("1", "1", "1", "1"),
        _grid("1111"),
    ),
    PieceKind.O: (_grid("11", "11"),) * 4,
    PieceKind.L: (
        _grid("11", "1", "1"),
        _grid("111", "001"),
        _grid("01", "01", "11"),
        _grid("1", "111"),
    ),
    PieceKind.J: (
        _grid("11", "01", "01"),
        _grid("001", "111"),
        _grid("1", "1", "11"),
        _grid("111", "1"),
    ),
    PieceKind.T: (
        _grid("01", "111"),
        _grid("1", "11", "1"),
        _grid("111", "01"),
        _grid("01", "11", "01"),
    ),
    PieceKind.S: (_grid("01", "11", "1"), _grid("11", "011")) * 2,
    PieceKind.Z: (_grid("1", "11", "01"), _grid("011", "11")) * 2,
}


def shape(kind: PieceKind, rotation: Rotation) -> Shape:
    """The 4x4 occupancy grid of a piece, indexed ``[row][column]``."""
    return _SHAPES[PieceKind(kind)][Rotation(rotation)]


def random_piece(rng: _RandRange | None = None) -> Piece:
    """A piece of random kind in normal rotation at the spawn position."""
    source = rng if rng is not None else random
    return Piece(kind=PieceKind(source.randrange(len(PieceKind))))