"""Piece identities and rotation geometry.

Every rotation state is derived from a piece's spawn shape by repeated 90
degree clockwise rotation.  The derived offsets are normalised so that the
minimum row and column are zero, which makes them directly usable as offsets
from a placement's ``(row, col)`` anchor.  Bitmask profiles for each state are
precomputed once at import time and shared read-only by every caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

RotationState = List[Tuple[int, int]]

WIDTH = 10
HEIGHT = 20

SPAWN_ROW = 0
SPAWN_COLUMN = WIDTH // 2 - 2
NUM_ROTATIONS = 4


class Piece(str, Enum):
    """The seven tetrominoes plus ``NONE`` for an empty hold slot."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"
    NONE = "-"


def _rotate(state: RotationState) -> RotationState:
    """Return ``state`` rotated 90 degrees clockwise and re-normalised."""

    rotated = [(c, -r) for r, c in state]
    min_r = min(r for r, _ in rotated)
    min_c = min(c for _, c in rotated)
    return sorted((r - min_r, c - min_c) for r, c in rotated)


def _generate_rotations(state: RotationState) -> List[RotationState]:
    rotations = [sorted(state)]
    for _ in range(NUM_ROTATIONS - 1):
        state = _rotate(state)
        rotations.append(state)
    return rotations


# Spawn orientations.  The remaining states come from ``_generate_rotations``.
_BASE_SHAPES: Dict[Piece, RotationState] = {
    Piece.I: [(0, 0), (0, 1), (0, 2), (0, 3)],
    Piece.O: [(0, 0), (0, 1), (1, 0), (1, 1)],
    Piece.T: [(0, 0), (0, 1), (0, 2), (1, 1)],
    Piece.S: [(0, 1), (0, 2), (1, 0), (1, 1)],
    Piece.Z: [(0, 0), (0, 1), (1, 1), (1, 2)],
    Piece.J: [(0, 0), (1, 0), (1, 1), (1, 2)],
    Piece.L: [(0, 2), (1, 0), (1, 1), (1, 2)],
}

TETROMINO_SHAPES: Dict[Piece, List[RotationState]] = {
    piece: _generate_rotations(shape) for piece, shape in _BASE_SHAPES.items()
}


@dataclass(frozen=True)
class RotationProfile:
    """Bitmask description of one rotation state of one piece."""

    piece: Piece
    rotation: int
    width: int
    height: int
    row_masks: Tuple[int, ...]


def _build_profile(piece: Piece, rotation: int, cells: RotationState) -> RotationProfile:
    height = max(dr for dr, _ in cells) + 1
    width = max(dc for _, dc in cells) + 1
    masks = [0] * height
    for dr, dc in cells:
        masks[dr] |= 1 << dc
    return RotationProfile(
        piece=piece,
        rotation=rotation,
        width=width,
        height=height,
        row_masks=tuple(masks),
    )


ROTATION_PROFILES: Dict[Piece, Tuple[RotationProfile, ...]] = {
    piece: tuple(_build_profile(piece, rot, cells) for rot, cells in enumerate(states))
    for piece, states in TETROMINO_SHAPES.items()
}


def rotation_profile(piece: Piece, rotation: int) -> RotationProfile:
    """Return the :class:`RotationProfile` for ``piece`` at ``rotation``.

    Raises:
        ValueError: If ``piece`` is :attr:`Piece.NONE`.
    """

    if piece is Piece.NONE:
        raise ValueError("Piece.NONE has no geometry")
    return ROTATION_PROFILES[piece][rotation % NUM_ROTATIONS]


def shape_blocks(piece: Piece, rotation: int) -> RotationState:
    """Return the block offsets for ``piece`` at ``rotation``.

    Values of ``rotation`` wrap, so any integer is accepted.
    """

    if piece is Piece.NONE:
        raise ValueError("Piece.NONE has no geometry")
    return list(TETROMINO_SHAPES[piece][rotation % NUM_ROTATIONS])


PLAYABLE_PIECES: Tuple[Piece, ...] = tuple(p for p in Piece if p is not Piece.NONE)
