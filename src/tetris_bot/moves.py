"""Input keys and the in-progress placement they act on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .board import Board
from .tetromino import NUM_ROTATIONS, SPAWN_COLUMN, SPAWN_ROW, Piece


class Key(str, Enum):
    """Inputs a player can send for the active piece."""

    LEFT = "left"
    RIGHT = "right"
    CW = "cw"
    CCW = "ccw"
    ROTATE_180 = "180"
    HOLD = "hold"
    HARD_DROP = "hard_drop"


# Horizontal offset applied by each shift key.
_SHIFTS = {Key.LEFT: -1, Key.RIGHT: 1}

# Rotation steps (clockwise quarter turns) applied by each rotation key.
_TURNS = {Key.CW: 1, Key.ROTATE_180: 2, Key.CCW: NUM_ROTATIONS - 1}


@dataclass
class Move:
    """Placement of the active piece plus the inputs that produced it.

    ``x``/``y`` are the column and row of the piece's rotation anchor (the
    top-left corner of its normalised bounding box).  ``keys`` only records
    inputs that took effect.
    """

    hold: bool = False
    rotation: int = 0
    x: int = SPAWN_COLUMN
    y: int = SPAWN_ROW
    keys: List[Key] = field(default_factory=list)

    def piece_for(self, piece: Piece, hold: Piece) -> Piece:
        """Return the piece this move places: ``hold`` once held, else ``piece``."""

        return hold if self.hold else piece

    def clone(self) -> "Move":
        return Move(
            hold=self.hold,
            rotation=self.rotation,
            x=self.x,
            y=self.y,
            keys=list(self.keys),
        )

    def reset(self, base: "Move") -> None:
        """Restore every field from ``base``."""

        self.hold = base.hold
        self.rotation = base.rotation
        self.x = base.x
        self.y = base.y
        self.keys = list(base.keys)

    def apply_key(self, key: Key, board: Board, piece: Piece, hold: Piece) -> bool:
        """Apply ``key`` and return whether it changed the placement.

        A key that cannot take effect (collision, wall, second hold, empty
        hold slot) leaves the move untouched and returns ``False``.
        """

        if key is Key.HOLD:
            if self.hold or hold is Piece.NONE:
                return False
            if not board.fits(hold, 0, SPAWN_ROW, SPAWN_COLUMN):
                return False
            self.hold = True
            self.rotation = 0
            self.x = SPAWN_COLUMN
            self.y = SPAWN_ROW
            self.keys.append(key)
            return True

        current = self.piece_for(piece, hold)
        if key is Key.HARD_DROP:
            if not board.fits(current, self.rotation, self.y, self.x):
                return False
            self.y = board.drop_row(current, self.rotation, self.y, self.x)
            self.keys.append(key)
            return True

        if key in _SHIFTS:
            x = self.x + _SHIFTS[key]
            if not board.fits(current, self.rotation, self.y, x):
                return False
            self.x = x
        else:
            rotation = (self.rotation + _TURNS[key]) % NUM_ROTATIONS
            if not board.fits(current, rotation, self.y, self.x):
                return False
            self.rotation = rotation
        self.keys.append(key)
        return True
