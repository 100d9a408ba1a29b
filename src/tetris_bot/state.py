"""Read-only decision state handed to the enumerator and evaluator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .board import Board
from .moves import Move
from .tetromino import Piece


@dataclass(frozen=True)
class Props:
    """Clear and offense statistics produced by line-clear resolution."""

    atk: int = 0
    ds: int = 0
    sum_atk: int = 0
    sum_ds: int = 0
    b2b: int = 0
    combo: int = 0


@dataclass(frozen=True)
class State:
    """Board, piece queue, hold slot and statistics for one decision.

    ``pieces[0]`` is the active piece.  When ``hold`` is :attr:`Piece.NONE`
    and hold is explored, ``pieces[1]`` is swapped in; the queue is assumed to
    be long enough for that and is not checked.
    """

    board: Board = field(default_factory=Board)
    pieces: Tuple[Piece, ...] = ()
    hold: Piece = Piece.NONE
    props: Props = field(default_factory=Props)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pieces", tuple(self.pieces))

    @property
    def active(self) -> Piece:
        return self.pieces[0] if self.pieces else Piece.NONE

    @property
    def hold_piece(self) -> Piece:
        """Piece reachable through hold: the held one, else the next in queue."""

        if self.hold is not Piece.NONE:
            return self.hold
        return self.pieces[1] if len(self.pieces) > 1 else Piece.NONE

    def advance(self, board: Board, move: Move) -> "State":
        """Return the hypothetical state after ``move`` produced ``board``.

        Holding with an empty slot stores the active piece and consumes the
        next one from the queue; holding with a full slot swaps them.  Props
        are carried over unchanged.
        """

        if not move.hold:
            return State(board=board, pieces=self.pieces[1:], hold=self.hold, props=self.props)
        if self.hold is Piece.NONE:
            return State(board=board, pieces=self.pieces[2:], hold=self.pieces[0], props=self.props)
        return State(board=board, pieces=self.pieces[1:], hold=self.pieces[0], props=self.props)
