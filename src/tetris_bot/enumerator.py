"""Enumerate the distinct boards reachable by placing the active piece.

The search is deliberately bounded rather than a shortest-path search over
arbitrary key sequences.  For every hold choice and rotation target a base
placement is built (hold first, then one rotation key), locked as-is, and then
slid as far as it goes in each horizontal direction, locking after every
successful shift.  The first move that produces a given board is kept; later
moves producing the same board are dropped, so the result has unique keys but
the retained move is not necessarily the shortest one.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from .board import Board
from .moves import Key, Move
from .state import State
from .tetromino import Piece

LOGGER = logging.getLogger(__name__)

HOLD_CHOICES: Tuple[bool, ...] = (False, True)
ROTATION_KEYS: Tuple[Optional[Key], ...] = (None, Key.CW, Key.ROTATE_180, Key.CCW)
DIRECTION_KEYS: Tuple[Key, ...] = (Key.LEFT, Key.RIGHT)


def _record(
    outcomes: Dict[Board, Move], move: Move, state: State, piece: Piece, hold: Piece
) -> None:
    locked = move.clone()
    if not locked.apply_key(Key.HARD_DROP, state.board, piece, hold):
        return
    board = state.board.apply_move(locked, piece, hold)
    if board not in outcomes:
        outcomes[board] = locked


def enumerate_placements(state: State) -> Dict[Board, Move]:
    """Return a mapping of every reachable resulting board to one move.

    An empty piece queue yields an empty mapping.  Iteration order of the
    result carries no meaning.
    """

    if not state.pieces:
        return {}

    outcomes: Dict[Board, Move] = {}
    board = state.board
    piece = state.pieces[0]
    hold = state.hold_piece

    for use_hold in HOLD_CHOICES:
        for rotation_key in ROTATION_KEYS:
            base = Move()
            if use_hold and not base.apply_key(Key.HOLD, board, piece, hold):
                continue
            if rotation_key is not None and not base.apply_key(rotation_key, board, piece, hold):
                continue
            if not board.fits(base.piece_for(piece, hold), base.rotation, base.y, base.x):
                continue

            _record(outcomes, base, state, piece, hold)

            move = base.clone()
            for direction in DIRECTION_KEYS:
                move.reset(base)
                while move.apply_key(direction, board, piece, hold):
                    _record(outcomes, move, state, piece, hold)

    LOGGER.debug(
        "enumerated %d boards for %s (hold %s)", len(outcomes), piece.value, hold.value
    )
    return outcomes


class PlacementEnumerator:
    """Object wrapper around :func:`enumerate_placements`."""

    def enumerate(self, state: State) -> Dict[Board, Move]:
        return enumerate_placements(state)


__all__ = ["PlacementEnumerator", "enumerate_placements"]
