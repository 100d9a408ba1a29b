"""Rank the enumerated placements of a state by their evaluated score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .board import Board
from .enumerator import enumerate_placements
from .evaluator import BoardEvaluator
from .moves import Move
from .state import State


@dataclass(frozen=True)
class Candidate:
    score: float
    board: Board
    move: Move


def rank_placements(
    state: State, evaluator: Optional[BoardEvaluator] = None
) -> List[Candidate]:
    """Return every candidate outcome of ``state``, best score first.

    Each board is scored through the hypothetical state built by
    :meth:`State.advance`.  Equal scores keep enumeration order.
    """

    evaluator = evaluator or BoardEvaluator()
    candidates = [
        Candidate(evaluator.evaluate(state.advance(board, move)), board, move)
        for board, move in enumerate_placements(state).items()
    ]
    candidates.sort(key=lambda c: c.score, reverse=True)
    return candidates


def best_placement(
    state: State, evaluator: Optional[BoardEvaluator] = None
) -> Optional[Candidate]:
    """Return the highest scoring candidate, or ``None`` with nothing to place."""

    ranked = rank_placements(state, evaluator)
    return ranked[0] if ranked else None
