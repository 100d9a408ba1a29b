"""Placement enumeration and board evaluation for a Tetris-playing agent."""

from .board import Board
from .breakdown import ScoreBreakdown
from .config import DEFAULT_CONFIG, EvaluatorConfig, Factors, Profile, Weights
from .decision import Candidate, best_placement, rank_placements
from .enumerator import PlacementEnumerator, enumerate_placements
from .evaluator import BoardEvaluator, evaluate
from .moves import Key, Move
from .state import Props, State
from .tetromino import Piece, shape_blocks

__all__ = [
    "Board",
    "BoardEvaluator",
    "Candidate",
    "DEFAULT_CONFIG",
    "EvaluatorConfig",
    "Factors",
    "Key",
    "Move",
    "Piece",
    "PlacementEnumerator",
    "Profile",
    "Props",
    "ScoreBreakdown",
    "State",
    "Weights",
    "best_placement",
    "enumerate_placements",
    "evaluate",
    "rank_placements",
    "shape_blocks",
]
