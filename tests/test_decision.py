from __future__ import annotations

import pytest

from tetris_bot.__main__ import main
from tetris_bot.board import Board
from tetris_bot.decision import best_placement, rank_placements
from tetris_bot.enumerator import enumerate_placements
from tetris_bot.evaluator import BoardEvaluator, evaluate
from tetris_bot.moves import Move
from tetris_bot.state import Props, State
from tetris_bot.tetromino import Piece

BOARD = Board.from_strings(["#........#", "##..#..###", "####.#####"])


def test_state_advance_without_hold() -> None:
    state = State(board=BOARD, pieces=(Piece.T, Piece.I, Piece.O), hold=Piece.S, props=Props(atk=1))
    nxt = state.advance(Board(), Move())
    assert nxt.pieces == (Piece.I, Piece.O)
    assert nxt.hold is Piece.S
    assert nxt.props == state.props
    assert nxt.board == Board()


def test_state_advance_hold_into_empty_slot_consumes_next_piece() -> None:
    state = State(pieces=(Piece.T, Piece.I, Piece.O))
    nxt = state.advance(Board(), Move(hold=True))
    assert nxt.hold is Piece.T
    assert nxt.pieces == (Piece.O,)


def test_state_advance_hold_swap() -> None:
    state = State(pieces=(Piece.T, Piece.I), hold=Piece.L)
    nxt = state.advance(Board(), Move(hold=True))
    assert nxt.hold is Piece.T
    assert nxt.pieces == (Piece.I,)


def test_state_pieces_become_tuple() -> None:
    state = State(pieces=[Piece.J, Piece.L])
    assert state.pieces == (Piece.J, Piece.L)
    assert state.active is Piece.J
    assert state.hold_piece is Piece.L


def test_rank_placements_sorted_best_first() -> None:
    state = State(board=BOARD, pieces=(Piece.L, Piece.J))
    ranked = rank_placements(state)
    assert len(ranked) == len(enumerate_placements(state))
    scores = [c.score for c in ranked]
    assert scores == sorted(scores, reverse=True)
    for candidate in ranked[:5]:
        assert candidate.score == evaluate(state.advance(candidate.board, candidate.move))


def test_best_placement_matches_top_of_ranking() -> None:
    state = State(board=BOARD, pieces=(Piece.T, Piece.I))
    best = best_placement(state, BoardEvaluator())
    assert best is not None
    assert best.score == rank_placements(state)[0].score


def test_best_placement_none_for_empty_queue() -> None:
    assert best_placement(State(board=BOARD)) is None


def test_cli_prints_board_keys_and_score(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--piece", "O", "--next", "I", "--row", "####..####"])
    out = capsys.readouterr().out
    assert "keys:" in out
    assert "hard_drop" in out
    assert "score:" in out
