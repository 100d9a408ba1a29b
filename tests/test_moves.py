from __future__ import annotations

from tetris_bot.board import Board
from tetris_bot.moves import Key, Move
from tetris_bot.tetromino import SPAWN_COLUMN, Piece, shape_blocks


def test_new_move_starts_at_spawn() -> None:
    move = Move()
    assert (move.hold, move.rotation, move.x, move.y) == (False, 0, SPAWN_COLUMN, 0)
    assert move.keys == []


def test_shift_stops_at_wall_without_changing_move() -> None:
    board = Board()
    move = Move()
    for _ in range(SPAWN_COLUMN):
        assert move.apply_key(Key.LEFT, board, Piece.O, Piece.NONE)
    assert move.x == 0
    before = move.clone()
    assert not move.apply_key(Key.LEFT, board, Piece.O, Piece.NONE)
    assert move == before


def test_shift_right_reaches_last_column_for_width_two_piece() -> None:
    board = Board()
    move = Move()
    steps = 0
    while move.apply_key(Key.RIGHT, board, Piece.O, Piece.NONE):
        steps += 1
    assert move.x == Board.width - 2
    assert steps == Board.width - 2 - SPAWN_COLUMN
    assert move.keys == [Key.RIGHT] * steps


def test_rotation_keys_turn_in_place() -> None:
    board = Board()
    move = Move()
    assert move.apply_key(Key.CW, board, Piece.T, Piece.NONE)
    assert move.rotation == 1
    assert move.apply_key(Key.ROTATE_180, board, Piece.T, Piece.NONE)
    assert move.rotation == 3
    assert move.apply_key(Key.CCW, board, Piece.T, Piece.NONE)
    assert move.rotation == 2
    assert (move.x, move.y) == (SPAWN_COLUMN, 0)


def test_rotation_blocked_at_spawn() -> None:
    # Only the vertical I overlaps this cell at the spawn column.
    board = Board().with_cells([(2, SPAWN_COLUMN)])
    move = Move()
    assert not move.apply_key(Key.CW, board, Piece.I, Piece.NONE)
    assert move.rotation == 0
    assert move.keys == []
    assert move.apply_key(Key.ROTATE_180, board, Piece.I, Piece.NONE)


def test_hold_requires_a_piece_and_only_works_once() -> None:
    board = Board()
    move = Move()
    assert not move.apply_key(Key.HOLD, board, Piece.T, Piece.NONE)
    assert move.apply_key(Key.HOLD, board, Piece.T, Piece.I)
    assert move.hold
    assert move.piece_for(Piece.T, Piece.I) is Piece.I
    assert not move.apply_key(Key.HOLD, board, Piece.T, Piece.I)
    assert move.keys == [Key.HOLD]


def test_hold_resets_to_spawn() -> None:
    board = Board()
    move = Move()
    move.apply_key(Key.CW, board, Piece.T, Piece.I)
    move.apply_key(Key.LEFT, board, Piece.T, Piece.I)
    assert move.apply_key(Key.HOLD, board, Piece.T, Piece.I)
    assert (move.rotation, move.x, move.y) == (0, SPAWN_COLUMN, 0)


def test_hard_drop_moves_to_floor() -> None:
    board = Board()
    move = Move()
    assert move.apply_key(Key.HARD_DROP, board, Piece.O, Piece.NONE)
    assert move.y == Board.height - 2
    assert move.keys[-1] is Key.HARD_DROP


def test_hard_drop_fails_when_piece_overlaps() -> None:
    board = Board().with_cells([(0, SPAWN_COLUMN)])
    move = Move()
    assert not move.apply_key(Key.HARD_DROP, board, Piece.O, Piece.NONE)


def test_clone_and_reset_are_independent_copies() -> None:
    board = Board()
    base = Move()
    base.apply_key(Key.CW, board, Piece.L, Piece.NONE)
    move = base.clone()
    move.apply_key(Key.RIGHT, board, Piece.L, Piece.NONE)
    assert base.keys == [Key.CW]
    assert move.keys == [Key.CW, Key.RIGHT]
    move.reset(base)
    assert move == base
    move.keys.append(Key.LEFT)
    assert base.keys == [Key.CW]


def test_shape_blocks_wrap_rotation() -> None:
    assert shape_blocks(Piece.I, 1) == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert shape_blocks(Piece.I, 5) == shape_blocks(Piece.I, 1)
