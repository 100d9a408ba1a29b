"""Immutable bitboard representation of the Tetris playfield."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import HEIGHT, WIDTH, Piece, rotation_profile

if TYPE_CHECKING:
    from .moves import Move


FULL_ROW_MASK = (1 << WIDTH) - 1

Grid = NDArray[np.uint8]
Rows = Tuple[int, ...]


class Board:
    """Fixed 10x20 grid stored as one bitmask per row.

    Row ``0`` is the top row and bit ``x`` of a row mask is column ``x``.
    Boards never change after construction; every mutation primitive returns a
    new instance, which keeps them usable as dictionary keys.
    """

    width: int = WIDTH
    height: int = HEIGHT

    __slots__ = ("_rows", "_hash")

    def __init__(self, rows: Iterable[int] | None = None) -> None:
        if rows is None:
            rows = (0,) * HEIGHT
        rows = tuple(int(r) for r in rows)
        if len(rows) != HEIGHT:
            raise ValueError(f"Board needs {HEIGHT} rows, got {len(rows)}")
        if any(r < 0 or r > FULL_ROW_MASK for r in rows):
            raise ValueError("Row mask has bits outside the board")
        self._rows: Rows = rows
        self._hash = hash(rows)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]] | Grid) -> "Board":
        """Build a board from a ``HEIGHT x WIDTH`` occupancy grid."""

        if len(grid) != HEIGHT:
            raise ValueError("Grid height mismatch")
        rows = []
        for row in grid:
            if len(row) != WIDTH:
                raise ValueError("Grid width mismatch")
            mask = 0
            for col, value in enumerate(row):
                if value:
                    mask |= 1 << col
            rows.append(mask)
        return cls(rows)

    @classmethod
    def from_strings(cls, lines: Sequence[str]) -> "Board":
        """Build a board from text rows (``#`` filled, anything else empty).

        Rows are bottom-aligned: the last string is the bottom row and missing
        rows above are empty.
        """

        if len(lines) > HEIGHT:
            raise ValueError("Too many rows")
        rows = [0] * (HEIGHT - len(lines))
        for line in lines:
            if len(line) != WIDTH:
                raise ValueError(f"Row {line!r} is not {WIDTH} wide")
            rows.append(sum(1 << col for col, ch in enumerate(line) if ch == "#"))
        return cls(rows)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def rows(self) -> Rows:
        return self._rows

    def is_filled(self, row: int, col: int) -> bool:
        """Return ``True`` if ``(row, col)`` is occupied.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < HEIGHT and 0 <= col < WIDTH:
            return bool(self._rows[row] & (1 << col))
        raise IndexError("Cell out of bounds")

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if ``(row, col)`` is empty.

        Coordinates outside the board count as occupied so off-board
        positions are rejected by collision checks for free.
        """

        if 0 <= row < HEIGHT and 0 <= col < WIDTH:
            return not self._rows[row] & (1 << col)
        return False

    def fits(self, piece: Piece, rotation: int, row: int, col: int) -> bool:
        """Return ``True`` if ``piece`` can occupy ``(row, col)`` at ``rotation``."""

        profile = rotation_profile(piece, rotation)
        if col < 0 or col + profile.width > WIDTH:
            return False
        if row < 0 or row + profile.height > HEIGHT:
            return False
        for local_row, mask in enumerate(profile.row_masks):
            if self._rows[row + local_row] & (mask << col):
                return False
        return True

    def drop_row(self, piece: Piece, rotation: int, row: int, col: int) -> int:
        """Return the row the piece comes to rest on when falling from ``row``."""

        while self.fits(piece, rotation, row + 1, col):
            row += 1
        return row

    # ------------------------------------------------------------------
    # Mutation primitives (all return new boards)
    # ------------------------------------------------------------------
    def with_cells(self, cells: Iterable[Tuple[int, int]]) -> "Board":
        """Return a copy with every ``(row, col)`` in ``cells`` filled."""

        rows = list(self._rows)
        for row, col in cells:
            if not (0 <= row < HEIGHT and 0 <= col < WIDTH):
                raise IndexError("Cell out of bounds")
            rows[row] |= 1 << col
        return Board(rows)

    def lock(self, piece: Piece, rotation: int, row: int, col: int) -> "Board":
        """Return a copy with the piece's blocks written into the grid."""

        if not self.fits(piece, rotation, row, col):
            raise ValueError(f"{piece.value} does not fit at row {row}, column {col}")
        profile = rotation_profile(piece, rotation)
        rows = list(self._rows)
        for local_row, mask in enumerate(profile.row_masks):
            rows[row + local_row] |= mask << col
        return Board(rows)

    def clear_full_rows(self) -> Tuple["Board", int]:
        """Return the board with completed rows removed and how many there were."""

        remaining = [r for r in self._rows if r != FULL_ROW_MASK]
        cleared = HEIGHT - len(remaining)
        if not cleared:
            return self, 0
        return Board([0] * cleared + remaining), cleared

    def apply_move(self, move: "Move", piece: Piece, hold: Piece) -> "Board":
        """Lock the resolved placement of ``move`` and clear completed rows."""

        used = move.piece_for(piece, hold)
        board, _ = self.lock(used, move.rotation, move.y, move.x).clear_full_rows()
        return board

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    def grid(self) -> Grid:
        """Return the occupancy as a ``uint8`` array of shape ``(HEIGHT, WIDTH)``."""

        masks = np.asarray(self._rows, dtype=np.uint16)[:, None]
        bits = np.left_shift(np.uint16(1), np.arange(WIDTH, dtype=np.uint16))
        return (np.bitwise_and(masks, bits) != 0).astype(np.uint8)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"Board({list(self._rows)!r})"

    def __str__(self) -> str:
        return "\n".join(
            "".join("#" if mask & (1 << col) else "." for col in range(WIDTH))
            for mask in self._rows
        )
