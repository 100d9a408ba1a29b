"""Pick a placement for one piece and print the result.

Run with: `python -m tetris_bot --piece T --next I --row "##.#######"`

Rows given with ``--row`` are listed top to bottom and the last one is the
bottom row of the board.  The chosen board, its inputs and the score
breakdown are printed.
"""

from __future__ import annotations

import argparse
import logging

from . import Board, BoardEvaluator, Piece, ScoreBreakdown, State, best_placement

LOGGER = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    piece_names = [p.value for p in Piece if p is not Piece.NONE]
    parser.add_argument("--piece", default="T", choices=piece_names, help="Active piece.")
    parser.add_argument("--next", default="I", choices=piece_names, help="Next piece in queue.")
    parser.add_argument(
        "--hold",
        default=Piece.NONE.value,
        choices=piece_names + [Piece.NONE.value],
        help="Held piece ('-' for none).",
    )
    parser.add_argument(
        "--row",
        action="append",
        default=[],
        help="Board row as 10 characters, '#' filled (repeatable).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s"
    )

    state = State(
        board=Board.from_strings(args.row),
        pieces=(Piece(args.piece), Piece(args.next)),
        hold=Piece(args.hold),
    )
    best = best_placement(state)
    if best is None:
        print("No placement available.")
        return

    breakdown = ScoreBreakdown()
    BoardEvaluator().evaluate(state.advance(best.board, best.move), breakdown)
    LOGGER.info("best of candidates for %s: %s", args.piece, best.move)

    print(best.board)
    print("keys:", " ".join(k.value for k in best.move.keys))
    print(breakdown.format())


if __name__ == "__main__":
    main()
