import argparse
import itertools
import logging
from typing import List, Optional

from .board import Board
from .config import DEFAULT_CONFIG
from .geometry import Direction
from .lexicon import LexiconError, load_dictionary
from .move_generator import best_moves
from .tiles import parse_rack

logger = logging.getLogger(__name__)


def _parse_move(text: str):
    # ROW,COL,DIR,WORD  e.g. 10,8,R,HELLO
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"expected ROW,COL,DIR,WORD, got {text!r}")
    try:
        return int(parts[0]), int(parts[1]), Direction.parse(parts[2]), parts[3].upper()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def _build_board(board_string: Optional[str], moves: List[tuple], size: int) -> Board:
    board = Board.from_string(board_string) if board_string else Board(size)
    for row, col, direction, word in moves:
        board.make_move(row, col, word, direction)
    return board


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Super Scrabble move suggester")
    p.add_argument("--rack", required=True, type=str, help="Your rack letters (use '?' for blanks)")
    p.add_argument("--dict", required=True, type=str, dest="dict_path", help="Path to dictionary file (one word per line)")
    p.add_argument("--board-string", type=str, help="N lines of N chars; '.' empty; A-Z tiles; '?' blank")
    p.add_argument("--move", type=_parse_move, action="append", default=[], dest="moves",
                   help="Commit a word before searching: ROW,COL,DIR,WORD (DIR is R or D). Repeatable")
    p.add_argument("--size", type=int, default=DEFAULT_CONFIG.board_size, help="Board size when no --board-string is given")
    p.add_argument("--top", type=int, default=10, help="Number of moves to print")
    p.add_argument("--bonus-length", type=int, help=f"Word length earning the bonus (default {DEFAULT_CONFIG.bonus_length})")
    p.add_argument("--bonus-score", type=int, help=f"Bonus points (default {DEFAULT_CONFIG.bonus_score})")
    p.add_argument("--require-new-tile", action="store_true", help="Reject candidates that place no new tile")
    p.add_argument("--require-center", action="store_true", help="The opening word must cover the centre square")
    p.add_argument("--dedupe", action="store_true", help="List a placement reached from several anchors once")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = DEFAULT_CONFIG.replace(
            board_size=args.size,
            bonus_length=args.bonus_length,
            bonus_score=args.bonus_score,
            require_new_tile=args.require_new_tile,
            require_center_on_empty=args.require_center,
            dedupe_candidates=args.dedupe,
        )
        rack = parse_rack(args.rack)
        board = _build_board(args.board_string, args.moves, config.board_size)
    except (ValueError, IndexError) as exc:
        p.error(str(exc))

    try:
        dictionary = load_dictionary(args.dict_path)
    except OSError as exc:
        p.error(f"cannot read dictionary: {exc}")
    logger.debug("Board has %d committed words, lexicon %d words", len(board.moves), len(dictionary))

    try:
        moves = list(itertools.islice(best_moves(board, rack, dictionary, config), max(args.top, 1)))
    except LexiconError as exc:
        p.error(str(exc))

    if not moves:
        print("No valid moves found.")
        return 1

    for rank, move in enumerate(moves, 1):
        word = move.word
        r, c = word.start.coords
        print(f"{rank:>3}. {word.text} at ({r},{c}) {word.direction.name} score={move.score}")

    best = board.copy()
    best.commit(moves[0].word)
    print("Board after best move:")
    print(best.to_string())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
