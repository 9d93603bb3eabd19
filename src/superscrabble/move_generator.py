import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .board import Board, Word
from .config import DEFAULT_CONFIG, GameConfig
from .geometry import Direction, Position
from .lexicon import Lexicon, LexiconLike, require_lexicon
from .scoring import get_score
from .tiles import Tile
from .validator import verify_move

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredMove:
    score: int
    word: Word

    def __str__(self) -> str:
        return f"{self.word} = {self.score}"


def can_create_word(rack: Iterable[Tile], word: str) -> bool:
    """True if the rack can spell ``word``.

    Greedy: each letter takes a matching tile if one is left, otherwise a blank.
    """
    counts = Counter(rack)
    for ch in word:
        tile = Tile.from_char(ch)
        if counts[tile] > 0:
            counts[tile] -= 1
        elif counts[Tile.BLANK] > 0:
            counts[Tile.BLANK] -= 1
        else:
            return False
    return True


def get_createable_words(rack: Sequence[Tile], lexicon: Lexicon) -> List[str]:
    return [w for w in lexicon if can_create_word(rack, w)]


def get_move_positions(board: Board, location: Position, word: str) -> List[Word]:
    """Every placement of ``word`` that puts one of its letters on ``location``.

    THIS DOES NOT GUARANTEE VALID MOVES: bounds, overlaps and cross words are
    left to :func:`verify_move`. Starts that would lie off the grid cannot be
    represented and are skipped.

    With HELLO at (11,11) across, "EWE" on the E at (11,12) gives four
    placements: two per E of EWE, down and across.
    """
    anchor = board.get(location)
    placements = []
    for direction in (Direction.DOWN, Direction.RIGHT):
        for i, ch in enumerate(word):
            if Tile.from_char(ch) != anchor:
                continue
            start = location.step(direction, -i)
            if start is None:
                continue
            placements.append(Word(start, direction, word))
    return placements


def _anchors(board: Board) -> List[Tuple[Position, Optional[Tile]]]:
    if board.is_empty():
        # Opening move: words through the centre square, spelled from the rack alone.
        return [(board.center, None)]
    return list(board.enumerate_letters())


def _opening_positions(board: Board, word: str) -> List[Word]:
    placements = []
    for direction in (Direction.DOWN, Direction.RIGHT):
        for i in range(len(word)):
            start = board.center.step(direction, -i)
            if start is not None:
                placements.append(Word(start, direction, word))
    return placements


def rank_candidates(
    board: Board,
    rack: Sequence[Tile],
    lexicon: Optional[LexiconLike],
    config: GameConfig = DEFAULT_CONFIG,
) -> List[ScoredMove]:
    """Score every candidate placement (legal or not), strongest first.

    Ties keep the order candidates were found in: anchors by board index, words
    in lexicon order, Down before Right, then by which letter of the word sits
    on the anchor. A placement reachable from two anchors appears twice unless
    ``config.dedupe_candidates`` is set.
    """
    lexicon = require_lexicon(lexicon)
    working = list(rack)
    feasible_by_tile: Dict[Optional[Tile], List[str]] = {}
    seen = set()
    ranked: List[ScoredMove] = []

    anchors = _anchors(board)
    for location, tile in anchors:
        if tile is not None:
            working.append(tile)

        # Same anchor tile, same augmented rack: reuse the lexicon pass.
        words = feasible_by_tile.get(tile)
        if words is None:
            words = get_createable_words(working, lexicon)
            feasible_by_tile[tile] = words

        for w in words:
            if tile is None:
                placements = _opening_positions(board, w)
            else:
                placements = get_move_positions(board, location, w)
            for candidate in placements:
                if config.dedupe_candidates:
                    if candidate in seen:
                        continue
                    seen.add(candidate)
                ranked.append(ScoredMove(get_score(board, candidate, config=config), candidate))

        if tile is not None:
            working.pop()

    ranked.sort(key=lambda m: m.score, reverse=True)
    logger.debug("Ranked %d candidates from %d anchors", len(ranked), len(anchors))
    return ranked


def best_moves(
    board: Board,
    rack: Sequence[Tile],
    lexicon: Optional[LexiconLike],
    config: GameConfig = DEFAULT_CONFIG,
) -> Iterator[ScoredMove]:
    """Legal moves from strongest to weakest.

    Candidates are scored and sorted up front, since scoring is cheap; the more
    expensive legality check runs only as the caller pulls moves, so taking the
    first few skips validating the rest.
    """
    lexicon = require_lexicon(lexicon)
    ranked = rank_candidates(board, rack, lexicon, config)
    return (m for m in ranked if verify_move(board, m.word, lexicon, config))


def best_move(
    board: Board,
    rack: Sequence[Tile],
    lexicon: Optional[LexiconLike],
    config: GameConfig = DEFAULT_CONFIG,
) -> Optional[ScoredMove]:
    return next(best_moves(board, rack, lexicon, config), None)
