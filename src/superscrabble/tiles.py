from enum import Enum
from typing import Dict, List


class InvalidTileChar(ValueError):
    """Raised when a character has no tile (anything but A-Z or a blank)."""


LETTER_SCORES: Dict[str, int] = {
    **{c: 1 for c in list("AEILNORSTU")},
    **{c: 2 for c in list("DG")},
    **{c: 3 for c in list("BCMP")},
    **{c: 4 for c in list("FHVWY")},
    "K": 5,
    **{c: 8 for c in list("JX")},
    **{c: 10 for c in list("QZ")},
}

# Characters accepted for a blank: ' ' on the board, '?' or '_' on a rack.
BLANK_CHARS = (" ", "?", "_")


class Tile(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"
    BLANK = " "

    @staticmethod
    def from_char(ch: str) -> "Tile":
        if ch in BLANK_CHARS:
            return Tile.BLANK
        tile = _TILE_BY_CHAR.get(ch)
        if tile is None:
            raise InvalidTileChar(f"Invalid tile character: {ch!r}")
        return tile

    def to_char(self) -> str:
        return self.value

    @property
    def score(self) -> int:
        return _SCORE_BY_TILE[self]


_TILE_BY_CHAR: Dict[str, Tile] = {t.value: t for t in Tile if t is not Tile.BLANK}
_SCORE_BY_TILE: Dict[Tile, int] = {
    **{t: LETTER_SCORES[t.value] for t in Tile if t is not Tile.BLANK},
    Tile.BLANK: 0,
}


def parse_rack(letters: str) -> List[Tile]:
    """Parse rack text such as ``"AEIRST?"`` into tiles (case-insensitive).

    Only line breaks are trimmed: a space is a blank, even at either end.
    """
    return [Tile.from_char(ch if ch in BLANK_CHARS else ch.upper()) for ch in letters.strip("\r\n")]
