from dataclasses import dataclass, replace

from .premiums import DEFAULT_SIZE


@dataclass(frozen=True)
class GameConfig:
    """Variant rules for the Super Scrabble board.

    ``bonus_length``/``bonus_score``: a primary word of exactly this many letters
    earns the fixed bonus (8 and 50 for this variant, 7 and 50 in classic play).

    The remaining flags are house rules, all off by default.
    """

    board_size: int = DEFAULT_SIZE
    bonus_length: int = 8
    bonus_score: int = 50
    # A candidate covering only existing tiles is not a move.
    require_new_tile: bool = False
    # The opening word must cover the centre square.
    require_center_on_empty: bool = False
    # Rank a placement reached from several anchors only once.
    dedupe_candidates: bool = False

    def __post_init__(self) -> None:
        if self.board_size <= 0:
            raise ValueError(f"board_size must be positive, got {self.board_size}")
        if self.bonus_length <= 0:
            raise ValueError(f"bonus_length must be positive, got {self.bonus_length}")
        if self.bonus_score < 0:
            raise ValueError(f"bonus_score must be >= 0, got {self.bonus_score}")

    def replace(self, **overrides) -> "GameConfig":
        """Copy with the given fields changed; ``None`` values are ignored."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


DEFAULT_CONFIG = GameConfig()
