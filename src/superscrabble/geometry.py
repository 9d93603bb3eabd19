from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class PositionOverflow(IndexError):
    """Raised when a Position is built from an index outside the grid."""


class Direction(Enum):
    RIGHT = "R"
    DOWN = "D"

    def opposite(self) -> "Direction":
        return Direction.DOWN if self is Direction.RIGHT else Direction.RIGHT

    def offset(self, size: int) -> int:
        return 1 if self is Direction.RIGHT else size

    @property
    def delta(self) -> Tuple[int, int]:
        # (dr, dc)
        return (0, 1) if self is Direction.RIGHT else (1, 0)

    @staticmethod
    def parse(text: str) -> "Direction":
        """Accept 'R'/'RIGHT'/'H' or 'D'/'DOWN'/'V' (case-insensitive)."""
        key = text.strip().upper()
        if key in ("R", "RIGHT", "H", "ACROSS"):
            return Direction.RIGHT
        if key in ("D", "DOWN", "V"):
            return Direction.DOWN
        raise ValueError(f"Unknown direction: {text!r}")


@dataclass(frozen=True, order=True)
class Position:
    """A square of a ``size`` x ``size`` grid, stored as ``row * size + col``."""

    index: int
    size: int

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Board size must be positive, got {self.size}")
        if not (0 <= self.index < self.size * self.size):
            raise PositionOverflow(f"Index {self.index} outside a {self.size}x{self.size} grid")

    @staticmethod
    def from_coords(row: int, col: int, size: int) -> "Position":
        if not (0 <= row < size and 0 <= col < size):
            raise PositionOverflow(f"({row},{col}) outside a {size}x{size} grid")
        return Position(row * size + col, size)

    @property
    def row(self) -> int:
        return self.index // self.size

    @property
    def col(self) -> int:
        return self.index % self.size

    @property
    def coords(self) -> Tuple[int, int]:
        return self.row, self.col

    def add_rows(self, n: int) -> Optional["Position"]:
        return self.step(Direction.DOWN, n)

    def add_columns(self, n: int) -> Optional["Position"]:
        return self.step(Direction.RIGHT, n)

    def step(self, direction: Direction, n: int = 1) -> Optional["Position"]:
        """Move ``n`` squares (negative = backwards) along ``direction``.

        Returns None when the result would leave the grid or wrap a row.
        """
        dr, dc = direction.delta
        r = self.row + n * dr
        c = self.col + n * dc
        if not (0 <= r < self.size and 0 <= c < self.size):
            return None
        return Position(self.index + n * direction.offset(self.size), self.size)

    def __repr__(self) -> str:
        return f"Position(row={self.row}, col={self.col})"
