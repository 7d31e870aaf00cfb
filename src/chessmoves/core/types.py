"""Board coordinates.

Rows and columns are both 1-based::

    row 8   (8,1) ... (8,8)     a8 ... h8
    ...
    row 1   (1,1) ... (1,8)     a1 ... h1

Column 1 is file ``a``, row 1 is rank ``1`` (white's back rank).
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


def on_board(row: int, column: int) -> bool:
    """Whether (*row*, *column*) lies inside the 8x8 board."""
    return 1 <= row <= BOARD_SIZE and 1 <= column <= BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Immutable board square addressed by (row, column)."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if not on_board(self.row, self.column):
            raise ValueError(f"Position off the board: ({self.row}, {self.column})")

    def offset(self, d_row: int, d_col: int) -> Position | None:
        """The square shifted by (*d_row*, *d_col*), or ``None`` if off-board."""
        row = self.row + d_row
        column = self.column + d_col
        if not on_board(row, column):
            return None
        return Position(row, column)

    # ── Algebraic names ──────────────────────────────────────────────────

    @property
    def name(self) -> str:
        """Human-readable name, e.g. (1, 1) → 'a1', (4, 5) → 'e4'."""
        return _FILES[self.column - 1] + _RANKS[self.row - 1]

    @classmethod
    def from_name(cls, name: str) -> Position:
        """Parse square name, e.g. 'e4' → Position(4, 5)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_RANKS.index(name[1]) + 1, _FILES.index(name[0]) + 1)

    def __str__(self) -> str:
        return self.name


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(row, column)
    for row in range(1, BOARD_SIZE + 1)
    for column in range(1, BOARD_SIZE + 1)
)
