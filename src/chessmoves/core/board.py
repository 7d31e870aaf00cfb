"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.types import ALL_POSITIONS, BOARD_SIZE, Position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class BoardView(Protocol):
    """Read-only occupancy query consumed by move generation."""

    def occupant(self, position: Position) -> Piece | None: ...


class Board:
    """Mutable 64-square board keyed by :class:`Position`."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: dict[Position, Piece] = {}

    # -- Element access -----------------------------------------------------

    def occupant(self, position: Position) -> Piece | None:
        return self._squares.get(position)

    def __getitem__(self, position: Position) -> Piece | None:
        return self._squares.get(position)

    def __setitem__(self, position: Position, piece: Piece | None) -> None:
        if piece is None:
            self._squares.pop(position, None)
        else:
            self._squares[position] = piece

    def add_piece(self, position: Position, piece: Piece) -> None:
        """Place *piece* on *position*, replacing whatever was there."""
        self._squares[position] = piece

    def remove_piece(self, position: Position) -> Piece | None:
        """Clear *position* and return the piece that stood there."""
        return self._squares.pop(position, None)

    def is_empty(self, position: Position) -> bool:
        return position not in self._squares

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Position, Piece]]:
        """(position, piece) pairs in row-major order from a1."""
        for position in ALL_POSITIONS:
            piece = self._squares.get(position)
            if piece is not None:
                yield position, piece

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for column in range(1, BOARD_SIZE + 1):
            b.add_piece(Position(2, column), Piece(Color.WHITE, PieceType.PAWN))
            b.add_piece(Position(7, column), Piece(Color.BLACK, PieceType.PAWN))
        for column, pt in enumerate(_BACK_RANK, start=1):
            b.add_piece(Position(1, column), Piece(Color.WHITE, pt))
            b.add_piece(Position(8, column), Piece(Color.BLACK, pt))
        return b

    @classmethod
    def from_placement(cls, placement: str) -> Board:
        """Parse the piece-placement field of a FEN string.

        Only the first field is read, so a full FEN string is accepted too.
        """
        fields = placement.split()
        if not fields:
            raise ValueError(f"Invalid FEN placement: {placement!r}")
        ranks = fields[0].split("/")
        if len(ranks) != BOARD_SIZE:
            raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")

        b = cls()
        for rank_idx, rank_text in enumerate(ranks):
            row = BOARD_SIZE - rank_idx
            column = 1
            for ch in rank_text:
                if ch.isdigit():
                    step = int(ch)
                    if not (1 <= step <= BOARD_SIZE):
                        raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                    column += step
                else:
                    if column > BOARD_SIZE:
                        raise ValueError(f"Invalid FEN rank width: {placement!r}")
                    b.add_piece(Position(row, column), Piece.from_char(ch))
                    column += 1
                if column > BOARD_SIZE + 1:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
            if column != BOARD_SIZE + 1:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        return b

    def placement(self) -> str:
        """Serialise back to a FEN piece-placement field."""
        ranks: list[str] = []
        for row in range(BOARD_SIZE, 0, -1):
            text = ""
            gap = 0
            for column in range(1, BOARD_SIZE + 1):
                piece = self._squares.get(Position(row, column))
                if piece is None:
                    gap += 1
                    continue
                if gap:
                    text += str(gap)
                    gap = 0
                text += str(piece)
            if gap:
                text += str(gap)
            ranks.append(text)
        return "/".join(ranks)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE, 0, -1):
            cells = []
            for column in range(1, BOARD_SIZE + 1):
                p = self._squares.get(Position(row, column))
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
