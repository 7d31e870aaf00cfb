"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

# Offset from the white symbol (♔ U+2654) per piece type; black adds 6.
_SYMBOL_INDEX: dict[PieceType, int] = {
    PieceType.KING: 0,
    PieceType.QUEEN: 1,
    PieceType.ROOK: 2,
    PieceType.BISHOP: 3,
    PieceType.KNIGHT: 4,
    PieceType.PAWN: 5,
}

_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a color plus a piece type.

    Two pieces of the same color and type are interchangeable.
    """

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            ptype = _BY_LETTER[char.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        base = 0x2654 if self.color == Color.WHITE else 0x265A
        return chr(base + _SYMBOL_INDEX[self.piece_type])
