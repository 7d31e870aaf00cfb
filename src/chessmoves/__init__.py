"""Single-ply chess move enumeration."""

from chessmoves.core import (
    Board,
    Color,
    Move,
    MoveGenerator,
    Piece,
    PieceType,
    Position,
    generate_moves,
)

__all__ = [
    "Board",
    "Color",
    "Move",
    "MoveGenerator",
    "Piece",
    "PieceType",
    "Position",
    "generate_moves",
]

__version__ = "0.1.0"
