"""Exceptions raised by move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessmoves.core.types import Position


class ChessMovesError(Exception):
    """Base class for every error raised by this package."""


class EmptySquareError(ChessMovesError, ValueError):
    """Moves were requested for a square that holds no piece."""

    def __init__(self, position: Position) -> None:
        super().__init__(f"No piece on {position.name}")
        self.position = position


class InvalidPieceKindError(ChessMovesError, ValueError):
    """The piece's type has no movement rule."""

    def __init__(self, piece_type: object) -> None:
        super().__init__(f"No movement rule for piece type {piece_type!r}")
        self.piece_type = piece_type
