"""Core domain layer - pure chess move generation with zero external dependencies.

Quick start::

    from chessmoves.core import Board, Position, generate_moves

    board = Board.initial()
    for move in generate_moves(board, Position.from_name("g1")):
        print(move)
"""

from chessmoves.core.board import STARTING_PLACEMENT, Board, BoardView
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.errors import (
    ChessMovesError,
    EmptySquareError,
    InvalidPieceKindError,
)
from chessmoves.core.move import Move
from chessmoves.core.move_generator import (
    MoveGenerator,
    generate_moves,
    pawn_moves,
    step_moves,
    walk_ray,
)
from chessmoves.core.piece import Piece
from chessmoves.core.types import BOARD_SIZE, Position, on_board

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Position",
    "on_board",
    # Domain objects
    "Board",
    "BoardView",
    "Move",
    "Piece",
    "STARTING_PLACEMENT",
    # Move generation
    "MoveGenerator",
    "generate_moves",
    "pawn_moves",
    "step_moves",
    "walk_ray",
    # Errors
    "ChessMovesError",
    "EmptySquareError",
    "InvalidPieceKindError",
]
