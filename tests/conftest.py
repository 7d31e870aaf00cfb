"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessmoves.core.board import Board
from chessmoves.core.piece import Piece
from chessmoves.core.types import Position


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def place(empty_board: Board) -> Callable[..., Board]:
    """Put pieces on the empty board by square name: ``place(e4="N", d5="p")``."""

    def _place(**pieces: str) -> Board:
        for name, char in pieces.items():
            empty_board.add_piece(Position.from_name(name), Piece.from_char(char))
        return empty_board

    return _place
