"""Pseudo-legal move generation for a single piece.

King safety is not considered here; filtering moves that leave the king
in check is the caller's job.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from chessmoves.core.board import BoardView
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.errors import EmptySquareError, InvalidPieceKindError
from chessmoves.core.move import Move
from chessmoves.core.types import ALL_POSITIONS, Position

_LOGGER = logging.getLogger(__name__)

Offset = tuple[int, int]
MoveRule = Callable[[BoardView, Position], Iterable[Move]]

KNIGHT_OFFSETS: tuple[Offset, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[Offset, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[Offset, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Offset, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Offset, ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


def _mover_color(board: BoardView, position: Position) -> Color:
    piece = board.occupant(position)
    if piece is None:
        _LOGGER.warning("Move generation requested for empty square %s", position)
        raise EmptySquareError(position)
    return piece.color


# -- Ray walker (bishop, rook, queen) ------------------------------------------


def walk_ray(
    board: BoardView, position: Position, direction: Offset
) -> Iterator[Move]:
    """Slide from *position* along *direction* until the edge or a piece.

    An enemy piece ends the ray and is included as a capture; a friendly
    piece ends it and is not. A bad direction or an empty *position* is
    rejected at call time, before any move is yielded.
    """
    d_row, d_col = direction
    if (d_row, d_col) == (0, 0) or abs(d_row) > 1 or abs(d_col) > 1:
        raise ValueError(f"Not a unit direction: {direction!r}")
    return _walk(board, position, d_row, d_col, _mover_color(board, position))


def _walk(
    board: BoardView, position: Position, d_row: int, d_col: int, color: Color
) -> Iterator[Move]:
    target = position.offset(d_row, d_col)
    while target is not None:
        occupant = board.occupant(target)
        if occupant is None:
            yield Move(position, target)
            target = target.offset(d_row, d_col)
            continue
        if occupant.color != color:
            yield Move(position, target)
        break


def _slide(directions: tuple[Offset, ...]) -> MoveRule:
    def rule(board: BoardView, position: Position) -> Iterator[Move]:
        for direction in directions:
            yield from walk_ray(board, position, direction)

    return rule


# -- Step enumerator (king, knight) --------------------------------------------


def step_moves(
    board: BoardView, position: Position, offsets: Iterable[Offset]
) -> Iterator[Move]:
    """One move per on-board offset target that is empty or enemy-held."""
    return _steps(board, position, offsets, _mover_color(board, position))


def _steps(
    board: BoardView, position: Position, offsets: Iterable[Offset], color: Color
) -> Iterator[Move]:
    for d_row, d_col in offsets:
        target = position.offset(d_row, d_col)
        if target is None:
            continue
        occupant = board.occupant(target)
        if occupant is None or occupant.color != color:
            yield Move(position, target)


def _step(offsets: tuple[Offset, ...]) -> MoveRule:
    def rule(board: BoardView, position: Position) -> Iterator[Move]:
        return step_moves(board, position, offsets)

    return rule


# -- Pawn rules ----------------------------------------------------------------


def promotion_moves(start: Position, end: Position, color: Color) -> Iterator[Move]:
    """Expand a pawn move into one move per promotion choice on the far rank."""
    if end.row == color.promotion_row:
        for pt in PROMOTION_TYPES:
            yield Move(start, end, pt)
    else:
        yield Move(start, end)


def pawn_moves(board: BoardView, position: Position) -> Iterator[Move]:
    """Advances, double step from the start row, and diagonal captures."""
    return _pawn(board, position, _mover_color(board, position))


def _pawn(board: BoardView, position: Position, color: Color) -> Iterator[Move]:
    forward = color.forward

    one_step = position.offset(forward, 0)
    if one_step is not None and board.occupant(one_step) is None:
        yield from promotion_moves(position, one_step, color)

        if position.row == color.pawn_start_row:
            two_step = one_step.offset(forward, 0)
            # A double step lands on row 4 or 5, never the promotion row.
            if two_step is not None and board.occupant(two_step) is None:
                yield Move(position, two_step)

    for d_col in (-1, 1):
        target = position.offset(forward, d_col)
        if target is None:
            continue
        occupant = board.occupant(target)
        if occupant is not None and occupant.color != color:
            yield from promotion_moves(position, target, color)


# -- Dispatcher ----------------------------------------------------------------

_RULES: dict[PieceType, MoveRule] = {
    PieceType.BISHOP: _slide(BISHOP_DIRS),
    PieceType.ROOK: _slide(ROOK_DIRS),
    PieceType.QUEEN: _slide(QUEEN_DIRS),
    PieceType.KING: _step(KING_OFFSETS),
    PieceType.KNIGHT: _step(KNIGHT_OFFSETS),
    PieceType.PAWN: pawn_moves,
}


def generate_moves(board: BoardView, position: Position) -> frozenset[Move]:
    """Every square the piece on *position* can reach, ignoring king safety.

    Raises:
        EmptySquareError: *position* holds no piece.
        InvalidPieceKindError: the piece's type has no movement rule.
    """
    piece = board.occupant(position)
    if piece is None:
        _LOGGER.warning("Move generation requested for empty square %s", position)
        raise EmptySquareError(position)

    try:
        rule = _RULES[piece.piece_type]
    except (KeyError, TypeError):
        _LOGGER.warning("No movement rule for %r on %s", piece.piece_type, position)
        raise InvalidPieceKindError(piece.piece_type) from None

    moves = frozenset(rule(board, position))
    _LOGGER.debug("%s on %s: %d moves", piece, position, len(moves))
    return moves


class MoveGenerator:
    """Generates pseudo-legal moves against a fixed board.

    The board is only read; callers must not mutate it while a query runs.
    """

    __slots__ = ("_board",)

    def __init__(self, board: BoardView) -> None:
        self._board = board

    def moves_from(self, position: Position) -> frozenset[Move]:
        return generate_moves(self._board, position)

    def destinations(self, position: Position) -> frozenset[Position]:
        """Distinct end squares; promotion choices collapse to one square."""
        return frozenset(move.end for move in self.moves_from(position))

    def all_moves(self, color: Color) -> frozenset[Move]:
        """Union of the moves of every *color* piece on the board."""
        moves: set[Move] = set()
        for position in _occupied_by(self._board, color):
            moves.update(generate_moves(self._board, position))
        return frozenset(moves)


def _occupied_by(board: BoardView, color: Color) -> Iterator[Position]:
    for position in ALL_POSITIONS:
        piece = board.occupant(position)
        if piece is not None and piece.color == color:
            yield position
