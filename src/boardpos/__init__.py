"""Chessboard square coordinates with edge-aware navigation.

Quick start::

    from boardpos import BoardPosition, Direction

    pos = BoardPosition.from_label("c1")
    pos.diagonal_right_up()                 # D2
    list(pos.ray(Direction.LEFT_UP))        # [B2, A3]
    BoardPosition.at(8, 8).next_column()    # H8, blocked by the edge
"""

from boardpos.enums import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    Direction,
)
from boardpos.position import ALL_POSITIONS, BoardPosition
from boardpos.types import (
    BOARD_SIZE,
    File,
    Rank,
    is_on_board,
    parse_label,
    square_label,
)

__all__ = [
    # Enums
    "ALL_DIRECTIONS",
    "DIAGONAL_DIRECTIONS",
    "Direction",
    "ORTHOGONAL_DIRECTIONS",
    # Types / helpers
    "BOARD_SIZE",
    "File",
    "Rank",
    "is_on_board",
    "parse_label",
    "square_label",
    # Domain objects
    "ALL_POSITIONS",
    "BoardPosition",
]
