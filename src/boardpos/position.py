"""BoardPosition — one of the 64 squares, with edge-aware navigation.

Every navigation method is total: a step that would leave the board
returns the position unchanged instead of raising. Diagonal steps move the
column first and the row second; when the column is blocked nothing moves,
when only the row is blocked the column move is kept.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from boardpos.enums import ALL_DIRECTIONS, Direction
from boardpos.types import (
    FIRST_FILE,
    FIRST_RANK,
    LAST_FILE,
    LAST_RANK,
    File,
    Rank,
    coords_of,
    is_on_board,
    parse_label,
    square_index,
    square_label,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class BoardPosition:
    """Immutable (file, rank) square; ordered A1, A2, ..., A8, B1, ..., H8."""

    file: File
    rank: Rank

    def __post_init__(self) -> None:
        if not is_on_board(self.file, self.rank):
            raise ValueError(
                f"Square out of range: file={self.file!r}, rank={self.rank!r}"
            )

    # ── Lookup ───────────────────────────────────────────────────────────

    @classmethod
    def at(cls, file: File, rank: Rank) -> BoardPosition:
        """Shared universe member at (file, rank)."""
        try:
            return _BY_COORDS[(file, rank)]
        except KeyError:
            raise ValueError(
                f"Square out of range: file={file!r}, rank={rank!r}"
            ) from None

    @classmethod
    def from_label(cls, label: str) -> BoardPosition:
        """Look up a square by name, e.g. 'E4' or 'e4'."""
        return _BY_COORDS[parse_label(label)]

    @classmethod
    def from_index(cls, index: int) -> BoardPosition:
        """Look up a square by its 0–63 index (a1=0, b1=1, ..., h8=63)."""
        return _BY_COORDS[coords_of(index)]

    def _value_of(self, file: int, rank: int) -> BoardPosition:
        found = _BY_COORDS.get((file, rank))
        if found is None:
            _LOGGER.warning(
                "No square at file=%s rank=%s, staying on %s", file, rank, self
            )
            return self
        return found

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def label(self) -> str:
        return square_label(self.file, self.rank)

    @property
    def index(self) -> int:
        return square_index(self.file, self.rank)

    def __str__(self) -> str:
        return self.label

    # ── Edge predicates ──────────────────────────────────────────────────

    def is_first_column(self) -> bool:
        return self.file == FIRST_FILE

    def non_first_column(self) -> bool:
        return not self.is_first_column()

    def is_last_column(self) -> bool:
        return self.file == LAST_FILE

    def non_last_column(self) -> bool:
        return not self.is_last_column()

    def is_first_row(self) -> bool:
        return self.rank == FIRST_RANK

    def non_first_row(self) -> bool:
        return not self.is_first_row()

    def is_last_row(self) -> bool:
        return self.rank == LAST_RANK

    def non_last_row(self) -> bool:
        return not self.is_last_row()

    # ── Single-axis steps ────────────────────────────────────────────────

    def next_column(self) -> BoardPosition:
        if self.is_last_column():
            return self
        return self._value_of(self.file + 1, self.rank)

    def previous_column(self) -> BoardPosition:
        if self.is_first_column():
            return self
        return self._value_of(self.file - 1, self.rank)

    def next_row(self) -> BoardPosition:
        if self.is_last_row():
            return self
        return self._value_of(self.file, self.rank + 1)

    def previous_row(self) -> BoardPosition:
        if self.is_first_row():
            return self
        return self._value_of(self.file, self.rank - 1)

    # ── Diagonal steps ───────────────────────────────────────────────────

    def _diagonal(
        self,
        column_step: Callable[[BoardPosition], BoardPosition],
        row_step: Callable[[BoardPosition], BoardPosition],
    ) -> BoardPosition:
        moved = column_step(self)
        if moved == self:
            return self
        # Row blocked: row_step returns `moved` itself, keeping the column move.
        return row_step(moved)

    def diagonal_right_up(self) -> BoardPosition:
        return self._diagonal(BoardPosition.next_column, BoardPosition.next_row)

    def diagonal_right_down(self) -> BoardPosition:
        return self._diagonal(BoardPosition.next_column, BoardPosition.previous_row)

    def diagonal_left_up(self) -> BoardPosition:
        return self._diagonal(BoardPosition.previous_column, BoardPosition.next_row)

    def diagonal_left_down(self) -> BoardPosition:
        return self._diagonal(
            BoardPosition.previous_column, BoardPosition.previous_row
        )

    # ── Direction-driven navigation ──────────────────────────────────────

    def step(self, direction: Direction) -> BoardPosition:
        """Apply the single step named by *direction* (same edge rules)."""
        return _STEPS[direction](self)

    def ray(self, direction: Direction) -> Iterator[BoardPosition]:
        """Yield squares along *direction* until a step is blocked.

        A diagonal step that only moves the column counts as blocked, so
        the ray never bends along an edge.
        """
        current = self
        while True:
            target = current.step(direction)
            if (target.file - current.file, target.rank - current.rank) != (
                direction.value
            ):
                return
            yield target
            current = target

    def neighbours(self) -> tuple[BoardPosition, ...]:
        """Squares one full step away, in :data:`ALL_DIRECTIONS` order."""
        adjacent: list[BoardPosition] = []
        for direction in ALL_DIRECTIONS:
            target = next(self.ray(direction), None)
            if target is not None:
                adjacent.append(target)
        return tuple(adjacent)


_STEPS: dict[Direction, Callable[[BoardPosition], BoardPosition]] = {
    Direction.UP: BoardPosition.next_row,
    Direction.DOWN: BoardPosition.previous_row,
    Direction.RIGHT: BoardPosition.next_column,
    Direction.LEFT: BoardPosition.previous_column,
    Direction.RIGHT_UP: BoardPosition.diagonal_right_up,
    Direction.RIGHT_DOWN: BoardPosition.diagonal_right_down,
    Direction.LEFT_UP: BoardPosition.diagonal_left_up,
    Direction.LEFT_DOWN: BoardPosition.diagonal_left_down,
}

# ── Universe ────────────────────────────────────────────────────────────────

ALL_POSITIONS: tuple[BoardPosition, ...] = tuple(
    BoardPosition(file, rank)
    for file in range(FIRST_FILE, LAST_FILE + 1)
    for rank in range(FIRST_RANK, LAST_RANK + 1)
)

_BY_COORDS: dict[tuple[File, Rank], BoardPosition] = {
    (pos.file, pos.rank): pos for pos in ALL_POSITIONS
}

# ── Named square constants ──────────────────────────────────────────────────

(A1, A2, A3, A4, A5, A6, A7, A8,
 B1, B2, B3, B4, B5, B6, B7, B8,
 C1, C2, C3, C4, C5, C6, C7, C8,
 D1, D2, D3, D4, D5, D6, D7, D8,
 E1, E2, E3, E4, E5, E6, E7, E8,
 F1, F2, F3, F4, F5, F6, F7, F8,
 G1, G2, G3, G4, G5, G6, G7, G8,
 H1, H2, H3, H4, H5, H6, H7, H8) = ALL_POSITIONS  # fmt: skip
