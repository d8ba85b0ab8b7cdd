"""Board geometry constants and square label helpers.

Coordinates are 1-based on both axes:
    file 1..8 = columns a..h (left to right)
    rank 1..8 = rows 1..8 (bottom to top)
"""

from __future__ import annotations

from typing import TypeAlias

File: TypeAlias = int  # 1–8
Rank: TypeAlias = int  # 1–8

BOARD_SIZE: int = 8
FIRST_FILE: File = 1
LAST_FILE: File = BOARD_SIZE
FIRST_RANK: Rank = 1
LAST_RANK: Rank = BOARD_SIZE

FILE_LETTERS = "ABCDEFGH"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_on_board(file: int, rank: int) -> bool:
    """Check whether (file, rank) names one of the 64 squares."""
    if not (_is_int(file) and _is_int(rank)):
        return False
    return FIRST_FILE <= file <= LAST_FILE and FIRST_RANK <= rank <= LAST_RANK


def square_label(file: File, rank: Rank) -> str:
    """Symbolic name, e.g. (1, 1) → 'A1', (8, 8) → 'H8'."""
    return FILE_LETTERS[file - 1] + str(rank)


def parse_label(label: str) -> tuple[File, Rank]:
    """Parse a square label (either case), e.g. 'e4' → (5, 4)."""
    if (
        len(label) != 2
        or label[0].upper() not in FILE_LETTERS
        or label[1] not in "12345678"
    ):
        raise ValueError(f"Invalid square label: {label!r}")
    return FILE_LETTERS.index(label[0].upper()) + 1, int(label[1])


def square_index(file: File, rank: Rank) -> int:
    """Flat 0–63 index in little-endian rank-file order (a1=0, h8=63)."""
    return (rank - 1) * BOARD_SIZE + (file - 1)


def coords_of(index: int) -> tuple[File, Rank]:
    """Inverse of :func:`square_index`."""
    if not _is_int(index) or not 0 <= index < BOARD_SIZE * BOARD_SIZE:
        raise ValueError(f"Invalid square index: {index!r}")
    rank_idx, file_idx = divmod(index, BOARD_SIZE)
    return file_idx + 1, rank_idx + 1
