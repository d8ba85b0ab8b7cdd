"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from boardpos.position import ALL_POSITIONS, BoardPosition


@pytest.fixture
def interior() -> tuple[BoardPosition, ...]:
    """Squares that touch no edge of the board."""
    return tuple(
        pos
        for pos in ALL_POSITIONS
        if 1 < pos.file < 8 and 1 < pos.rank < 8
    )


@pytest.fixture
def corners() -> tuple[BoardPosition, ...]:
    return tuple(BoardPosition.at(f, r) for f in (1, 8) for r in (1, 8))
