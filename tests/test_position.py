"""Tests for BoardPosition lookup, predicates and the square universe."""

import dataclasses
import logging

import pytest

from boardpos.position import (
    A1,
    A8,
    ALL_POSITIONS,
    B1,
    C4,
    E4,
    H1,
    H8,
    BoardPosition,
)


class TestUniverse:
    def test_sixty_four_distinct(self) -> None:
        assert len(ALL_POSITIONS) == 64
        assert len(set(ALL_POSITIONS)) == 64
        assert {(p.file, p.rank) for p in ALL_POSITIONS} == {
            (f, r) for f in range(1, 9) for r in range(1, 9)
        }

    def test_file_major_order(self) -> None:
        assert ALL_POSITIONS[0] == A1
        assert ALL_POSITIONS[7] == A8
        assert ALL_POSITIONS[8] == B1
        assert ALL_POSITIONS[-1] == H8
        assert sorted(reversed(ALL_POSITIONS)) == list(ALL_POSITIONS)

    def test_named_constants(self) -> None:
        assert (E4.file, E4.rank) == (5, 4)
        assert (H1.file, H1.rank) == (8, 1)

    @pytest.mark.parametrize(
        "file, rank",
        [(0, 1), (9, 1), (1, 0), (1, 9), (4.5, 4), (4, 4.0), ("1", 1), (True, 1)],
    )
    def test_out_of_range_not_representable(
        self, file: object, rank: object
    ) -> None:
        with pytest.raises(ValueError, match="out of range"):
            BoardPosition(file, rank)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            E4.file = 3  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert BoardPosition(3, 4) == C4
        assert hash(BoardPosition(3, 4)) == hash(C4)


class TestLookup:
    def test_at_returns_shared_member(self) -> None:
        assert BoardPosition.at(5, 4) is E4

    def test_at_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            BoardPosition.at(9, 9)

    def test_label_and_pair_agree(self) -> None:
        for pos in ALL_POSITIONS:
            assert BoardPosition.from_label(pos.label) is pos
            assert BoardPosition.from_label(pos.label.lower()) is pos
            assert BoardPosition.at(pos.file, pos.rank) is pos

    def test_from_label_rejects_malformed(self) -> None:
        with pytest.raises(ValueError, match="Invalid square label"):
            BoardPosition.from_label("z9")

    def test_index_round_trip(self) -> None:
        assert A1.index == 0
        assert H1.index == 7
        assert H8.index == 63
        for pos in ALL_POSITIONS:
            assert BoardPosition.from_index(pos.index) is pos

    @pytest.mark.parametrize("index", [-1, 64, 3.5, "3"])
    def test_from_index_rejects_invalid(self, index: object) -> None:
        with pytest.raises(ValueError, match="Invalid square index"):
            BoardPosition.from_index(index)  # type: ignore[arg-type]

    def test_str_is_label(self) -> None:
        assert str(E4) == "E4"
        assert E4.label == "E4"

    def test_missing_pair_falls_back_to_self(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="boardpos.position"):
            assert E4._value_of(0, 9) is E4
        assert "No square at file=0 rank=9" in caplog.text


class TestPredicates:
    def test_columns(self) -> None:
        assert A1.is_first_column() and not A1.non_first_column()
        assert H1.is_last_column() and not H1.non_last_column()
        assert E4.non_first_column() and E4.non_last_column()
        assert not E4.is_first_column() and not E4.is_last_column()

    def test_rows(self) -> None:
        assert A1.is_first_row() and not A1.non_first_row()
        assert A8.is_last_row() and not A8.non_last_row()
        assert E4.non_first_row() and E4.non_last_row()
        assert not E4.is_first_row() and not E4.is_last_row()

    def test_predicates_match_coordinates(self) -> None:
        for pos in ALL_POSITIONS:
            assert pos.is_first_column() == (pos.file == 1)
            assert pos.is_last_column() == (pos.file == 8)
            assert pos.is_first_row() == (pos.rank == 1)
            assert pos.is_last_row() == (pos.rank == 8)
