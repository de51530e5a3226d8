"""Board model — keys, validation and queries."""

from __future__ import annotations

import dataclasses
import itertools

import pytest

from backend.models.board import Board, InvalidBoardError


# -- keys ---------------------------------------------------------------------


def test_keys_are_unique_for_every_2x2_permutation() -> None:
    boards = [Board.from_flat(2, list(p)) for p in itertools.permutations(range(4))]
    assert len({b.key for b in boards}) == len(boards) == 24


def test_keys_are_unique_for_3x3_permutations() -> None:
    perms = itertools.islice(itertools.permutations(range(9)), 20000)
    keys = {Board(size=3, tiles=p).key for p in perms}
    assert len(keys) == 20000


def test_keys_distinguish_multi_digit_tiles() -> None:
    # "1 12 | 11 2" and "11 2 | 1 12" concatenate to the same decimal digits.
    rest = [0, 3, 4, 5, 6, 7, 8, 9, 10, 13, 14, 15]
    a = Board.from_flat(4, [1, 12, 11, 2] + rest)
    b = Board.from_flat(4, [11, 2, 1, 12] + rest)
    assert a != b
    assert a.key != b.key


def test_key_is_positional_base_n() -> None:
    board = Board.from_flat(2, [1, 2, 3, 0])
    assert board.key == ((1 * 4 + 2) * 4 + 3) * 4 + 0


def test_equality_and_hash_follow_key() -> None:
    a = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 8, 0])
    b = Board(size=3, tiles=(1, 2, 3, 4, 5, 6, 7, 8, 0))
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])


def test_board_is_immutable() -> None:
    board = Board.goal(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        board.tiles = (0,) * 9  # type: ignore[misc]


# -- validation ---------------------------------------------------------------


@pytest.mark.parametrize(
    "size, flat, message",
    [
        (3, [1, 2, 3, 4, 5, 6, 7, 8], "Expected 9 tiles"),
        (3, [1, 2, 3, 4, 5, 6, 7, 8, 9], "0..8"),
        (3, [1, 2, 3, 4, 5, 6, 7, 8, -1], "0..8"),
        (3, [1, 1, 3, 4, 5, 6, 7, 8, 0], "Duplicate tile values: [1]"),
        (1, [0], "at least 2"),
    ],
    ids=["short", "too-large", "negative", "duplicate", "size-1"],
)
def test_from_flat_rejects_malformed_input(size: int, flat: list[int], message: str) -> None:
    with pytest.raises(InvalidBoardError) as info:
        Board.from_flat(size, flat)
    assert message in str(info.value)


def test_invalid_board_error_is_a_value_error() -> None:
    assert issubclass(InvalidBoardError, ValueError)


# -- queries ------------------------------------------------------------------


def test_goal_layout() -> None:
    assert Board.goal(3).tiles == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert Board.goal(2).tiles == (1, 2, 3, 0)
    assert Board.goal(3).is_solved()


def test_blank_position_and_rows() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    assert board.blank_index == 4
    assert board.blank_pos == (1, 1)
    assert board.rows == [[1, 2, 3], [4, 0, 5], [6, 7, 8]]
    assert board.get_tile(2, 0) == 6
    assert not board.is_solved()


def test_swap_returns_new_board() -> None:
    board = Board.goal(2)
    swapped = board.swap(2, 3)
    assert swapped.tiles == (1, 2, 0, 3)
    assert board.tiles == (1, 2, 3, 0)


def test_str_renders_rows() -> None:
    assert str(Board.goal(2)) == "1 2\n3 0"
