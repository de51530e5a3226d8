"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from functools import cached_property


class Direction(StrEnum):
    """Direction the *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class InvalidBoardError(ValueError):
    """Raised when a tile list is not a permutation of ``0..size*size-1``."""


@dataclass(frozen=True, eq=False)
class Board:
    """Immutable puzzle configuration.

    Tiles are stored row-major as a flat tuple. 0 represents the blank.
    Two boards compare equal iff their keys are equal.
    """

    size: int
    tiles: tuple[int, ...]
    _key: int = field(init=False, repr=False, compare=False, default=0)

    def __post_init__(self) -> None:
        # base-(size*size) positional encoding, cell 0 most significant
        base = self.size * self.size
        key = 0
        for v in self.tiles:
            key = key * base + v
        object.__setattr__(self, "_key", key)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int] | tuple[int, ...]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])

        Raises ``InvalidBoardError`` unless *flat* holds every value in
        ``0..size*size-1`` exactly once.
        """
        if size < 2:
            raise InvalidBoardError(f"Board size must be at least 2, got {size}.")
        n = size * size
        if len(flat) != n:
            raise InvalidBoardError(
                f"Expected {n} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        bad = [v for v in flat if not 0 <= v < n]
        if bad:
            raise InvalidBoardError(
                f"Tile values must lie in 0..{n - 1}, got {bad[0]}."
            )
        if len(set(flat)) != n:
            dupes = sorted({v for v in flat if flat.count(v) > 1})
            raise InvalidBoardError(f"Duplicate tile values: {dupes}.")
        return cls(size=size, tiles=tuple(flat))

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (all tiles in order, blank bottom-right)."""
        return cls(size=size, tiles=tuple(range(1, size * size)) + (0,))

    # -- identity -------------------------------------------------------------

    @property
    def key(self) -> int:
        return self._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._key == other._key

    def __hash__(self) -> int:
        return hash((self.size, self._key))

    # -- queries --------------------------------------------------------------

    @cached_property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank_index, self.size)

    @property
    def rows(self) -> list[list[int]]:
        n = self.size
        return [list(self.tiles[r * n : (r + 1) * n]) for r in range(n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return self == Board.goal(self.size)

    def swap(self, a: int, b: int) -> Board:
        """Return a copy of the board with cells *a* and *b* exchanged."""
        tiles = list(self.tiles)
        tiles[a], tiles[b] = tiles[b], tiles[a]
        return Board(size=self.size, tiles=tuple(tiles))

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.rows)
