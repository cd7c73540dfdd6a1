"""Board model: tiles, score, status and the move-resolution algorithm."""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List

from tilemerge.components.direction import Direction
from tilemerge.components.tile import Tile, TileStatus
from tilemerge.constants import INITIAL_TILES


class GameStatus(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    CONTINUED = auto()
    LOST = auto()


class BoardFullError(RuntimeError):
    """Raised when a tile is requested on a board with no empty cell."""


@dataclass(eq=False)
class GameState:
    """Singleton component holding the live board.

    Tiles are stored flat in row-major order (``index = row * columns + col``).
    A freshly constructed state is empty; use :meth:`new_game` for a board
    with the opening spawns.
    """
    rows: int
    columns: int
    target_tile_level: int
    rng: random.Random = field(default_factory=random.Random, repr=False)
    tiles: List[Tile] = field(default_factory=list)
    score: int = 0
    status: GameStatus = GameStatus.IN_PROGRESS

    def __post_init__(self) -> None:
        for name in ("rows", "columns", "target_tile_level"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not self.tiles:
            self.tiles = [Tile(index) for index in range(self.board_size)]
        elif len(self.tiles) != self.board_size:
            raise ValueError(f"expected {self.board_size} tiles, got {len(self.tiles)}")

    @classmethod
    def new_game(
        cls,
        rows: int,
        columns: int,
        target_tile_level: int,
        rng: random.Random | None = None,
    ) -> GameState:
        state = cls(rows, columns, target_tile_level, rng=rng or random.Random())
        for _ in range(min(INITIAL_TILES, state.board_size)):
            state.spawn_tile()
        return state

    # ------------------------------------------------------------------
    # Board geometry
    # ------------------------------------------------------------------

    @property
    def board_size(self) -> int:
        return self.rows * self.columns

    def is_inside_board(self, index: int) -> bool:
        return 0 <= index < self.board_size

    def are_neighboring(self, index1: int, index2: int) -> bool:
        d_row = abs(index2 // self.columns - index1 // self.columns)
        d_col = abs(index2 % self.columns - index1 % self.columns)
        return (d_row == 1 and d_col == 0) or (d_row == 0 and d_col == 1)

    def index_change(self, direction: Direction) -> int:
        return {
            Direction.RIGHT: 1,
            Direction.UP: -self.columns,
            Direction.LEFT: -1,
            Direction.DOWN: self.columns,
        }[direction]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_full(self) -> bool:
        return all(not tile.is_empty for tile in self.tiles)

    @property
    def empty_count(self) -> int:
        return sum(1 for tile in self.tiles if tile.is_empty)

    @property
    def is_game_over(self) -> bool:
        if not self.is_full:
            return False
        for direction in Direction:
            probe = self.clone()
            probe.gravitate(direction)
            if not probe.equals(self):
                return False
        return True

    @property
    def has_achieved_goal(self) -> bool:
        return any(
            tile.level is not None and tile.level >= self.target_tile_level
            for tile in self.tiles
        )

    def clone(self) -> GameState:
        """Deep copy of tiles and history; the random source is shared."""
        return GameState(
            rows=self.rows,
            columns=self.columns,
            target_tile_level=self.target_tile_level,
            rng=self.rng,
            tiles=[tile.clone() for tile in self.tiles],
            score=self.score,
            status=self.status,
        )

    def equals(self, other: GameState) -> bool:
        if (self.score, self.rows, self.columns) != (other.score, other.rows, other.columns):
            return False
        return all(a.equals(b) for a, b in zip(self.tiles, other.tiles))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update_status(self) -> None:
        if self.is_game_over:
            self.status = GameStatus.LOST
        elif self.status == GameStatus.IN_PROGRESS and self.has_achieved_goal:
            self.status = GameStatus.WON
        elif self.status == GameStatus.WON:
            self.status = GameStatus.CONTINUED

    def spawn_tile(self) -> Tile:
        if self.is_full:
            raise BoardFullError("no empty cell left to spawn a tile")
        while True:
            tile = self.tiles[self.rng.randrange(self.board_size)]
            if tile.is_empty:
                tile.spawn(self.rng)
                return tile

    def gravitate_tile(self, index: int, index_change: int) -> None:
        next_index = index + index_change
        if not (self.is_inside_board(next_index) and self.are_neighboring(index, next_index)):
            return
        tile = self.tiles[index]
        next_tile = self.tiles[next_index]
        # Settle whatever is ahead first so this tile sees its final neighbour.
        if not next_tile.is_empty:
            self.gravitate_tile(next_index, index_change)
        if next_tile.is_empty:
            tile.move_to(next_tile)
            self.gravitate_tile(next_index, index_change)
        elif tile.able_to_merge and next_tile.able_to_merge and tile.level == next_tile.level:
            tile.merge_with(next_tile)
            self.score += next_tile.score_value

    def gravitate(self, direction: Direction) -> None:
        index_change = self.index_change(direction)
        for tile in self.tiles:
            tile.prepare_for_move()
        for index in range(self.board_size):
            self.gravitate_tile(index, index_change)

    def move(self, direction: Direction) -> bool:
        """Slide every tile towards ``direction``.

        Returns ``True`` when the board changed; in that case one tile is
        spawned and the status is re-evaluated. An ineffective move leaves
        tiles, score and status exactly as they were.
        """
        before = self.clone()
        self.gravitate(direction)
        if self.equals(before):
            self.tiles = before.tiles
            return False
        self.spawn_tile()
        self.update_status()
        return True

    def merged_tiles(self) -> List[Tile]:
        return [tile for tile in self.tiles if tile.status == TileStatus.MERGED]
