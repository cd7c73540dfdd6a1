from __future__ import annotations

import random
from typing import Iterable, Optional, Sequence

from tilemerge.components.game_state import GameState
from tilemerge.components.tile import TileStatus
from tilemerge.constants import TARGET_TILE_LEVEL


class FakeClock:
    def __init__(self, start: float = 0.0) -> None:
        self.value = start

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


class ScriptedRandom(random.Random):
    """Random source whose ``randrange`` replays a fixed script."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(0)
        self._values = list(values)

    def randrange(self, *args, **kwargs):
        if not self._values:
            raise AssertionError("scripted random values exhausted")
        return self._values.pop(0)


def board_from_levels(
    grid: Sequence[Sequence[Optional[int]]],
    *,
    target_tile_level: int = TARGET_TILE_LEVEL,
    rng: random.Random | None = None,
) -> GameState:
    """Build a board from rows of levels, ``None`` marking empty cells.

    Occupied cells look like tiles that stood still on the previous move.
    """
    rows = len(grid)
    columns = len(grid[0])
    state = GameState(rows, columns, target_tile_level, rng=rng or random.Random(1234))
    for r, row in enumerate(grid):
        assert len(row) == columns, "ragged grid"
        for c, level in enumerate(row):
            if level is None:
                continue
            tile = state.tiles[r * columns + c]
            tile.level = level
            tile.status = TileStatus.STILL
            tile.prev_index = [tile.index]
            tile.prev_level = [level]
    return state


def levels(state: GameState) -> list[list[Optional[int]]]:
    return [
        [state.tiles[r * state.columns + c].level for c in range(state.columns)]
        for r in range(state.rows)
    ]


def occupied(state: GameState) -> dict[int, int]:
    return {tile.index: tile.level for tile in state.tiles if not tile.is_empty}
