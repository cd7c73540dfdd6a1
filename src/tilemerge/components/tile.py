from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from tilemerge.constants import SPAWN_DRAW_RANGE, SPAWN_HIGH_LEVEL_THRESHOLD


class TileStatus(Enum):
    """What happened to a cell during the last move. Only drives animation."""
    EMPTY = auto()
    SPAWNED = auto()
    STILL = auto()
    MOVED = auto()
    MERGED = auto()


@dataclass(slots=True, eq=False)
class Tile:
    """One board cell.

    ``index`` is the row-major slot and never changes. ``level`` is the
    exponent of the displayed value (``None`` when empty). ``prev_index`` and
    ``prev_level`` list the sources that ended up in this cell during the last
    move: one entry for a slide, two for a merge, none for a fresh spawn.
    Both are ``None`` exactly when the tile is empty.
    """
    index: int
    level: Optional[int] = None
    status: TileStatus = TileStatus.EMPTY
    prev_index: Optional[List[int]] = None
    prev_level: Optional[List[int]] = None

    @property
    def is_empty(self) -> bool:
        return self.status == TileStatus.EMPTY

    @property
    def able_to_merge(self) -> bool:
        return self.status not in (TileStatus.EMPTY, TileStatus.MERGED)

    @property
    def score_value(self) -> Optional[int]:
        if self.is_empty:
            return None
        return 2 ** self.level

    def reset(self) -> None:
        self.level = None
        self.prev_index = None
        self.prev_level = None
        self.status = TileStatus.EMPTY

    def prepare_for_move(self) -> None:
        if self.is_empty:
            return
        self.prev_index = [self.index]
        self.prev_level = [self.level]
        self.status = TileStatus.STILL

    def spawn(self, rng: random.Random) -> None:
        if not self.is_empty:
            raise ValueError(f"cannot spawn on occupied tile {self.index}")
        draw = rng.randrange(SPAWN_DRAW_RANGE)
        self.level = 1 if draw < SPAWN_HIGH_LEVEL_THRESHOLD else 2
        self.prev_index = []
        self.prev_level = []
        self.status = TileStatus.SPAWNED

    def merge_with(self, other: Tile) -> None:
        """Fold this tile into ``other``; ``other`` keeps both sources in its history."""
        if self.is_empty:
            return
        other.level += 1
        other.prev_index.append(self.prev_index[0])
        other.prev_level.append(self.prev_level[0])
        other.status = TileStatus.MERGED
        self.reset()

    def move_to(self, other: Tile) -> None:
        if self.is_empty:
            return
        other.level = self.level
        other.prev_index = list(self.prev_index)
        other.prev_level = list(self.prev_level)
        other.status = TileStatus.MOVED
        self.reset()

    def equals(self, other: Tile) -> bool:
        return self.index == other.index and self.level == other.level

    def clone(self) -> Tile:
        return Tile(
            index=self.index,
            level=self.level,
            status=self.status,
            prev_index=list(self.prev_index) if self.prev_index is not None else None,
            prev_level=list(self.prev_level) if self.prev_level is not None else None,
        )
