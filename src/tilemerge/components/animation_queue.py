from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from tilemerge.components.game_state import GameState


@dataclass(slots=True)
class AnimationQueue:
    """Board snapshots waiting to be played back, oldest first.

    ``progress`` is how far the head snapshot's transition has run (0..1).
    The head stays queued after it finishes so there is always something to
    draw once playback has started.
    """
    snapshots: List["GameState"] = field(default_factory=list)
    progress: float = 0.0
    last_sample_time: Optional[float] = None

    @property
    def head(self) -> Optional["GameState"]:
        return self.snapshots[0] if self.snapshots else None

    @property
    def depth(self) -> int:
        return len(self.snapshots)

    @property
    def settled(self) -> bool:
        return len(self.snapshots) == 1 and self.progress >= 1.0
