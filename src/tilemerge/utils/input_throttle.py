from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from time import monotonic
from typing import Callable, Deque, Optional

from tilemerge.components.direction import Direction


@dataclass(slots=True)
class MoveQueue:
	"""Pending direction requests, drained FIFO by the board system.

	``block`` drops everything queued and refuses new pushes until the
	deadline passes on ``clock``.
	"""

	clock: Callable[[], float] | None = field(default=None, repr=False)

	_clock: Callable[[], float] = field(init=False, repr=False)
	_pending: Deque[Direction] = field(init=False, repr=False)
	_block_until: float = field(init=False, default=0.0, repr=False)

	def __post_init__(self) -> None:
		self._clock = self.clock or monotonic
		self._pending = deque()

	def push(self, direction: Direction) -> bool:
		if self.blocked:
			return False
		self._pending.append(direction)
		return True

	def pop(self) -> Optional[Direction]:
		if not self._pending:
			return None
		return self._pending.popleft()

	def reset(self) -> None:
		self._pending.clear()

	def block(self, duration: float) -> None:
		self.reset()
		if duration <= 0.0:
			return
		until = self._clock() + float(duration)
		if until > self._block_until:
			self._block_until = until

	@property
	def blocked(self) -> bool:
		return bool(self._block_until) and self._clock() < self._block_until

	def __len__(self) -> int:
		return len(self._pending)
