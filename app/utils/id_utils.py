from typing import Callable
from app.utils.datetime_utils import to_epoch_ms


class IdGenerator:
	"""
	Hands out record ids derived from the wall clock in milliseconds.

	Two requests inside the same millisecond (or a clock that steps backwards)
	would collide on a raw timestamp, so every id is at least one greater than
	the previous one.
	"""

	def __init__(self, start: int = 0, clock: Callable[[], int] = to_epoch_ms):
		self._last = start
		self._clock = clock

	@property
	def last(self) -> int:
		return self._last

	def next_id(self) -> int:
		candidate = self._clock()
		if candidate <= self._last:
			candidate = self._last + 1
		self._last = candidate
		return candidate

	def reserve(self, used_id: int) -> None:
		"""Make sure future ids are greater than an id assigned elsewhere (seed data)."""
		if used_id > self._last:
			self._last = used_id
