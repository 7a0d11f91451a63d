"""
Unit tests for IdGenerator.
"""
from app.utils.id_utils import IdGenerator


class TestIdGenerator:
	"""Test cases for IdGenerator.next_id and reserve."""

	def test_uses_clock_when_it_moves_forward(self):
		"""Test ids follow the clock while it advances."""
		ticks = iter([1000, 2000, 3000])
		generator = IdGenerator(clock=lambda: next(ticks))

		assert [generator.next_id() for _ in range(3)] == [1000, 2000, 3000]

	def test_same_millisecond_still_unique(self):
		"""Test a frozen clock still yields increasing ids."""
		generator = IdGenerator(clock=lambda: 1000)

		assert [generator.next_id() for _ in range(3)] == [1000, 1001, 1002]

	def test_clock_going_backwards(self):
		"""Test ids keep increasing if the clock steps back."""
		ticks = iter([5000, 4000])
		generator = IdGenerator(clock=lambda: next(ticks))

		first = generator.next_id()
		second = generator.next_id()
		assert second > first

	def test_reserve_pushes_next_id_past_used_id(self):
		"""Test reserve makes later ids larger than an externally assigned id."""
		generator = IdGenerator(clock=lambda: 10)
		generator.reserve(5000)

		assert generator.next_id() == 5001

	def test_reserve_ignores_smaller_ids(self):
		"""Test reserving an old id does not move the counter backwards."""
		generator = IdGenerator(clock=lambda: 10)
		generator.next_id()
		generator.reserve(3)

		assert generator.last == 10

	def test_default_clock_is_epoch_milliseconds(self):
		"""Test the default clock gives millisecond-scale ids."""
		assert IdGenerator().next_id() > 1_600_000_000_000
