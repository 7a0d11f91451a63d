"""
Unit tests for datetime utility functions.
"""
from datetime import datetime, timezone, timedelta
from app.utils.datetime_utils import utc_now, to_epoch_ms


class TestUtcNow:
	"""Test cases for utc_now."""

	def test_is_timezone_aware_utc(self):
		"""Test utc_now returns an aware datetime in UTC."""
		now = utc_now()
		assert now.tzinfo is not None
		assert now.utcoffset() == timedelta(0)


class TestToEpochMs:
	"""Test cases for to_epoch_ms."""

	def test_epoch_is_zero(self):
		"""Test the Unix epoch converts to 0."""
		assert to_epoch_ms(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0

	def test_naive_is_treated_as_utc(self):
		"""Test naive datetimes are interpreted as UTC."""
		aware = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
		naive = datetime(2024, 1, 15, 10, 30)
		assert to_epoch_ms(naive) == to_epoch_ms(aware)

	def test_offset_is_normalized(self):
		"""Test an offset datetime matches the same instant in UTC."""
		utc = datetime(2024, 1, 15, 16, 30, tzinfo=timezone.utc)
		central = datetime(2024, 1, 15, 10, 30, tzinfo=timezone(timedelta(hours=-6)))
		assert to_epoch_ms(central) == to_epoch_ms(utc)

	def test_defaults_to_now(self):
		"""Test calling without an argument uses the current time."""
		before = to_epoch_ms(utc_now())
		value = to_epoch_ms()
		after = to_epoch_ms(utc_now())
		assert before <= value <= after
