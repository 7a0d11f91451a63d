"""
Datetime utility functions.
"""
from typing import Optional
from datetime import datetime, timezone


def utc_now() -> datetime:
	"""Current time as a timezone-aware UTC datetime."""
	return datetime.now(timezone.utc)


def to_epoch_ms(dt: Optional[datetime] = None) -> int:
	"""
	Convert a datetime to milliseconds since the Unix epoch.

	Args:
		dt: datetime to convert; naive values are assumed to be UTC. Defaults to now.

	Returns:
		Integer milliseconds since 1970-01-01T00:00:00Z
	"""
	if dt is None:
		dt = utc_now()
	elif dt.tzinfo is None:
		dt = dt.replace(tzinfo=timezone.utc)
	return int(dt.timestamp() * 1000)
