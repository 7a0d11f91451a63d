"""
Unit tests for great-circle distance helpers.
"""
import math
import pytest
from app.utils.geo import haversine_km, is_valid_coordinate, EARTH_RADIUS_KM


class TestHaversineKm:
	"""Test cases for haversine_km."""

	def test_same_point_is_zero(self):
		"""Test that a point is zero km from itself."""
		assert haversine_km(19.0760, 72.8777, 19.0760, 72.8777) == 0

	def test_one_degree_of_longitude_on_equator(self):
		"""Test one degree along the equator is R * pi / 180."""
		assert haversine_km(0, 0, 0, 1) == pytest.approx(EARTH_RADIUS_KM * math.pi / 180)

	def test_antipodal_points(self):
		"""Test pole to pole is half the circumference."""
		assert haversine_km(90, 0, -90, 0) == pytest.approx(EARTH_RADIUS_KM * math.pi)

	def test_is_symmetric(self):
		"""Test distance does not depend on argument order."""
		forward = haversine_km(28.6139, 77.2090, 13.0827, 80.2707)
		backward = haversine_km(13.0827, 80.2707, 28.6139, 77.2090)
		assert forward == pytest.approx(backward)

	def test_mumbai_to_delhi(self):
		"""Test a known city pair lands in the right range."""
		distance = haversine_km(19.0760, 72.8777, 28.6139, 77.2090)
		assert 1100 < distance < 1200


class TestIsValidCoordinate:
	"""Test cases for is_valid_coordinate."""

	@pytest.mark.parametrize("lat,lng", [(0, 0), (90, 180), (-90, -180), (19.076, 72.8777)])
	def test_valid(self, lat, lng):
		assert is_valid_coordinate(lat, lng) is True

	@pytest.mark.parametrize("lat,lng", [(95, 0), (-90.5, 0), (0, 180.1), (0, -181)])
	def test_invalid(self, lat, lng):
		assert is_valid_coordinate(lat, lng) is False
