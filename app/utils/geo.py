"""
Great-circle distance helpers.
"""
import math

# Mean Earth radius
EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
	"""
	Haversine distance between two points given in decimal degrees.

	Args:
		lat1: Latitude of the first point
		lng1: Longitude of the first point
		lat2: Latitude of the second point
		lng2: Longitude of the second point

	Returns:
		Distance in kilometres
	"""
	d_lat = math.radians(lat2 - lat1)
	d_lng = math.radians(lng2 - lng1)
	a = (
		math.sin(d_lat / 2) ** 2
		+ math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
	)
	c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
	return EARTH_RADIUS_KM * c


def is_valid_coordinate(lat: float, lng: float) -> bool:
	"""True when latitude is within [-90, 90] and longitude within [-180, 180]."""
	return -90 <= lat <= 90 and -180 <= lng <= 180
