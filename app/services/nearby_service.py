from typing import List, Optional
from app.config import settings
from app.schemas.resource import NearbyResource
from app.state import State
from app.utils.geo import haversine_km
import logging

logger = logging.getLogger(__name__)


class NearbySearchService:
	"""Finds resources within a radius of a point, closest first."""

	def __init__(self, state: State):
		self.state = state

	def nearby(
		self,
		lat: float,
		lng: float,
		radius_km: float = settings.default_nearby_radius_km,
		type: Optional[str] = None
	) -> List[NearbyResource]:
		"""
		Get resources within `radius_km` of (lat, lng), sorted by distance.

		Distance is computed with the haversine formula for every stored resource;
		there is no spatial index. The sort is stable, so resources at the same
		distance keep their store order.

		Args:
			lat: Query latitude in degrees
			lng: Query longitude in degrees
			radius_km: Inclusive search radius in kilometres
			type: Optional exact resource type to keep

		Returns:
			List of NearbyResource, each carrying its `distance` in km
		"""
		results: List[NearbyResource] = []
		for resource in self.state.resources:
			distance = haversine_km(lat, lng, resource.lat, resource.lng)
			# A NaN distance or radius fails the comparison and is skipped
			if not distance <= radius_km:
				continue
			if type and resource.type != type:
				continue
			results.append(NearbyResource(**resource.model_dump(), distance=distance))

		results.sort(key=lambda result: result.distance)
		logger.debug(f"Nearby ({lat}, {lng}) r={radius_km}km type={type}: {len(results)} match(es)")
		return results
