from typing import List, Optional, Tuple
from app.config import settings
from app.exceptions import NotFoundError, ValidationError
from app.schemas.resource import (
	Resource,
	ResourceCreate,
	ResourceUpdate,
	ResourceStats,
	KNOWN_RESOURCE_TYPES,
	DEFAULT_OPERATING_HOURS,
	DEFAULT_STATUS,
)
from app.state import State
from app.utils.datetime_utils import utc_now
from app.utils.geo import is_valid_coordinate
import logging

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "lat", "lng", "type", "contact", "capacity")


class ResourceService:
	"""Service for relief resource CRUD operations, filtering and aggregates."""

	def __init__(self, state: State):
		self.state = state

	def list_resources(
		self,
		type: Optional[str] = None,
		search: Optional[str] = None,
		limit: int = settings.default_list_limit
	) -> Tuple[List[Resource], int]:
		"""
		List resources, optionally filtered by type and a search term.

		Filtering logic:
		- type is an exact match on the `type` field
		- search is a case-insensitive substring match on name, description or address
		- limit truncates the result; the returned total is counted before truncation

		Every call scans the whole store; there is no index.

		Args:
			type: Resource type to keep
			search: Text to look for
			limit: Maximum number of resources to return

		Returns:
			Tuple of (resources, total matching count)
		"""
		resources = self.state.resources

		if type:
			resources = [resource for resource in resources if resource.type == type]

		if search:
			needle = search.lower()
			resources = [
				resource for resource in resources
				if needle in resource.name.lower()
				or needle in resource.description.lower()
				or needle in resource.address.lower()
			]

		return resources[:limit], len(resources)

	def get_resource(self, resource_id: int) -> Resource:
		"""
		Get a resource by id.

		Raises:
			NotFoundError: If no resource has this id
		"""
		resource = self.state.get_resource(resource_id)
		if resource is None:
			raise NotFoundError("Resource", resource_id)
		return resource

	def create_resource(self, payload: ResourceCreate) -> Resource:
		"""
		Validate and store a new resource.

		Args:
			payload: Incoming fields

		Returns:
			Created Resource with id and timestamps assigned

		Raises:
			ValidationError: If a required field is missing or the coordinates are out of range
		"""
		missing = [field for field in REQUIRED_FIELDS if _is_missing(getattr(payload, field))]
		if missing:
			logger.warning(f"Rejected resource, missing fields: {', '.join(missing)}")
			raise ValidationError("Missing required fields")

		if not is_valid_coordinate(payload.lat, payload.lng):
			logger.warning(f"Rejected resource, invalid coordinates ({payload.lat}, {payload.lng})")
			raise ValidationError("Invalid coordinates")

		now = utc_now()
		resource = Resource(
			id=self.state.next_id(),
			name=payload.name,
			type=payload.type,
			contact=payload.contact,
			lat=payload.lat,
			lng=payload.lng,
			capacity=payload.capacity,
			description=payload.description or "",
			address=payload.address or "",
			operating_hours=payload.operating_hours or DEFAULT_OPERATING_HOURS,
			facilities=payload.facilities or [],
			status=DEFAULT_STATUS,
			date_added=now,
			last_updated=now
		)
		self.state.add_resource(resource)
		logger.info(f"Created resource {resource.id} ({resource.type}): {resource.name}")
		return resource

	def update_resource(self, resource_id: int, payload: ResourceUpdate) -> Resource:
		"""
		Merge the supplied fields onto an existing resource.

		Only fields present in the request body are applied. `id` and `date_added`
		are not part of ResourceUpdate and so can never be overwritten. Coordinates
		and required fields are not revalidated.

		Raises:
			NotFoundError: If no resource has this id
		"""
		existing = self.get_resource(resource_id)
		changes = payload.model_dump(exclude_unset=True, exclude_none=True)

		# Never let the clock step lastUpdated backwards
		now = max(utc_now(), existing.last_updated)
		updated = existing.model_copy(update={**changes, "last_updated": now})

		self.state.update_resource(updated)
		logger.info(f"Updated resource {resource_id}, fields: {', '.join(sorted(changes)) or 'none'}")
		return updated

	def delete_resource(self, resource_id: int) -> None:
		"""
		Remove a resource.

		Raises:
			NotFoundError: If no resource has this id
		"""
		if not self.state.remove_resource(resource_id):
			raise NotFoundError("Resource", resource_id)
		logger.info(f"Deleted resource {resource_id}")

	def stats(self) -> ResourceStats:
		"""
		Count resources per known type and total their capacity.

		Types outside shelter, food and medical contribute to the totals only.
		"""
		stats = ResourceStats()
		for resource in self.state.resources:
			if resource.type in KNOWN_RESOURCE_TYPES:
				setattr(stats, resource.type, getattr(stats, resource.type) + 1)
			stats.total_capacity += resource.capacity
			stats.total_resources += 1
		return stats


def _is_missing(value) -> bool:
	if value is None:
		return True
	if isinstance(value, str) and not value.strip():
		return True
	return False
