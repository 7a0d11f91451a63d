from typing import Optional, List
from datetime import datetime
from pydantic import Field
from app.schemas.base import BaseSchema

KNOWN_RESOURCE_TYPES = ("shelter", "food", "medical")
DEFAULT_OPERATING_HOURS = "24/7"
DEFAULT_STATUS = "active"

class Resource(BaseSchema):
	# Server-assigned identifier, never changes after creation.
	id: int
	name: str
	# One of shelter, food or medical by convention; any string is accepted.
	type: str
	contact: str
	description: str = ""
	address: str = ""
	operating_hours: str = DEFAULT_OPERATING_HOURS
	lat: float
	lng: float
	capacity: int
	facilities: List[str] = []
	status: str = DEFAULT_STATUS
	# Set once at creation.
	date_added: datetime
	# Refreshed on every successful mutation.
	last_updated: datetime

class NearbyResource(Resource):
	"""A resource annotated with its great-circle distance from a query point."""
	# Kilometres from the query point.
	distance: float

class ResourceCreate(BaseSchema):
	"""
	Body of POST /api/resources.

	Every field is optional here so that missing required fields are reported by
	the service with a single "Missing required fields" message.
	"""
	name: Optional[str] = None
	type: Optional[str] = None
	contact: Optional[str] = None
	lat: Optional[float] = Field(default=None, allow_inf_nan=False)
	lng: Optional[float] = Field(default=None, allow_inf_nan=False)
	capacity: Optional[int] = Field(default=None, ge=0)
	description: Optional[str] = None
	address: Optional[str] = None
	operating_hours: Optional[str] = None
	facilities: Optional[List[str]] = None

class ResourceUpdate(BaseSchema):
	"""
	Body of PUT /api/resources/{id}.

	Only the mutable fields are declared; anything else in the body, `id` and
	`dateAdded` included, is ignored.
	"""
	name: Optional[str] = None
	type: Optional[str] = None
	contact: Optional[str] = None
	lat: Optional[float] = Field(default=None, allow_inf_nan=False)
	lng: Optional[float] = Field(default=None, allow_inf_nan=False)
	capacity: Optional[int] = Field(default=None, ge=0)
	description: Optional[str] = None
	address: Optional[str] = None
	operating_hours: Optional[str] = None
	facilities: Optional[List[str]] = None
	status: Optional[str] = None

class ResourceStats(BaseSchema):
	shelter: int = 0
	food: int = 0
	medical: int = 0
	total_capacity: int = 0
	total_resources: int = 0
