from fastapi import APIRouter, Body, Depends, Path, Query, status
from typing import Optional
from app.config import settings
from app.dependencies import get_resource_service, get_nearby_service, parse_resource_id
from app.exceptions import handle_service_exceptions
from app.schemas.envelope import Envelope
from app.schemas.resource import ResourceCreate, ResourceUpdate
from app.services.resource_service import ResourceService
from app.services.nearby_service import NearbySearchService

router = APIRouter(prefix="/api", tags=["resources"])

@router.get("/resources", response_model=Envelope, response_model_exclude_none=True)
@handle_service_exceptions
async def list_resources(
	type: Optional[str] = Query(default=None, description="Exact resource type, e.g. shelter"),
	search: Optional[str] = Query(default=None, description="Case-insensitive text in name, description or address"),
	limit: int = Query(default=settings.default_list_limit, ge=0, description="Maximum number of resources returned"),
	service: ResourceService = Depends(get_resource_service)
):
	"""
	List resources, optionally filtered by type and search text.
	`total` is the number of matches before `limit` is applied.
	"""
	resources, total = service.list_resources(type=type, search=search, limit=limit)
	return Envelope(data=[resource.to_dict() for resource in resources], total=total)

@router.get("/resources/nearby/{lat}/{lng}", response_model=Envelope, response_model_exclude_none=True)
@handle_service_exceptions
async def nearby_resources(
	lat: float = Path(..., allow_inf_nan=False, description="Latitude of the search point"),
	lng: float = Path(..., allow_inf_nan=False, description="Longitude of the search point"),
	radius: float = Query(default=settings.default_nearby_radius_km, allow_inf_nan=False, description="Search radius in km"),
	type: Optional[str] = Query(default=None, description="Exact resource type, e.g. medical"),
	service: NearbySearchService = Depends(get_nearby_service)
):
	"""
	Get resources within `radius` km of the given point, closest first.
	Each resource carries its `distance` in km.
	"""
	results = service.nearby(lat, lng, radius_km=radius, type=type)
	return Envelope(data=[result.to_dict() for result in results], total=len(results))

@router.get("/resources/{resource_id}", response_model=Envelope, response_model_exclude_none=True)
@handle_service_exceptions
async def get_resource(resource_id: int = Depends(parse_resource_id), service: ResourceService = Depends(get_resource_service)):
	"""
	Get a resource by ID.
	"""
	resource = service.get_resource(resource_id)
	return Envelope(data=resource.to_dict())

@router.post("/resources", response_model=Envelope, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
@handle_service_exceptions
async def create_resource(
	payload: Optional[ResourceCreate] = Body(default=None),
	service: ResourceService = Depends(get_resource_service)
):
	"""
	Add a new resource.
	name, lat, lng, type, contact and capacity are required.
	"""
	if payload is None:
		payload = ResourceCreate()
	resource = service.create_resource(payload)
	return Envelope(data=resource.to_dict(), message="Resource added successfully")

@router.put("/resources/{resource_id}", response_model=Envelope, response_model_exclude_none=True)
@handle_service_exceptions
async def update_resource(
	resource_id: int = Depends(parse_resource_id),
	payload: Optional[ResourceUpdate] = Body(default=None),
	service: ResourceService = Depends(get_resource_service)
):
	"""
	Partially update a resource. Fields left out of the body are kept.
	"""
	if payload is None:
		payload = ResourceUpdate()
	resource = service.update_resource(resource_id, payload)
	return Envelope(data=resource.to_dict(), message="Resource updated successfully")

@router.delete("/resources/{resource_id}", response_model=Envelope, response_model_exclude_none=True)
@handle_service_exceptions
async def delete_resource(resource_id: int = Depends(parse_resource_id), service: ResourceService = Depends(get_resource_service)):
	"""
	Delete a resource.
	"""
	service.delete_resource(resource_id)
	return Envelope(message="Resource deleted successfully")

@router.get("/stats", response_model=Envelope, response_model_exclude_none=True)
@handle_service_exceptions
async def get_stats(service: ResourceService = Depends(get_resource_service)):
	"""
	Get resource counts per type plus total capacity and total count.

	Example data: {"shelter": 2, "food": 2, "medical": 1, "totalCapacity": 3000, "totalResources": 5}
	"""
	return Envelope(data=service.stats().to_dict())
