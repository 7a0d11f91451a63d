"""
FastAPI dependencies that hand the per-application State to the services.
"""
from fastapi import Depends, Request
from app.exceptions import NotFoundError
from app.state import State
from app.services.resource_service import ResourceService
from app.services.nearby_service import NearbySearchService
from app.services.alert_service import AlertService
from app.services.report_service import ReportService
from app.services.volunteer_service import VolunteerService


def get_state(request: Request) -> State:
	"""The State created for this application by `create_app`."""
	return request.app.state.store


def get_resource_service(state: State = Depends(get_state)) -> ResourceService:
	return ResourceService(state)


def get_nearby_service(state: State = Depends(get_state)) -> NearbySearchService:
	return NearbySearchService(state)


def get_alert_service(state: State = Depends(get_state)) -> AlertService:
	return AlertService(state)


def get_report_service(state: State = Depends(get_state)) -> ReportService:
	return ReportService(state)


def get_volunteer_service(state: State = Depends(get_state)) -> VolunteerService:
	return VolunteerService(state)


def parse_resource_id(resource_id: str) -> int:
	"""
	Resource id from the path. An id that is not an integer can never match a
	stored resource, so it is reported as not found rather than as bad input.
	"""
	try:
		return int(resource_id)
	except ValueError:
		raise NotFoundError("Resource", resource_id)
