from fastapi import APIRouter, Body, Depends, status
from typing import Optional
from app.dependencies import get_alert_service, get_report_service, get_volunteer_service
from app.exceptions import handle_service_exceptions
from app.schemas.envelope import Envelope
from app.schemas.alert import AlertCreate
from app.schemas.report import ReportCreate
from app.schemas.volunteer import VolunteerCreate
from app.services.alert_service import AlertService
from app.services.report_service import ReportService
from app.services.volunteer_service import VolunteerService

router = APIRouter(prefix="/api", tags=["community"])

@router.get("/alerts", response_model=Envelope, response_model_exclude_none=True)
@handle_service_exceptions
async def get_active_alerts(service: AlertService = Depends(get_alert_service)):
	"""
	Get all active emergency alerts.
	"""
	return Envelope(data=[alert.to_dict() for alert in service.list_active_alerts()])

@router.post("/alerts", response_model=Envelope, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
@handle_service_exceptions
async def create_alert(
	payload: Optional[AlertCreate] = Body(default=None),
	service: AlertService = Depends(get_alert_service)
):
	"""
	Create an emergency alert. New alerts are always active.
	A missing body is treated as an empty one.
	"""
	if payload is None:
		payload = AlertCreate()
	alert = service.create_alert(payload)
	return Envelope(data=alert.to_dict(), message="Alert created successfully")

@router.post("/reports", response_model=Envelope, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
@handle_service_exceptions
async def create_report(
	payload: Optional[ReportCreate] = Body(default=None),
	service: ReportService = Depends(get_report_service)
):
	"""
	Report an issue with a resource.
	"""
	if payload is None:
		payload = ReportCreate()
	report = service.create_report(payload)
	return Envelope(data=report.to_dict(), message="Report submitted successfully")

@router.post("/volunteer", response_model=Envelope, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
@handle_service_exceptions
async def register_volunteer(
	payload: Optional[VolunteerCreate] = Body(default=None),
	service: VolunteerService = Depends(get_volunteer_service)
):
	"""
	Submit a volunteer application.
	"""
	if payload is None:
		payload = VolunteerCreate()
	volunteer = service.create_volunteer_request(payload)
	return Envelope(data=volunteer.to_dict(), message="Volunteer application submitted successfully")
