from app.schemas.resource import Resource, NearbyResource, ResourceCreate, ResourceUpdate, ResourceStats
from app.schemas.alert import EmergencyAlert, AlertCreate
from app.schemas.report import Report, ReportCreate
from app.schemas.volunteer import VolunteerRequest, VolunteerCreate
from app.schemas.envelope import Envelope

__all__ = [
	"Resource",
	"NearbyResource",
	"ResourceCreate",
	"ResourceUpdate",
	"ResourceStats",
	"EmergencyAlert",
	"AlertCreate",
	"Report",
	"ReportCreate",
	"VolunteerRequest",
	"VolunteerCreate",
	"Envelope"
]
