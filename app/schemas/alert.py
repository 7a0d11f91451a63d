from typing import Optional, List
from datetime import datetime
from app.schemas.base import BaseSchema

class EmergencyAlert(BaseSchema):
	id: int
	title: Optional[str] = None
	description: Optional[str] = None
	# low, medium or high by convention, not enforced.
	severity: Optional[str] = None
	affected_areas: List[str] = []
	date_created: datetime
	is_active: bool = True

class AlertCreate(BaseSchema):
	title: Optional[str] = None
	description: Optional[str] = None
	severity: Optional[str] = None
	affected_areas: Optional[List[str]] = None
