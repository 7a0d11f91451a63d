from typing import Optional
from datetime import datetime
from app.schemas.base import BaseSchema

class Report(BaseSchema):
	id: int
	# Not checked against the resource store.
	resource_id: Optional[int] = None
	issue: Optional[str] = None
	description: Optional[str] = None
	reporter_contact: Optional[str] = None
	status: str = "pending"
	date_reported: datetime

class ReportCreate(BaseSchema):
	resource_id: Optional[int] = None
	issue: Optional[str] = None
	description: Optional[str] = None
	reporter_contact: Optional[str] = None
