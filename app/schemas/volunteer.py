from typing import Optional, List
from datetime import datetime
from app.schemas.base import BaseSchema

class VolunteerRequest(BaseSchema):
	id: int
	name: Optional[str] = None
	email: Optional[str] = None
	phone: Optional[str] = None
	skills: List[str] = []
	availability: Optional[str] = None
	location: Optional[str] = None
	status: str = "pending"
	date_registered: datetime

class VolunteerCreate(BaseSchema):
	name: Optional[str] = None
	email: Optional[str] = None
	phone: Optional[str] = None
	skills: Optional[List[str]] = None
	availability: Optional[str] = None
	location: Optional[str] = None
