from app.schemas.volunteer import VolunteerRequest, VolunteerCreate
from app.state import State
from app.utils.datetime_utils import utc_now
import logging

logger = logging.getLogger(__name__)


class VolunteerService:
	"""Service for volunteer sign-ups."""

	def __init__(self, state: State):
		self.state = state

	def create_volunteer_request(self, payload: VolunteerCreate) -> VolunteerRequest:
		"""Store a new volunteer application with status "pending"."""
		volunteer = VolunteerRequest(
			id=self.state.next_id(),
			name=payload.name,
			email=payload.email,
			phone=payload.phone,
			skills=payload.skills or [],
			availability=payload.availability,
			location=payload.location,
			status="pending",
			date_registered=utc_now()
		)
		self.state.add_volunteer_request(volunteer)
		logger.info(f"Volunteer application {volunteer.id} received")
		return volunteer
