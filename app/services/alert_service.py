from typing import List
from app.schemas.alert import EmergencyAlert, AlertCreate
from app.state import State
from app.utils.datetime_utils import utc_now
import logging

logger = logging.getLogger(__name__)


class AlertService:
	"""Service for emergency alerts. Alerts are append-only."""

	def __init__(self, state: State):
		self.state = state

	def create_alert(self, payload: AlertCreate) -> EmergencyAlert:
		"""
		Create and store a new, active alert.

		Args:
			payload: Incoming alert fields

		Returns:
			Created EmergencyAlert
		"""
		alert = EmergencyAlert(
			id=self.state.next_id(),
			title=payload.title,
			description=payload.description,
			severity=payload.severity,
			affected_areas=payload.affected_areas or [],
			date_created=utc_now(),
			is_active=True
		)
		self.state.add_alert(alert)
		logger.info(f"Created alert {alert.id} ({alert.severity}): {alert.title}")
		return alert

	def list_active_alerts(self) -> List[EmergencyAlert]:
		"""Active alerts in the order they were created."""
		return self.state.active_alerts
