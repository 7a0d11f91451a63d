import logging
from typing import Dict, List, Optional
from app.schemas.resource import Resource
from app.schemas.alert import EmergencyAlert
from app.schemas.report import Report
from app.schemas.volunteer import VolunteerRequest
from app.utils.id_utils import IdGenerator
logger = logging.getLogger(__name__)

class State:
	"""
	In-memory storage for one application instance.

	`create_app` builds one State and stores it on `app.state.store`; handlers
	receive it through `Depends(get_state)`. Nothing here is module-global, so
	every test can start from a fresh instance.

	Collections:
	- resources: dict keyed by id, insertion ordered (listing order)
	- alerts, reports, volunteer_requests: append-only lists

	All four collections share one IdGenerator. Operations are plain dict/list
	calls with no locking; handlers never await while mutating, which keeps
	each mutation atomic on the single event loop.
	"""

	def __init__(self, id_generator: Optional[IdGenerator] = None):
		self.id_generator = id_generator or IdGenerator()
		self._resources: Dict[int, Resource] = {}
		self._alerts: List[EmergencyAlert] = []
		self._reports: List[Report] = []
		self._volunteer_requests: List[VolunteerRequest] = []

	def next_id(self) -> int:
		return self.id_generator.next_id()

	@property
	def resources(self) -> List[Resource]:
		"""
		Snapshot of all resources in insertion order.
		Usage: resources = state.resources
		"""
		return list(self._resources.values())

	@property
	def resource_count(self) -> int:
		return len(self._resources)

	def get_resource(self, resource_id: int) -> Optional[Resource]:
		"""Get a resource by id."""
		return self._resources.get(resource_id)

	def add_resource(self, resource: Resource):
		"""Insert a resource. Its id must already be assigned."""
		self._resources[resource.id] = resource
		self.id_generator.reserve(resource.id)

	def update_resource(self, resource: Resource):
		"""Replace a stored resource in place, keeping its listing position."""
		self._resources[resource.id] = resource

	def remove_resource(self, resource_id: int) -> bool:
		"""Remove a resource by id. Returns False if there was nothing to remove."""
		return self._resources.pop(resource_id, None) is not None

	@property
	def active_alerts(self) -> List[EmergencyAlert]:
		"""
		Getter for active alerts, in store order.
		Usage: active_alerts = state.active_alerts
		"""
		return [alert for alert in self._alerts if alert.is_active is True]

	def add_alert(self, alert: EmergencyAlert):
		self._alerts.append(alert)
		self.id_generator.reserve(alert.id)

	@property
	def reports(self) -> List[Report]:
		return list(self._reports)

	def add_report(self, report: Report):
		self._reports.append(report)

	@property
	def volunteer_requests(self) -> List[VolunteerRequest]:
		return list(self._volunteer_requests)

	def add_volunteer_request(self, volunteer_request: VolunteerRequest):
		self._volunteer_requests.append(volunteer_request)
