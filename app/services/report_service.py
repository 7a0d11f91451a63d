from app.schemas.report import Report, ReportCreate
from app.state import State
from app.utils.datetime_utils import utc_now
import logging

logger = logging.getLogger(__name__)


class ReportService:
	"""Service for issue reports filed against resources."""

	def __init__(self, state: State):
		self.state = state

	def create_report(self, payload: ReportCreate) -> Report:
		"""
		Store a new report with status "pending".

		The referenced resource id is recorded as given; it is not checked
		against the resource store.
		"""
		report = Report(
			id=self.state.next_id(),
			resource_id=payload.resource_id,
			issue=payload.issue,
			description=payload.description,
			reporter_contact=payload.reporter_contact,
			status="pending",
			date_reported=utc_now()
		)
		self.state.add_report(report)
		logger.info(f"Report {report.id} submitted for resource {report.resource_id}")
		return report
