from typing import Any, Dict
import json
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class BaseSchema(BaseModel):
	"""
	Base schema class shared by every record and request body.

	Attributes are snake_case in Python and camelCase on the wire
	(`operating_hours` <-> `operatingHours`). Input is accepted under either name.
	"""

	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

	def to_dict(self) -> Dict[str, Any]:
		"""Convert model to a JSON-ready dictionary keyed by wire (camelCase) names."""
		return json.loads(self.model_dump_json(by_alias=True))

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "BaseSchema":
		"""Create model instance from a dictionary keyed by either name."""
		return cls.model_validate(data)
