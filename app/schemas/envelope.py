from typing import Any, Optional
from app.schemas.base import BaseSchema

class Envelope(BaseSchema):
	"""
	Uniform response wrapper: `{success, data?, message?, total?}`.
	Routes use `response_model_exclude_none=True` so unset members are omitted.
	"""
	success: bool = True
	data: Optional[Any] = None
	message: Optional[str] = None
	total: Optional[int] = None
