from app.exceptions.base import ResourceFinderException, NotFoundError, ValidationError, ServiceError
from app.exceptions.handler import handle_service_exceptions, register_exception_handlers, GENERIC_ERROR_MESSAGE, ROUTE_NOT_FOUND_MESSAGE

__all__ = [
	"ResourceFinderException",
	"NotFoundError",
	"ValidationError",
	"ServiceError",
	"handle_service_exceptions",
	"register_exception_handlers",
	"GENERIC_ERROR_MESSAGE",
	"ROUTE_NOT_FOUND_MESSAGE"
]
