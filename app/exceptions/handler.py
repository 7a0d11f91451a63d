import logging
from functools import wraps
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.exceptions.base import ResourceFinderException, ServiceError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"
ROUTE_NOT_FOUND_MESSAGE = "Route not found"

def handle_service_exceptions(func):
	"""
	Decorator to handle service layer exceptions uniformly.
	ResourceFinderException subclasses pass through untouched so the app-level
	handler can render them; anything else is logged with its traceback and
	replaced by a ServiceError carrying a generic message.

	Usage:
		@router.get("/")
		@handle_service_exceptions
		async def my_endpoint():
			return SomeService.do_something()
	"""
	@wraps(func)
	async def wrapper(*args, **kwargs):
		try:
			return await func(*args, **kwargs)
		except ResourceFinderException:
			raise
		except Exception:
			logger.exception(f"Unhandled error in {func.__name__}")
			raise ServiceError(GENERIC_ERROR_MESSAGE)
	return wrapper

def error_envelope(status_code: int, message: str) -> JSONResponse:
	"""Build the failure envelope used by every error response."""
	return JSONResponse(
		status_code=status_code,
		content={"success": False, "message": message}
	)

def _describe_validation_error(exc: RequestValidationError) -> str:
	errors = exc.errors()
	if not errors:
		return "Invalid request"
	first = errors[0]
	location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
	if location:
		return f"Invalid request: {location} - {first.get('msg', 'invalid value')}"
	return f"Invalid request: {first.get('msg', 'invalid value')}"

def register_exception_handlers(app: FastAPI) -> None:
	"""
	Install the handlers that turn every failure into the response envelope.
	"""

	@app.exception_handler(ResourceFinderException)
	async def resource_finder_exception_handler(request: Request, exc: ResourceFinderException):
		if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
			return error_envelope(exc.status_code, GENERIC_ERROR_MESSAGE)
		logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
		return error_envelope(exc.status_code, exc.message)

	@app.exception_handler(RequestValidationError)
	async def validation_exception_handler(request: Request, exc: RequestValidationError):
		message = _describe_validation_error(exc)
		logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
		return error_envelope(status.HTTP_400_BAD_REQUEST, message)

	@app.exception_handler(StarletteHTTPException)
	async def http_exception_handler(request: Request, exc: StarletteHTTPException):
		# Only routing and static files raise these: unknown path or unsupported method
		if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
			return error_envelope(status.HTTP_404_NOT_FOUND, ROUTE_NOT_FOUND_MESSAGE)
		return error_envelope(exc.status_code, str(exc.detail))

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(
			f"Unhandled exception on {request.method} {request.url.path}",
			exc_info=(type(exc), exc, exc.__traceback__)
		)
		return error_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)
