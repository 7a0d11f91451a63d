from fastapi import status

class ResourceFinderException(Exception):
	"""
	Base exception class for all Resource Finder custom exceptions.
	All service layer exceptions should inherit from this.
	"""
	def __init__(
		self,
		message: str,
		status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
	):
		self.message = message
		self.status_code = status_code
		super().__init__(self.message)

class NotFoundError(ResourceFinderException):
	"""
	Exception raised when a record is not found.
	Maps to HTTP 404.
	"""
	def __init__(self, resource_type: str, resource_id=None):
		self.resource_type = resource_type
		self.resource_id = resource_id
		super().__init__(
			message=f"{resource_type} not found",
			status_code=status.HTTP_404_NOT_FOUND
		)

class ValidationError(ResourceFinderException):
	"""
	Exception raised when validation fails.
	Maps to HTTP 400.
	"""
	def __init__(self, message: str):
		super().__init__(
			message=message,
			status_code=status.HTTP_400_BAD_REQUEST
		)

class ServiceError(ResourceFinderException):
	"""
	Exception raised when a service operation fails.
	Maps to HTTP 500 by default, but can be customized.
	"""
	def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
		super().__init__(
			message=message,
			status_code=status_code
		)
