from typing import Dict, List, Optional


class ApiError(Exception):
    """Base class for errors that map directly to an HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    @property
    def name(self) -> str:
        return type(self).__name__


class BadRequestError(ApiError):
    status_code = 400


class UnauthorizedError(ApiError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(ApiError):
    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class NotFoundError(ApiError):
    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class ServerError(ApiError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


class ExternalServiceError(ApiError):
    status_code = 502

    def __init__(self, service_name: str, message: str):
        super().__init__(f"{service_name} service error: {message}")
        self.service_name = service_name


class ValidationError(BadRequestError):
    """Rejected request payload, carrying every field error found."""

    def __init__(self, errors: List[Dict[str, str]], message: str = "Request validation failed"):
        super().__init__(message)
        self.errors = errors
