# client_admin/domain/exceptions.py

"""
Domain exceptions.

Every exception carries an ``internal_code`` which the exception middleware
maps to an HTTP status code. The domain never depends on the web framework.
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for every error raised by the client administration domain.
    """

    def __init__(self, detail: Any = None, internal_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.internal_code = internal_code

    def __str__(self) -> str:
        return str(self.detail)


class ResourceNotFoundException(DomainException):
    """Resource not found."""

    def __init__(self, detail: str = "Resource not found", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(
            detail=f"{detail}{resource_info}",
            internal_code="RESOURCE_NOT_FOUND"
        )
        self.resource_id = resource_id


class ResourceAlreadyExistsException(DomainException):
    """Resource already exists."""

    def __init__(self, detail: str = "Resource already exists", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(
            detail=f"{detail}{resource_info}",
            internal_code="RESOURCE_ALREADY_EXISTS"
        )
        self.resource_id = resource_id


class PermissionDeniedException(DomainException):
    """Permission denied."""

    def __init__(self, detail: str = "Permission denied", permission: Optional[str] = None):
        permission_info = f" (Required permission: {permission})" if permission else ""
        super().__init__(
            detail=f"{detail}{permission_info}",
            internal_code="PERMISSION_DENIED"
        )


class DatabaseOperationException(DomainException):
    """Error executing a database operation."""

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(
            detail=f"{detail}{error_info}",
            internal_code="DATABASE_OPERATION_ERROR"
        )
        self.original_error = original_error


class InvalidInputException(DomainException):
    """Invalid input data."""

    def __init__(self, detail: str = "Invalid input data", fields: Optional[Dict[str, str]] = None):
        field_errors = ""
        if fields:
            field_errors = ": " + ", ".join([f"{field}: {error}" for field, error in fields.items()])

        super().__init__(
            detail=f"{detail}{field_errors}",
            internal_code="INVALID_INPUT"
        )
        self.details = fields or {}
