# client_admin/domain/__init__.py

"""
Main module for the application's domain components.

This module exports the domain exceptions.
"""

from client_admin.domain.exceptions import (
    DomainException,
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    PermissionDeniedException,
    DatabaseOperationException,
    InvalidInputException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "ResourceAlreadyExistsException",
    "PermissionDeniedException",
    "DatabaseOperationException",
    "InvalidInputException",
]
