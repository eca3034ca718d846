# client_admin/application/use_cases/__init__.py

"""
Application service module.

This package contains the application services that implement the business
logic, organized according to functional domains.
"""

from client_admin.application.use_cases.client_use_cases import AsyncClientService
from client_admin.application.use_cases.configuration_use_cases import AsyncConfigurationService

__all__ = [
    "AsyncClientService",
    "AsyncConfigurationService",
]
