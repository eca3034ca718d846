# client_admin/adapters/outbound/persistence/repositories/__init__.py

"""
Repository module.

This module exports the repository classes and their shared instances,
implementing the Repository pattern.
"""

from client_admin.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from client_admin.adapters.outbound.persistence.repositories.client_repository import (
    AsyncClientCRUD,
    client_repository,
)
from client_admin.adapters.outbound.persistence.repositories.resource_repository import (
    AsyncResourceCRUD,
    identity_resource_repository,
    api_resource_repository,
    api_scope_repository,
)

__all__ = [
    # Classes
    "AsyncCRUDBase",
    "AsyncClientCRUD",
    "AsyncResourceCRUD",

    # Instances
    "client_repository",
    "identity_resource_repository",
    "api_resource_repository",
    "api_scope_repository",
]
