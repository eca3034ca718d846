# client_admin/adapters/outbound/persistence/models/__init__.py

"""
Data model module.

Exports every SQLAlchemy model so that importing this package registers
all tables on ``Base.metadata``.
"""

from client_admin.adapters.outbound.persistence.models.base_model import Base

from client_admin.adapters.outbound.persistence.models.client_model import (
    Client,
    ClientGrantType,
    ClientRedirectUri,
    ClientPostLogoutRedirectUri,
    ClientScope,
    ClientIdPRestriction,
    ClientClaim,
    ClientCorsOrigin,
    ClientSecret,
    ClientOwner,
)
from client_admin.adapters.outbound.persistence.models.resource_model import (
    IdentityResource,
    ApiResource,
    ApiScope,
)

__all__ = [
    "Base",

    # Client aggregate
    "Client",
    "ClientGrantType",
    "ClientRedirectUri",
    "ClientPostLogoutRedirectUri",
    "ClientScope",
    "ClientIdPRestriction",
    "ClientClaim",
    "ClientCorsOrigin",
    "ClientSecret",
    "ClientOwner",

    # Resources
    "IdentityResource",
    "ApiResource",
    "ApiScope",
]
