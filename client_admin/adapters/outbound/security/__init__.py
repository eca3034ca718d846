# client_admin/adapters/outbound/security/__init__.py

from client_admin.adapters.outbound.security.caller_identity import CallerIdentityManager
from client_admin.adapters.outbound.security.identifier import build_client_id, generate_client_id
from client_admin.adapters.outbound.security.secret_hasher import hash_client_secret

__all__ = [
    "CallerIdentityManager",
    "build_client_id",
    "generate_client_id",
    "hash_client_secret",
]
