# client_admin/adapters/outbound/security/secret_hasher.py

"""
Hashing of client secrets before storage.

The identity server compares presented secrets against the base64 encoded
digest, so only that encoding is produced here.
"""

import base64
import hashlib
from typing import Any

from client_admin.domain.constants import SHARED_SECRET
from client_admin.domain.models.enums import HashType

_ALGORITHMS = {
    HashType.SHA256: hashlib.sha256,
    HashType.SHA512: hashlib.sha512,
}


def hash_client_secret(secret_type: str, hash_type: Any, value: str) -> str:
    """
    Return the value to persist for a client secret.

    Shared secrets hashed with SHA-256 or SHA-512 are replaced by their
    digest. Any other combination is returned verbatim.

    Args:
        secret_type: Secret type tag (e.g. "SharedSecret")
        hash_type: HashType selector
        value: Raw secret value

    Returns:
        Stored form of the secret
    """
    if secret_type != SHARED_SECRET or hash_type is None:
        return value

    algorithm = _ALGORITHMS.get(HashType(hash_type))
    if algorithm is None:
        return value

    return base64.b64encode(algorithm(value.encode("utf-8")).digest()).decode("ascii")
