# client_admin/domain/models/client_domain_model.py

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class ClientSecurity:
    """Security flags of a client that the classification may override."""
    require_pkce: bool
    require_client_secret: bool
    allow_offline_access: bool


@dataclass(frozen=True)
class ClientTypeDefaults:
    """
    Defaults a classification imposes on a new client.

    A flag left as ``None`` keeps the caller-supplied value.
    """
    grant_types: Tuple[str, ...] = field(default_factory=tuple)
    require_pkce: Optional[bool] = None
    require_client_secret: Optional[bool] = None
    allow_offline_access: Optional[bool] = None
