# client_admin/domain/services/client_type_policy.py

from typing import Any, Iterable, List, Tuple

from client_admin.domain.constants import GrantTypes
from client_admin.domain.exceptions import InvalidInputException
from client_admin.domain.models.client_domain_model import ClientSecurity, ClientTypeDefaults
from client_admin.domain.models.enums import ClientType

_DEFAULTS = {
    ClientType.EMPTY: ClientTypeDefaults(),
    ClientType.WEB: ClientTypeDefaults(
        grant_types=(GrantTypes.AUTHORIZATION_CODE,),
        require_pkce=True,
        require_client_secret=True,
    ),
    ClientType.SPA: ClientTypeDefaults(
        grant_types=(GrantTypes.AUTHORIZATION_CODE,),
        require_pkce=True,
        require_client_secret=False,
    ),
    ClientType.NATIVE: ClientTypeDefaults(
        grant_types=(GrantTypes.AUTHORIZATION_CODE,),
        require_pkce=True,
        require_client_secret=False,
    ),
    ClientType.MACHINE: ClientTypeDefaults(
        grant_types=(GrantTypes.CLIENT_CREDENTIALS,),
    ),
    ClientType.DEVICE: ClientTypeDefaults(
        grant_types=(GrantTypes.DEVICE_FLOW,),
        require_client_secret=False,
        allow_offline_access=True,
    ),
}


class ClientTypePolicy:
    """
    Domain service mapping a client classification to its default posture.

    Only applied when a client is created; a replace never re-applies it.
    """

    @staticmethod
    def resolve(client_type: Any) -> ClientType:
        """
        Convert a raw classification value into a ClientType.

        Raises:
            InvalidInputException: If the value is not a known classification
        """
        try:
            return ClientType(client_type)
        except (ValueError, TypeError):
            raise InvalidInputException(
                detail="Unrecognized client type",
                fields={"client_type": repr(client_type)}
            )

    @classmethod
    def defaults_for(cls, client_type: Any) -> ClientTypeDefaults:
        return _DEFAULTS[cls.resolve(client_type)]

    @classmethod
    def apply(
            cls,
            client_type: Any,
            grant_types: Iterable[str],
            security: ClientSecurity,
    ) -> Tuple[List[str], ClientSecurity]:
        """
        Merge the classification defaults into caller-supplied values.

        Args:
            client_type: Classification of the new client
            grant_types: Grant types supplied by the caller
            security: Security flags supplied by the caller

        Returns:
            Tuple of (grant types without duplicates, resulting security flags)
        """
        defaults = cls.defaults_for(client_type)

        merged: List[str] = []
        for grant_type in list(grant_types) + list(defaults.grant_types):
            if grant_type not in merged:
                merged.append(grant_type)

        result = ClientSecurity(
            require_pkce=security.require_pkce if defaults.require_pkce is None else defaults.require_pkce,
            require_client_secret=(
                security.require_client_secret
                if defaults.require_client_secret is None
                else defaults.require_client_secret
            ),
            allow_offline_access=(
                security.allow_offline_access
                if defaults.allow_offline_access is None
                else defaults.allow_offline_access
            ),
        )
        return merged, result
