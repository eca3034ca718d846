# client_admin/application/use_cases/client_use_cases.py

"""
Service for client configuration management.

This module implements the use cases for OAuth2/OIDC client registrations:
ownership-scoped listing, create and full replace of the client aggregate,
deletion, and secret management. Every mutation runs as one atomic unit.
"""

import logging
from typing import Any, Callable, Dict, List, Optional
from fastapi_pagination import Page
from sqlalchemy.ext.asyncio import AsyncSession

from client_admin.adapters.configuration.config import settings
from client_admin.adapters.outbound.persistence.database import atomic
from client_admin.adapters.outbound.persistence.models import ClientSecret
from client_admin.adapters.outbound.persistence.repositories.client_repository import (
    RELATION_SETS,
    AsyncClientCRUD,
    client_repository,
)
from client_admin.adapters.outbound.security.identifier import generate_client_id
from client_admin.adapters.outbound.security.secret_hasher import hash_client_secret
from client_admin.application.dtos.client_dto import (
    CLIENT_SCALAR_FIELDS,
    ClientInput,
    ClientOutput,
    ClientSecretInput,
    ClientSecretOutput,
    ClientSummary,
)
from client_admin.application.ports.inbound import IClientUseCase
from client_admin.domain.exceptions import (
    PermissionDeniedException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from client_admin.domain.models.client_domain_model import ClientSecurity
from client_admin.domain.services.client_type_policy import ClientTypePolicy
from client_admin.shared.utils.pagination import resolve_page_params

logger = logging.getLogger(__name__)


class AsyncClientService(IClientUseCase):
    """
    Service for client configuration management.

    The acting administrator's user id is always passed in explicitly by
    the caller; the service never looks at the request.
    """

    def __init__(
            self,
            db_session: AsyncSession,
            repository: AsyncClientCRUD = client_repository,
            id_generator: Callable[[], str] = generate_client_id,
    ):
        self.db = db_session
        self.repository = repository
        self.id_generator = id_generator

    async def query_client_page(
            self,
            owner_id: int,
            page: Optional[int] = None,
            size: Optional[int] = None,
    ) -> Page[ClientSummary]:
        """
        Paginated list of the clients owned by ``owner_id``, oldest first.

        Raises:
            InvalidInputException: If the pagination is rejected
        """
        params = resolve_page_params(page, size)
        return await self.repository.page_by_owner(self.db, owner_id, params)

    async def get_client(self, id: int) -> ClientOutput:
        """
        Full client aggregate. Reading is not restricted to the owner.

        Raises:
            ResourceNotFoundException: If the client doesn't exist
        """
        client = await self.repository.get_with_relations(self.db, id)
        if not client:
            logger.warning(f"Client not found: ID {id}")
            raise ResourceNotFoundException(detail="Client not found", resource_id=id)
        return self.repository.to_output(client)

    async def save_client(self, data: ClientInput, owner_id: int) -> ClientOutput:
        """
        Create a client (``data.id == 0``) or fully replace an existing one.

        On create the client type defaults are applied, the external
        identifier is generated and the ownership record is written. On
        replace only the scalars present in the payload are written and the
        seven relation sets are rebuilt from the payload. Either way the
        writes form a single atomic unit.

        Raises:
            InvalidInputException: If the client type is not recognised
            ResourceNotFoundException: If the client to replace doesn't exist
            PermissionDeniedException: If ``owner_id`` doesn't own the client to replace
            ResourceAlreadyExistsException: If no free client identifier could be generated
            DatabaseOperationException: If the persistence layer fails
        """
        if data.id == 0:
            client_pk = await self._create_client(data, owner_id)
        else:
            client_pk = await self._replace_client(data, owner_id)
        return await self.get_client(client_pk)

    async def remove_client(self, id: int, owner_id: int) -> None:
        """
        Delete a client, its relation sets, secrets and ownership record.

        Raises:
            ResourceNotFoundException: If the client doesn't exist
            PermissionDeniedException: If ``owner_id`` is not the recorded owner
        """
        async with atomic(self.db):
            client = await self.repository.get_for_update(self.db, id)
            if not client:
                logger.warning(f"Attempt to delete missing client: ID {id}")
                raise ResourceNotFoundException(detail="Client not found", resource_id=id)

            await self._ensure_owner(id, owner_id, action="delete")
            await self.repository.remove_with_owner(self.db, client)

        logger.info(f"Client {id} deleted by user {owner_id}")

    async def add_secret(self, data: ClientSecretInput) -> ClientSecretOutput:
        """
        Hash (when applicable) and attach a secret to a client.

        Raises:
            ResourceNotFoundException: If the client doesn't exist
        """
        value = hash_client_secret(data.type, data.hash_type, data.value)

        async with atomic(self.db):
            client = await self.repository.get(self.db, data.client_id)
            if not client:
                logger.warning(f"Attempt to add a secret to missing client: ID {data.client_id}")
                raise ResourceNotFoundException(detail="Client not found", resource_id=data.client_id)

            secret = await self.repository.add_secret(self.db, ClientSecret(
                client_id=client.id,
                value=value,
                type=data.type,
                hash_type=int(data.hash_type),
                description=data.description,
                expiration=data.expiration,
            ))

        return ClientSecretOutput.model_validate(secret)

    async def remove_secret(self, id: int) -> None:
        """
        Delete a client secret. Deleting a missing secret is a no-op.
        """
        async with atomic(self.db):
            secret = await self.repository.get_secret(self.db, id)
            if secret is None:
                logger.info(f"Client secret {id} not found, nothing to delete")
                return
            await self.repository.remove_secret(self.db, secret)

    async def list_scopes(self) -> List[str]:
        """
        Identity resource names followed by api scope names, without duplicates.
        """
        return await self.repository.list_scope_names(self.db)

    async def _create_client(self, data: ClientInput, owner_id: int) -> int:
        scalars = data.model_dump(include=set(CLIENT_SCALAR_FIELDS))
        relations = self._relations_from(data)

        grant_types, security = ClientTypePolicy.apply(
            data.client_type,
            relations["allowed_grant_types"],
            ClientSecurity(
                require_pkce=data.require_pkce,
                require_client_secret=data.require_client_secret,
                allow_offline_access=data.allow_offline_access,
            ),
        )
        relations["allowed_grant_types"] = grant_types
        scalars.update(
            require_pkce=security.require_pkce,
            require_client_secret=security.require_client_secret,
            allow_offline_access=security.allow_offline_access,
        )

        async with atomic(self.db):
            client_id = await self._generate_unique_client_id()
            client = await self.repository.add_with_owner(
                self.db,
                scalars=scalars,
                client_id=client_id,
                relations=relations,
                owner_id=owner_id,
            )

        logger.info(f"Client {client.id} ({client_id}) created for user {owner_id}")
        return client.id

    async def _replace_client(self, data: ClientInput, owner_id: int) -> int:
        supplied = data.model_fields_set & set(CLIENT_SCALAR_FIELDS)
        scalars = data.model_dump(include=supplied)
        if "client_type" in scalars:
            scalars["client_type"] = int(ClientTypePolicy.resolve(scalars["client_type"]))
        relations = self._relations_from(data)

        async with atomic(self.db):
            client = await self.repository.get_for_update(self.db, data.id)
            if not client:
                logger.warning(f"Attempt to replace missing client: ID {data.id}")
                raise ResourceNotFoundException(detail="Client not found", resource_id=data.id)

            await self._ensure_owner(data.id, owner_id, action="replace")

            await self.repository.replace(self.db, client=client, scalars=scalars, relations=relations)

        logger.info(f"Client {data.id} replaced by user {owner_id}")
        return data.id

    async def _ensure_owner(self, client_pk: int, owner_id: int, action: str) -> None:
        owner = await self.repository.get_owner(self.db, client_pk)
        if owner is None or owner.user_id != owner_id:
            logger.warning(f"User {owner_id} attempted to {action} client {client_pk} they don't own")
            raise PermissionDeniedException(detail=f"Only the owner of a client can {action} it")

    async def _generate_unique_client_id(self) -> str:
        for attempt in range(1, settings.CLIENT_ID_MAX_ATTEMPTS + 1):
            client_id = self.id_generator()
            if not await self.repository.exists(self.db, client_id=client_id):
                return client_id
            logger.warning(f"Generated client identifier collided (attempt {attempt})")

        raise ResourceAlreadyExistsException(detail="Could not generate a unique client identifier")

    @staticmethod
    def _relations_from(data: ClientInput) -> Dict[str, List[Any]]:
        relations = {}
        for name in RELATION_SETS:
            values = getattr(data, name)
            if name == "claims":
                unique = {(claim.type, claim.value): claim for claim in values}
                relations[name] = list(unique.values())
            else:
                relations[name] = list(dict.fromkeys(values))
        return relations
