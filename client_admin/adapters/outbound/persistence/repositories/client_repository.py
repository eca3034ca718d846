# client_admin/adapters/outbound/persistence/repositories/client_repository.py

"""
Repository for the client aggregate.

This module implements the persistence of clients, their seven relation
sets, their secrets and their ownership record. Methods never commit: the
client use cases wrap them in an atomic unit.
"""

from typing import Any, Dict, Iterable, List, Optional
from fastapi_pagination import Page, Params
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from client_admin.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from client_admin.adapters.outbound.persistence.models import (
    ApiScope,
    Client,
    ClientClaim,
    ClientCorsOrigin,
    ClientGrantType,
    ClientIdPRestriction,
    ClientOwner,
    ClientPostLogoutRedirectUri,
    ClientRedirectUri,
    ClientScope,
    ClientSecret,
    IdentityResource,
)
from client_admin.application.dtos.client_dto import (
    CLIENT_SCALAR_FIELDS,
    ClientClaimDto,
    ClientOutput,
    ClientSecretOutput,
    ClientSummary,
)
from client_admin.application.ports.outbound import IClientRepository
from client_admin.domain.exceptions import DatabaseOperationException

# Relation set name -> (child model, value column)
RELATION_SETS = {
    "allowed_grant_types": (ClientGrantType, "grant_type"),
    "redirect_uris": (ClientRedirectUri, "redirect_uri"),
    "post_logout_redirect_uris": (ClientPostLogoutRedirectUri, "post_logout_redirect_uri"),
    "allowed_scopes": (ClientScope, "scope"),
    "identity_provider_restrictions": (ClientIdPRestriction, "provider"),
    "claims": (ClientClaim, None),
    "allowed_cors_origins": (ClientCorsOrigin, "origin"),
}


class AsyncClientCRUD(AsyncCRUDBase[Client], IClientRepository):
    """
    Async repository for the Client aggregate.

    Extends AsyncCRUDBase with ownership-scoped listing, relation set
    teardown/rebuild and secret management.
    """

    async def get_with_relations(self, db: AsyncSession, id: int) -> Optional[Client]:
        """
        Load a client with all seven relation sets and its secrets.

        Args:
            db: Async database session
            id: Internal client id

        Returns:
            Client found or None if it doesn't exist
        """
        try:
            query = (
                select(Client)
                .where(Client.id == id)
                .options(*[selectinload(getattr(Client, name)) for name in RELATION_SETS])
                .options(selectinload(Client.client_secrets))
                .execution_options(populate_existing=True)
            )
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching client {id} with relations: {str(e)}")
            raise DatabaseOperationException(
                detail="Error fetching client",
                original_error=e
            )

    async def get_for_update(self, db: AsyncSession, id: int) -> Optional[Client]:
        """
        Fetch a client and lock its row until the current transaction ends.

        Concurrent replace/delete calls on the same client serialise on this
        lock; other clients are unaffected.
        """
        try:
            query = (
                select(Client)
                .where(Client.id == id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error locking client {id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error fetching client",
                original_error=e
            )

    async def page_by_owner(self, db: AsyncSession, owner_id: int, params: Params) -> Page[ClientSummary]:
        """
        Page through the clients owned by a user, oldest first.
        """
        query = (
            select(Client)
            .join(ClientOwner, ClientOwner.client_id == Client.id)
            .where(ClientOwner.user_id == owner_id)
            .order_by(Client.created.asc(), Client.id.asc())
        )
        return await self.paginate(
            db,
            query,
            params,
            transformer=lambda items: [ClientSummary.model_validate(item) for item in items],
        )

    async def add_with_owner(
            self,
            db: AsyncSession,
            *,
            scalars: Dict[str, Any],
            client_id: str,
            relations: Dict[str, Iterable[Any]],
            owner_id: int,
    ) -> Client:
        """
        Insert a client, its relation sets and its ownership record.

        Args:
            db: Async database session
            scalars: Scalar column values
            client_id: Generated external identifier
            relations: Relation set values keyed by relation set name
            owner_id: User id of the owning administrator

        Returns:
            The new client with its id assigned
        """
        client = Client(client_id=client_id, **scalars)
        for name, values in relations.items():
            getattr(client, name).extend(self._build_children(name, None, values))

        db.add(client)
        await self._flush(db, action="creating")

        db.add(ClientOwner(client_id=client.id, user_id=owner_id))
        await self._flush(db, action="creating")

        self.logger.info(f"Client created: {client.id} (client_id: {client_id}, owner: {owner_id})")
        return client

    async def clear_relations(self, db: AsyncSession, client: Client) -> None:
        """
        Delete every row of the seven relation sets of a client.
        """
        try:
            for model, _ in RELATION_SETS.values():
                await db.execute(
                    delete(model)
                    .where(model.client_id == client.id)
                    .execution_options(synchronize_session=False)
                )
        except SQLAlchemyError as e:
            self.logger.error(f"Error clearing relation sets of client {client.id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error clearing client relation sets",
                original_error=e
            )

        db.expire(client, list(RELATION_SETS))

    async def add_relations(self, db: AsyncSession, client: Client, relations: Dict[str, Iterable[Any]]) -> None:
        """
        Insert the supplied relation set values for a client.
        """
        for name, values in relations.items():
            db.add_all(self._build_children(name, client.id, values))
        await self._flush(db, action="updating")

    async def replace(
            self,
            db: AsyncSession,
            *,
            client: Client,
            scalars: Dict[str, Any],
            relations: Dict[str, Iterable[Any]],
    ) -> Client:
        """
        Replace a client's scalars and relation sets.

        Relation sets are torn down and rebuilt so that afterwards they hold
        exactly the supplied values.
        """
        await self.clear_relations(db, client)
        await self.update(db, db_obj=client, obj_in=scalars)
        await self.add_relations(db, client, relations)
        return client

    async def get_owner(self, db: AsyncSession, client_id: int) -> Optional[ClientOwner]:
        try:
            result = await db.execute(select(ClientOwner).where(ClientOwner.client_id == client_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching owner of client {client_id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error fetching client owner",
                original_error=e
            )

    async def remove_with_owner(self, db: AsyncSession, client: Client) -> None:
        """
        Delete a client together with its relation sets, secrets and owner.
        """
        client_pk = client.id
        try:
            for model, _ in RELATION_SETS.values():
                await db.execute(
                    delete(model)
                    .where(model.client_id == client_pk)
                    .execution_options(synchronize_session=False)
                )
            await db.execute(
                delete(ClientSecret)
                .where(ClientSecret.client_id == client_pk)
                .execution_options(synchronize_session=False)
            )
            await db.execute(
                delete(ClientOwner)
                .where(ClientOwner.client_id == client_pk)
                .execution_options(synchronize_session=False)
            )
            await db.execute(
                delete(Client)
                .where(Client.id == client_pk)
                .execution_options(synchronize_session=False)
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error removing client {client_pk}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error removing client",
                original_error=e
            )

        db.expunge(client)
        self.logger.info(f"Client with ID {client_pk} removed")

    async def get_secret(self, db: AsyncSession, id: int) -> Optional[ClientSecret]:
        try:
            result = await db.execute(select(ClientSecret).where(ClientSecret.id == id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching client secret {id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error fetching client secret",
                original_error=e
            )

    async def add_secret(self, db: AsyncSession, secret: ClientSecret) -> ClientSecret:
        db.add(secret)
        await self._flush(db, action="creating")
        self.logger.info(f"Secret {secret.id} added to client {secret.client_id}")
        return secret

    async def remove_secret(self, db: AsyncSession, secret: ClientSecret) -> None:
        await db.delete(secret)
        await self._flush(db, action="removing")
        self.logger.info(f"Secret {secret.id} removed from client {secret.client_id}")

    async def list_scope_names(self, db: AsyncSession) -> List[str]:
        """
        Names of every identity resource followed by every api scope,
        without duplicates.
        """
        try:
            identity_names = (await db.execute(
                select(IdentityResource.name).order_by(IdentityResource.id)
            )).scalars().all()
            scope_names = (await db.execute(
                select(ApiScope.name).order_by(ApiScope.id)
            )).scalars().all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing scope names: {str(e)}")
            raise DatabaseOperationException(
                detail="Error listing scopes",
                original_error=e
            )

        return list(dict.fromkeys([*identity_names, *scope_names]))

    def to_output(self, db_model: Client) -> ClientOutput:
        """
        Convert a fully loaded client into its output schema.
        """
        data = {name: getattr(db_model, name) for name in CLIENT_SCALAR_FIELDS}
        for name, (_, column) in RELATION_SETS.items():
            children = getattr(db_model, name)
            if column is None:
                data[name] = [ClientClaimDto.model_validate(child) for child in children]
            else:
                data[name] = [getattr(child, column) for child in children]

        return ClientOutput(
            id=db_model.id,
            client_id=db_model.client_id,
            created=db_model.created,
            updated=db_model.updated,
            client_secrets=[ClientSecretOutput.model_validate(s) for s in db_model.client_secrets],
            **data,
        )

    @staticmethod
    def _build_children(name: str, client_pk: Optional[int], values: Iterable[Any]) -> list:
        model, column = RELATION_SETS[name]
        children = []
        for value in values:
            if column is None:
                child = model(type=value.type, value=value.value)
            else:
                child = model(**{column: value})
            if client_pk is not None:
                child.client_id = client_pk
            children.append(child)
        return children


# Public instance to be used by use cases
client_repository = AsyncClientCRUD(Client)
