# client_admin/application/use_cases/configuration_use_cases.py

"""
Service for configuration lookups and resource management.

Serves the static lookup tables used to populate selection choices and
manages identity resources, api resources and api scopes.
"""

import logging
from typing import Dict, List, Optional, Type
from fastapi_pagination import Page
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from client_admin.adapters.outbound.persistence.database import atomic
from client_admin.adapters.outbound.persistence.repositories.resource_repository import (
    AsyncResourceCRUD,
    api_resource_repository,
    api_scope_repository,
    identity_resource_repository,
)
from client_admin.application.dtos.resource_dto import (
    ApiResourceInput,
    ApiResourceOutput,
    ApiScopeInput,
    ApiScopeOutput,
    IdentityResourceInput,
    IdentityResourceOutput,
)
from client_admin.application.ports.inbound import IConfigurationUseCase
from client_admin.domain.constants import STANDARD_CLAIMS, GrantTypes
from client_admin.domain.models.enums import (
    AccessTokenType,
    ClientType,
    HashType,
    TokenExpiration,
    TokenUsage,
    enum_items,
)
from client_admin.shared.utils.pagination import resolve_page_params

logger = logging.getLogger(__name__)

ENUMS = {
    "tokenUsage": enum_items(TokenUsage),
    "accessTokenType": enum_items(AccessTokenType),
    "clientType": enum_items(ClientType),
    "tokenExpiration": enum_items(TokenExpiration),
    "hashType": enum_items(HashType),
}


class AsyncConfigurationService(IConfigurationUseCase):
    """
    Service for lookup tables, identity resources, api resources and api scopes.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    def get_enums(self) -> Dict[str, List[Dict[str, object]]]:
        return {name: list(items) for name, items in ENUMS.items()}

    def get_standard_claims(self) -> List[str]:
        return list(STANDARD_CLAIMS)

    def get_grant_types(self) -> List[str]:
        return list(GrantTypes.ALL)

    # Identity resources

    async def query_identity_resource_page(
            self, name: Optional[str] = None, page: Optional[int] = None, size: Optional[int] = None
    ) -> Page[IdentityResourceOutput]:
        return await self._page(identity_resource_repository, IdentityResourceOutput, name, page, size)

    async def get_identity_resource(self, id: int) -> IdentityResourceOutput:
        return await self._get(identity_resource_repository, IdentityResourceOutput, id)

    async def save_identity_resource(self, data: IdentityResourceInput) -> IdentityResourceOutput:
        return await self._save(identity_resource_repository, IdentityResourceOutput, data)

    # Api resources

    async def query_api_resource_page(
            self, name: Optional[str] = None, page: Optional[int] = None, size: Optional[int] = None
    ) -> Page[ApiResourceOutput]:
        return await self._page(api_resource_repository, ApiResourceOutput, name, page, size)

    async def get_api_resource(self, id: int) -> ApiResourceOutput:
        return await self._get(api_resource_repository, ApiResourceOutput, id)

    async def save_api_resource(self, data: ApiResourceInput) -> ApiResourceOutput:
        return await self._save(api_resource_repository, ApiResourceOutput, data)

    # Api scopes

    async def query_api_scope_page(
            self, name: Optional[str] = None, page: Optional[int] = None, size: Optional[int] = None
    ) -> Page[ApiScopeOutput]:
        return await self._page(api_scope_repository, ApiScopeOutput, name, page, size)

    async def get_api_scope(self, id: int) -> ApiScopeOutput:
        return await self._get(api_scope_repository, ApiScopeOutput, id)

    async def save_api_scope(self, data: ApiScopeInput) -> ApiScopeOutput:
        return await self._save(api_scope_repository, ApiScopeOutput, data)

    async def _page(
            self,
            repository: AsyncResourceCRUD,
            output: Type[BaseModel],
            name: Optional[str],
            page: Optional[int],
            size: Optional[int],
    ) -> Page:
        params = resolve_page_params(page, size)
        return await repository.page_by_name(
            self.db,
            params,
            name=name,
            transformer=lambda items: [output.model_validate(item) for item in items],
        )

    async def _get(self, repository: AsyncResourceCRUD, output: Type[BaseModel], id: int):
        record = await repository.get_or_404(self.db, id)
        return output.model_validate(record)

    async def _save(self, repository: AsyncResourceCRUD, output: Type[BaseModel], data: BaseModel):
        """
        Create or update a record as one unit.

        Raises:
            ResourceNotFoundException: If the record to update doesn't exist
            ResourceAlreadyExistsException: If the name is already taken
        """
        async with atomic(self.db):
            record = await repository.save(self.db, data.model_dump())

        logger.info(f"{repository.model.__name__} '{record.name}' saved with ID {record.id}")
        return output.model_validate(record)
