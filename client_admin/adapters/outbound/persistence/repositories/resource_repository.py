# client_admin/adapters/outbound/persistence/repositories/resource_repository.py

"""
Repositories for identity resources, api resources and api scopes.
"""

from typing import Any, Callable, Dict, Optional, Sequence
from fastapi_pagination import Page, Params
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from client_admin.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase, ModelType
from client_admin.adapters.outbound.persistence.models import ApiResource, ApiScope, IdentityResource
from client_admin.application.ports.outbound import IResourceRepository


class AsyncResourceCRUD(AsyncCRUDBase[ModelType], IResourceRepository):
    """
    Repository shared by the three named resource kinds.
    """

    async def page_by_name(
            self,
            db: AsyncSession,
            params: Params,
            name: Optional[str] = None,
            transformer: Optional[Callable[[Sequence[Any]], Sequence[Any]]] = None,
    ) -> Page:
        """
        Page through the records ordered by id, optionally keeping only the
        names containing ``name`` (case-insensitive).
        """
        query = select(self.model)
        if name:
            query = query.where(self.model.name.ilike(f"%{name}%"))
        query = query.order_by(self.model.id.asc())
        return await self.paginate(db, query, params, transformer=transformer)

    async def save(self, db: AsyncSession, data: Dict[str, Any]) -> ModelType:
        """
        Create the record when ``id`` is 0, otherwise update the existing one.

        Raises:
            ResourceNotFoundException: If ``id`` refers to a missing record
            ResourceAlreadyExistsException: If the name is already taken
        """
        data = dict(data)
        record_id = data.pop("id", 0)
        if not record_id:
            return await self.create(db, obj_in=data)

        db_obj = await self.get_or_404(db, record_id)
        return await self.update(db, db_obj=db_obj, obj_in=data)


identity_resource_repository = AsyncResourceCRUD(IdentityResource)
api_resource_repository = AsyncResourceCRUD(ApiResource)
api_scope_repository = AsyncResourceCRUD(ApiScope)
