# client_admin/adapters/outbound/persistence/repositories/base_repository.py

from typing import Any, Callable, Dict, Generic, Optional, Sequence, Type, TypeVar
from fastapi_pagination import Page, Params
from fastapi_pagination.ext.sqlalchemy import apaginate
from sqlalchemy import Select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.future import select
import logging

from client_admin.adapters.outbound.persistence.models.base_model import Base
from client_admin.domain.exceptions import (
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    DatabaseOperationException
)

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)

# Configure logger
logger = logging.getLogger(__name__)


class AsyncCRUDBase(Generic[ModelType]):
    """
    Async base class for implementing the Repository pattern.

    Provides generic CRUD operations that can be used by any entity.
    Writes are flushed, never committed: the calling use case owns the
    transaction and decides when the unit of work is complete.

    Attributes:
        model: SQLAlchemy model class
        logger: Configured logger for the class
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize the repository with an SQLAlchemy model.

        Args:
            model: SQLAlchemy model class associated with this repository
        """
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        Get an entity by ID.

        Args:
            db: Async database session
            id: ID of the entity

        Returns:
            Entity found or None if it doesn't exist
        """
        try:
            query = select(self.model).where(self.model.id == id)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error fetching {self.model.__name__}",
                original_error=e
            )

    async def get_or_404(self, db: AsyncSession, id: Any) -> ModelType:
        """
        Get an entity by ID or raise ResourceNotFoundException.
        """
        obj = await self.get(db, id)
        if not obj:
            raise ResourceNotFoundException(
                detail=f"{self.model.__name__} not found",
                resource_id=id
            )
        return obj

    async def exists(self, db: AsyncSession, **filters) -> bool:
        """
        Check if an entity exists with the specified filters.

        Args:
            db: Async database session
            **filters: Filters in the format field=value

        Returns:
            True if it exists, False otherwise
        """
        try:
            query = select(self.model)
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

            result = await db.execute(select(query.exists()))
            return bool(result.scalar())
        except SQLAlchemyError as e:
            self.logger.error(f"Error checking existence of {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error checking existence of {self.model.__name__}",
                original_error=e
            )

    async def create(self, db: AsyncSession, *, obj_in: Dict[str, Any]) -> ModelType:
        """
        Create a new entity and flush it so its id is assigned.

        Args:
            db: Async database session
            obj_in: Column values of the new entity

        Returns:
            Newly created entity

        Raises:
            ResourceAlreadyExistsException: If the entity violates a uniqueness constraint
            DatabaseOperationException: If another database error occurs
        """
        db_obj = self.model(**obj_in)
        db.add(db_obj)
        await self._flush(db, action="creating")

        self.logger.info(f"{self.model.__name__} created with ID: {db_obj.id}")
        return db_obj

    async def update(self, db: AsyncSession, *, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        """
        Update an existing entity with the supplied column values.

        Args:
            db: Async database session
            db_obj: Model instance to update
            obj_in: Dictionary with the values to write

        Returns:
            Updated entity
        """
        for field, value in obj_in.items():
            if field != "id" and hasattr(self.model, field):
                setattr(db_obj, field, value)

        await self._flush(db, action="updating")

        self.logger.info(f"{self.model.__name__} with ID {db_obj.id} updated")
        return db_obj

    async def count(self, db: AsyncSession, **filters) -> int:
        """
        Count the number of entities matching the filters.
        """
        try:
            query = select(func.count()).select_from(self.model)
            for field, value in filters.items():
                if hasattr(self.model, field) and value is not None:
                    query = query.where(getattr(self.model, field) == value)

            result = await db.execute(query)
            return result.scalar_one()

        except SQLAlchemyError as e:
            self.logger.error(f"Error counting {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error counting {self.model.__name__}s",
                original_error=e
            )

    async def paginate(
            self,
            db: AsyncSession,
            query: Select,
            params: Params,
            transformer: Optional[Callable[[Sequence[Any]], Sequence[Any]]] = None,
    ) -> Page:
        """
        Run a select through fastapi-pagination.

        Args:
            db: Async database session
            query: Ordered select statement
            params: Page number and size
            transformer: Optional conversion applied to the page items

        Returns:
            Page with the items and the total count
        """
        try:
            return await apaginate(db, query, params, transformer=transformer)
        except SQLAlchemyError as e:
            self.logger.error(f"Error paginating {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error listing {self.model.__name__}s",
                original_error=e
            )

    async def _flush(self, db: AsyncSession, action: str) -> None:
        try:
            await db.flush()

        except IntegrityError as e:
            error_msg = str(e).lower()
            if 'unique' in error_msg or 'duplicate' in error_msg:
                self.logger.warning(f"Uniqueness violation {action} {self.model.__name__}: {str(e)}")
                raise ResourceAlreadyExistsException(
                    detail=f"{self.model.__name__} with these data already exists"
                )
            self.logger.error(f"Integrity error {action} {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(original_error=e)

        except SQLAlchemyError as e:
            self.logger.error(f"Error {action} {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error {action} {self.model.__name__}",
                original_error=e
            )
