# client_admin/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional


class IClientRepository(ABC):
    """Client aggregate repository interface."""

    @abstractmethod
    async def get_with_relations(self, db, id: int):
        """Get a client with its relation sets and secrets."""
        pass

    @abstractmethod
    async def get_for_update(self, db, id: int):
        """Get a client and lock it for the current transaction."""
        pass

    @abstractmethod
    async def page_by_owner(self, db, owner_id: int, params):
        """Page through the clients owned by a user."""
        pass

    @abstractmethod
    async def add_with_owner(
            self,
            db,
            *,
            scalars: Dict[str, Any],
            client_id: str,
            relations: Dict[str, Iterable[Any]],
            owner_id: int,
    ):
        """Create a client together with its ownership record."""
        pass

    @abstractmethod
    async def replace(self, db, *, client, scalars: Dict[str, Any], relations: Dict[str, Iterable[Any]]):
        """Replace the scalars and relation sets of a client."""
        pass

    @abstractmethod
    async def get_owner(self, db, client_id: int):
        """Get the ownership record of a client."""
        pass

    @abstractmethod
    async def remove_with_owner(self, db, client) -> None:
        """Delete a client with everything that belongs to it."""
        pass

    @abstractmethod
    async def get_secret(self, db, id: int):
        """Get a client secret."""
        pass

    @abstractmethod
    async def add_secret(self, db, secret):
        """Persist a client secret."""
        pass

    @abstractmethod
    async def remove_secret(self, db, secret) -> None:
        """Delete a client secret."""
        pass

    @abstractmethod
    async def list_scope_names(self, db) -> List[str]:
        """Names of all identity resources and api scopes."""
        pass


class IResourceRepository(ABC):
    """Identity resource / api resource / api scope repository interface."""

    @abstractmethod
    async def page_by_name(self, db, params, name: Optional[str] = None, transformer=None):
        """Page through the records, optionally filtered by name."""
        pass

    @abstractmethod
    async def save(self, db, data: Dict[str, Any]):
        """Create or update a record."""
        pass
