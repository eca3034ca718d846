# client_admin/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from client_admin.application.dtos.client_dto import ClientInput, ClientOutput, ClientSecretInput, ClientSecretOutput


class IClientUseCase(ABC):
    """Interface for client configuration use cases."""

    @abstractmethod
    async def query_client_page(self, owner_id: int, page: Optional[int] = None, size: Optional[int] = None):
        """Page through the clients owned by a user."""
        pass

    @abstractmethod
    async def get_client(self, id: int) -> ClientOutput:
        """Get the full client aggregate."""
        pass

    @abstractmethod
    async def save_client(self, data: ClientInput, owner_id: int) -> ClientOutput:
        """Create or fully replace a client."""
        pass

    @abstractmethod
    async def remove_client(self, id: int, owner_id: int) -> None:
        """Delete a client owned by the caller."""
        pass

    @abstractmethod
    async def add_secret(self, data: ClientSecretInput) -> ClientSecretOutput:
        """Attach a secret to a client."""
        pass

    @abstractmethod
    async def remove_secret(self, id: int) -> None:
        """Delete a client secret if it exists."""
        pass

    @abstractmethod
    async def list_scopes(self) -> List[str]:
        """Names of every scope a client may request."""
        pass


class IConfigurationUseCase(ABC):
    """Interface for lookup tables and resource management."""

    @abstractmethod
    def get_enums(self) -> Dict[str, List[Dict[str, object]]]:
        """Selection items of every enumeration."""
        pass

    @abstractmethod
    def get_standard_claims(self) -> List[str]:
        """Standard OpenID Connect claim names."""
        pass

    @abstractmethod
    def get_grant_types(self) -> List[str]:
        """Grant type names."""
        pass
