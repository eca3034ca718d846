# client_admin/application/dtos/resource_dto.py

"""
Schemas for identity resources, api resources and api scopes.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResourceBase(BaseModel):
    id: int = Field(0, ge=0, description="Internal id, 0 to create a new record")
    name: str = Field(..., min_length=1, max_length=200, description="Unique name")
    display_name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    enabled: bool = True
    show_in_discovery_document: bool = True


class IdentityResourceInput(ResourceBase):
    required: bool = False
    emphasize: bool = False


class ApiResourceInput(ResourceBase):
    pass


class ApiScopeInput(ResourceBase):
    required: bool = False
    emphasize: bool = False


class IdentityResourceOutput(IdentityResourceInput):
    created: Optional[datetime] = None
    updated: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ApiResourceOutput(ApiResourceInput):
    created: Optional[datetime] = None
    updated: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ApiScopeOutput(ApiScopeInput):
    created: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
