# client_admin/adapters/inbound/api/v1/endpoints/configuration_endpoint.py

import logging
from typing import Dict, List, Optional
from fastapi_pagination import Page
from fastapi import APIRouter, Depends, status, Query, Path, Response

from client_admin.adapters.configuration.config import settings
from client_admin.adapters.inbound.api.deps import (
    get_client_service,
    get_configuration_service,
    get_current_user_id,
)
from client_admin.application.use_cases import AsyncClientService, AsyncConfigurationService
from client_admin.application.dtos.client_dto import (
    ClientInput,
    ClientOutput,
    ClientSecretInput,
    ClientSecretOutput,
    ClientSummary,
)
from client_admin.application.dtos.resource_dto import (
    ApiResourceInput,
    ApiResourceOutput,
    ApiScopeInput,
    ApiScopeOutput,
    IdentityResourceInput,
    IdentityResourceOutput,
)

logger = logging.getLogger(__name__)

router = APIRouter()


########################################################################
# Lookup tables
########################################################################

@router.get(
    "/enums",
    summary="Enums - Selection choices",
    description="Returns the value/label pairs of every enumeration used by the client form.",
    responses={
        200: {
            "description": "Enumerations keyed by name",
            "content": {
                "application/json": {
                    "example": {
                        "tokenUsage": [
                            {"value": 0, "label": "Re Use"},
                            {"value": 1, "label": "One Time Only"}
                        ]
                    }
                }
            }
        }
    }
)
async def get_enums(
        service: AsyncConfigurationService = Depends(get_configuration_service),
) -> Dict[str, List[Dict[str, object]]]:
    return service.get_enums()


@router.get(
    "/claims",
    response_model=List[str],
    summary="Standard Claims - Claim type names",
)
async def get_standard_claims(
        service: AsyncConfigurationService = Depends(get_configuration_service),
):
    return service.get_standard_claims()


@router.get(
    "/grantTypes",
    response_model=List[str],
    summary="Grant Types - Supported grant type identifiers",
)
async def get_grant_types(
        service: AsyncConfigurationService = Depends(get_configuration_service),
):
    return service.get_grant_types()


@router.get(
    "/scopes",
    response_model=List[str],
    summary="Scopes - Identity resource and api scope names",
)
async def list_scopes(
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.list_scopes()


########################################################################
# Identity resources
########################################################################

@router.get(
    "/identityResource/page",
    response_model=Page[IdentityResourceOutput],
    summary="List Identity Resources",
)
async def query_identity_resource_page(
        page: int = Query(1, description="Page number, starting at 1"),
        size: int = Query(settings.PAGE_SIZE_DEFAULT, description="Page size"),
        name: Optional[str] = Query(None, description="Filter by name (contains)"),
        service: AsyncConfigurationService = Depends(get_configuration_service),
):
    return await service.query_identity_resource_page(name=name, page=page, size=size)


@router.get(
    "/identityResource",
    response_model=IdentityResourceOutput,
    summary="Get Identity Resource",
)
async def query_identity_resource(
        id: int = Query(..., description="Identity resource id"),
        service: AsyncConfigurationService = Depends(get_configuration_service),
):
    return await service.get_identity_resource(id)


@router.post(
    "/identityResource",
    response_model=IdentityResourceOutput,
    summary="Save Identity Resource",
    description="Creates the identity resource when id is 0, otherwise updates it.",
)
async def save_identity_resource(
        data: IdentityResourceInput,
        service: AsyncConfigurationService = Depends(get_configuration_service),
):
    return await service.save_identity_resource(data)


########################################################################
# Api resources
########################################################################

@router.get(
    "/apiResource/page",
    response_model=Page[ApiResourceOutput],
    summary="List Api Resources",
)
async def query_api_resource_page(
        page: int = Query(1, description="Page number, starting at 1"),
        size: int = Query(settings.PAGE_SIZE_DEFAULT, description="Page size"),
        name: Optional[str] = Query(None, description="Filter by name (contains)"),
        service: AsyncConfigurationService = Depends(get_configuration_service),
):
    return await service.query_api_resource_page(name=name, page=page, size=size)


@router.get(
    "/apiResource",
    response_model=ApiResourceOutput,
    summary="Get Api Resource",
)
async def query_api_resource(
        id: int = Query(..., description="Api resource id"),
        service: AsyncConfigurationService = Depends(get_configuration_service),
):
    return await service.get_api_resource(id)


@router.post(
    "/apiResource",
    response_model=ApiResourceOutput,
    summary="Save Api Resource",
    description="Creates the api resource when id is 0, otherwise updates it.",
)
async def save_api_resource(
        data: ApiResourceInput,
        service: AsyncConfigurationService = Depends(get_configuration_service),
):
    return await service.save_api_resource(data)


########################################################################
# Api scopes
########################################################################

@router.get(
    "/apiScope/page",
    response_model=Page[ApiScopeOutput],
    summary="List Api Scopes",
)
async def query_api_scope_page(
        page: int = Query(1, description="Page number, starting at 1"),
        size: int = Query(settings.PAGE_SIZE_DEFAULT, description="Page size"),
        name: Optional[str] = Query(None, description="Filter by name (contains)"),
        service: AsyncConfigurationService = Depends(get_configuration_service),
):
    return await service.query_api_scope_page(name=name, page=page, size=size)


@router.get(
    "/apiScope",
    response_model=ApiScopeOutput,
    summary="Get Api Scope",
)
async def query_api_scope(
        id: int = Query(..., description="Api scope id"),
        service: AsyncConfigurationService = Depends(get_configuration_service),
):
    return await service.get_api_scope(id)


@router.post(
    "/apiScope",
    response_model=ApiScopeOutput,
    summary="Save Api Scope",
    description="Creates the api scope when id is 0, otherwise updates it.",
)
async def save_api_scope(
        data: ApiScopeInput,
        service: AsyncConfigurationService = Depends(get_configuration_service),
):
    return await service.save_api_scope(data)


########################################################################
# Clients
########################################################################

@router.get(
    "/client/page",
    response_model=Page[ClientSummary],
    summary="List My Clients",
    description="Returns a paginated list of the clients owned by the authenticated user, oldest first.",
)
async def query_client_page(
        page: int = Query(1, description="Page number, starting at 1"),
        size: int = Query(settings.PAGE_SIZE_DEFAULT, description="Page size"),
        user_id: int = Depends(get_current_user_id),
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.query_client_page(owner_id=user_id, page=page, size=size)


@router.get(
    "/client",
    response_model=ClientOutput,
    summary="Get Client",
    description="Returns the full client with its relation sets and secrets.",
    responses={
        404: {
            "description": "Client not found",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Client not found (ID: 42)",
                        "code": "RESOURCE_NOT_FOUND"
                    }
                }
            }
        }
    }
)
async def query_client_by_id(
        id: int = Query(..., description="Client id"),
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.get_client(id)


@router.post(
    "/client",
    response_model=ClientOutput,
    summary="Save Client",
    description=(
        "Creates a client owned by the authenticated user when id is 0, "
        "otherwise replaces the client with that id."
    ),
)
async def save_client(
        data: ClientInput,
        user_id: int = Depends(get_current_user_id),
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.save_client(data, owner_id=user_id)


@router.delete(
    "/client/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Client",
    description="Deletes a client. Only the owner of the client may delete it.",
)
async def remove_client(
        id: int = Path(..., description="Client id"),
        user_id: int = Depends(get_current_user_id),
        service: AsyncClientService = Depends(get_client_service),
):
    await service.remove_client(id, owner_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/clientSecret",
    response_model=ClientSecretOutput,
    summary="Add Client Secret",
    description="Attaches a secret to a client. Shared secrets are stored hashed.",
)
async def add_client_secret(
        data: ClientSecretInput,
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.add_secret(data)


@router.delete(
    "/clientSecret",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Client Secret",
    description="Deletes a client secret. Deleting a secret that doesn't exist succeeds.",
)
async def remove_client_secret(
        id: int = Query(..., description="Client secret id"),
        service: AsyncClientService = Depends(get_client_service),
):
    await service.remove_secret(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
