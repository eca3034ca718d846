# client_admin/adapters/inbound/api/v1/router.py

from fastapi import APIRouter, Depends

from client_admin.adapters.inbound.api.deps import get_current_user_id
from client_admin.adapters.inbound.api.v1.endpoints import configuration_endpoint

api_router = APIRouter()

# Every configuration route requires an authenticated administrator
api_router.include_router(
    configuration_endpoint.router,
    prefix="/configuration",
    tags=["Configuration"],
    dependencies=[Depends(get_current_user_id)],
)
