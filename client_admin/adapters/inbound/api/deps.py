# client_admin/adapters/inbound/api/deps.py

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for caller identification and database access.
"""

import logging
from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from client_admin.adapters.outbound.persistence.database import get_db
from client_admin.adapters.outbound.security.caller_identity import CallerIdentityManager
from client_admin.application.use_cases import AsyncClientService, AsyncConfigurationService

# Configure logger
logger = logging.getLogger(__name__)

# Create bearer scheme for authentication
bearer_scheme = HTTPBearer()

########################################################################
# Database Session Management
########################################################################

get_db_session = get_db


########################################################################
# Caller Identification
########################################################################

async def get_current_user_id(
        credentials: HTTPAuthorizationCredentials = Security(bearer_scheme),
) -> int:
    """
    Resolve the administrator's user id from the bearer token.

    Args:
        credentials: Authorization credentials with bearer token

    Returns:
        Numeric user id contained in the token

    Raises:
        HTTPException: If the token is invalid or expired
    """
    return CallerIdentityManager.resolve_user_id(credentials.credentials)


########################################################################
# Services
########################################################################

async def get_client_service(db: AsyncSession = Depends(get_db_session)) -> AsyncClientService:
    return AsyncClientService(db)


async def get_configuration_service(db: AsyncSession = Depends(get_db_session)) -> AsyncConfigurationService:
    return AsyncConfigurationService(db)
