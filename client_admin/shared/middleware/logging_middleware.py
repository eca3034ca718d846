# client_admin/shared/middleware/logging_middleware.py

"""
Middleware for HTTP request logging.

Each configuration request is logged with the administrator behind the
bearer token and, when present, the id of the record it targets.
"""

import time
import logging
from typing import Optional
from fastapi import HTTPException, Request
from starlette.middleware.base import BaseHTTPMiddleware

from client_admin.adapters.configuration.config import settings
from client_admin.adapters.outbound.security.caller_identity import CallerIdentityManager

# Configure logger
logger = logging.getLogger(__name__)


def resolve_caller(request: Request) -> str:
    """User id from the bearer token, or 'anonymous' when it can't be resolved."""
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        return "anonymous"
    try:
        return str(CallerIdentityManager.resolve_user_id(token))
    except HTTPException:
        return "anonymous"


def resolve_target_id(request: Request) -> Optional[str]:
    """Record id from ``?id=`` or from a trailing numeric path segment (``/client/42``)."""
    target = request.query_params.get("id")
    if target:
        return target
    last_segment = request.url.path.rstrip("/").rsplit("/", 1)[-1]
    return last_segment if last_segment.isdigit() else None


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request logging.
    Logs information about each received request and its response.
    """

    async def dispatch(self, request: Request, call_next):
        caller = resolve_caller(request)
        target = resolve_target_id(request)
        target_info = f" | Target ID: {target}" if target else ""

        if settings.ENVIRONMENT == "production":
            logger.info(f"Request: {request.method} {request.url.path} | User: {caller}{target_info}")
        else:
            query_params = dict(request.query_params)
            logger.info(
                f"Request: {request.method} {request.url.path} | User: {caller}{target_info} | "
                f"Query: {query_params if query_params else 'N/A'} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        log = logger.warning if response.status_code >= 400 else logger.info
        log(
            f"Response: {response.status_code} for {request.method} {request.url.path} | "
            f"User: {caller}{target_info} | Time: {process_time:.4f}s"
        )

        return response
