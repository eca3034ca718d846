# client_admin/shared/middleware/exception_middleware.py

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
appropriate error responses for the client. Persistence errors reach it
already wrapped in DatabaseOperationException by the repositories and the
atomic unit, so only domain exceptions and unexpected errors are handled.
"""

import time
import logging
from typing import Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from client_admin.domain.exceptions import DomainException
from client_admin.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "PERMISSION_DENIED": status.HTTP_403_FORBIDDEN,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
}


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            status_code = STATUS_BY_CODE.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)
            log = logger.error if status_code >= 500 else logger.warning
            log(
                f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                f"Path: {request.url.path}"
            )

            detail = str(exc)
            if status_code >= 500 and settings.ENVIRONMENT == "production":
                detail = "Internal database error"

            return JSONResponse(
                status_code=status_code,
                content={
                    "detail": detail,
                    "code": exc.internal_code,
                    "errors": getattr(exc, "details", {})
                }
            )

        except Exception as exc:
            logger.exception(
                f"Unhandled exception: Type={type(exc).__name__} | "
                f"Path: {request.url.path}"
            )
            error_message = "Internal server error" if settings.ENVIRONMENT == "production" else str(exc)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": error_message,
                    "code": "INTERNAL_SERVER_ERROR"
                }
            )
