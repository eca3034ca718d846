# client_admin/shared/middleware/__init__.py

from client_admin.shared.middleware.exception_middleware import AsyncExceptionMiddleware
from client_admin.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
]
