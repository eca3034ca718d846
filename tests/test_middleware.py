"""
Tests for the request logging and exception middlewares.
"""

import logging

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request

from client_admin.adapters.outbound.security.caller_identity import CallerIdentityManager
from client_admin.domain.exceptions import DatabaseOperationException
from client_admin.shared.middleware import AsyncExceptionMiddleware, AsyncRequestLoggingMiddleware
from client_admin.shared.middleware.logging_middleware import resolve_caller, resolve_target_id

from tests.conftest import OWNER_ID


def _request(path: str, query: bytes = b"", token: str = None) -> Request:
    headers = [(b"authorization", f"Bearer {token}".encode())] if token else []
    return Request({
        "type": "http",
        "method": "GET",
        "path": path,
        "query_string": query,
        "headers": headers,
    })


def _failing_app() -> FastAPI:
    failing = FastAPI()
    failing.add_middleware(AsyncExceptionMiddleware)
    failing.add_middleware(AsyncRequestLoggingMiddleware)

    @failing.get("/database")
    async def database_failure():
        raise DatabaseOperationException(detail="Error removing client")

    @failing.get("/boom")
    async def unexpected_failure():
        raise RuntimeError("boom")

    return failing


class TestRequestContext:
    """Test cases for the values logged with each request."""

    def test_caller_from_bearer_token(self):
        token = CallerIdentityManager.create_access_token(OWNER_ID)

        assert resolve_caller(_request("/api/configuration/enums", token=token)) == str(OWNER_ID)

    def test_caller_without_token(self):
        assert resolve_caller(_request("/api/configuration/enums")) == "anonymous"

    def test_caller_with_invalid_token(self):
        assert resolve_caller(_request("/api/configuration/enums", token="garbage")) == "anonymous"

    def test_target_from_query(self):
        assert resolve_target_id(_request("/api/configuration/client", query=b"id=42")) == "42"

    def test_target_from_path(self):
        assert resolve_target_id(_request("/api/configuration/client/42")) == "42"

    def test_no_target(self):
        assert resolve_target_id(_request("/api/configuration/client/page")) is None


class TestExceptionMiddleware:
    """Test cases for error responses."""

    async def test_database_failure_is_internal_error(self):
        transport = ASGITransport(app=_failing_app())
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/database")

        assert response.status_code == 500
        assert response.json()["code"] == "DATABASE_OPERATION_ERROR"

    async def test_unexpected_failure_is_internal_error(self):
        transport = ASGITransport(app=_failing_app())
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_SERVER_ERROR"

    async def test_response_is_logged_with_caller(self, http_client, auth_headers, caplog):
        with caplog.at_level(logging.INFO, logger="client_admin.shared.middleware.logging_middleware"):
            await http_client.get("/api/configuration/client", params={"id": 5}, headers=auth_headers())

        messages = [record.getMessage() for record in caplog.records]
        assert any(
            message.startswith("Response: 404") and f"User: {OWNER_ID}" in message and "Target ID: 5" in message
            for message in messages
        )
