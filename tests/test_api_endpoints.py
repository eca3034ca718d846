"""
Tests for the configuration HTTP API.
"""

from tests.conftest import OTHER_USER_ID, OWNER_ID

BASE = "/api/configuration"


async def _create_client(http_client, headers, **fields):
    payload = {"id": 0, "client_name": "demo", **fields}
    response = await http_client.post(f"{BASE}/client", json=payload, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestAuthentication:
    """Test cases for caller identification."""

    async def test_missing_token_is_rejected(self, http_client):
        response = await http_client.get(f"{BASE}/enums")

        assert response.status_code in (401, 403)

    async def test_invalid_token_is_rejected(self, http_client):
        response = await http_client.get(f"{BASE}/enums", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401


class TestLookupEndpoints:
    """Test cases for the lookup table endpoints."""

    async def test_enums(self, http_client, auth_headers):
        response = await http_client.get(f"{BASE}/enums", headers=auth_headers())

        assert response.status_code == 200
        assert response.json()["clientType"][4] == {"value": 4, "label": "Machine"}

    async def test_grant_types(self, http_client, auth_headers):
        response = await http_client.get(f"{BASE}/grantTypes", headers=auth_headers())

        assert response.status_code == 200
        assert "client_credentials" in response.json()

    async def test_claims(self, http_client, auth_headers):
        response = await http_client.get(f"{BASE}/claims", headers=auth_headers())

        assert response.status_code == 200
        assert "sub" in response.json()

    async def test_scopes(self, http_client, auth_headers):
        await http_client.post(f"{BASE}/identityResource", json={"name": "openid"}, headers=auth_headers())
        await http_client.post(f"{BASE}/apiScope", json={"name": "api1"}, headers=auth_headers())

        response = await http_client.get(f"{BASE}/scopes", headers=auth_headers())

        assert response.status_code == 200
        assert response.json() == ["openid", "api1"]


class TestResourceEndpoints:
    """Test cases for identity resource, api resource and api scope endpoints."""

    async def test_identity_resource_flow(self, http_client, auth_headers):
        created = await http_client.post(
            f"{BASE}/identityResource", json={"name": "profile"}, headers=auth_headers()
        )
        assert created.status_code == 200
        resource_id = created.json()["id"]

        found = await http_client.get(f"{BASE}/identityResource", params={"id": resource_id}, headers=auth_headers())
        assert found.status_code == 200
        assert found.json()["name"] == "profile"

        page = await http_client.get(f"{BASE}/identityResource/page", headers=auth_headers())
        assert page.status_code == 200
        assert page.json()["total"] == 1

    async def test_duplicate_api_resource_is_a_conflict(self, http_client, auth_headers):
        await http_client.post(f"{BASE}/apiResource", json={"name": "orders"}, headers=auth_headers())

        response = await http_client.post(f"{BASE}/apiResource", json={"name": "orders"}, headers=auth_headers())

        assert response.status_code == 409
        assert response.json()["code"] == "RESOURCE_ALREADY_EXISTS"

    async def test_missing_api_scope(self, http_client, auth_headers):
        response = await http_client.get(f"{BASE}/apiScope", params={"id": 12}, headers=auth_headers())

        assert response.status_code == 404
        assert response.json()["code"] == "RESOURCE_NOT_FOUND"


class TestClientEndpoints:
    """Test cases for the client endpoints."""

    async def test_create_machine_client(self, http_client, auth_headers):
        body = await _create_client(http_client, auth_headers(), client_type=4, require_pkce=False)

        assert body["allowed_grant_types"] == ["client_credentials"]
        assert body["require_pkce"] is False
        assert body["client_id"]

    async def test_unknown_client_type_is_bad_request(self, http_client, auth_headers):
        response = await http_client.post(
            f"{BASE}/client", json={"id": 0, "client_type": 17}, headers=auth_headers()
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"

    async def test_replace_client(self, http_client, auth_headers):
        body = await _create_client(http_client, auth_headers(), redirect_uris=["https://a.example/cb"])

        response = await http_client.post(
            f"{BASE}/client",
            json={"id": body["id"], "redirect_uris": ["https://c.example/cb"]},
            headers=auth_headers(),
        )

        assert response.status_code == 200
        assert response.json()["redirect_uris"] == ["https://c.example/cb"]

    async def test_replace_by_non_owner_is_forbidden(self, http_client, auth_headers):
        body = await _create_client(http_client, auth_headers(OWNER_ID), redirect_uris=["https://a.example/cb"])

        response = await http_client.post(
            f"{BASE}/client",
            json={"id": body["id"], "client_name": "hijacked", "redirect_uris": ["https://evil.example/cb"]},
            headers=auth_headers(OTHER_USER_ID),
        )

        assert response.status_code == 403
        assert response.json()["code"] == "PERMISSION_DENIED"

        found = await http_client.get(f"{BASE}/client", params={"id": body["id"]}, headers=auth_headers())
        assert found.json()["client_name"] == "demo"
        assert found.json()["redirect_uris"] == ["https://a.example/cb"]

    async def test_get_client(self, http_client, auth_headers):
        body = await _create_client(http_client, auth_headers())

        response = await http_client.get(f"{BASE}/client", params={"id": body["id"]}, headers=auth_headers())

        assert response.status_code == 200
        assert response.json()["client_id"] == body["client_id"]

    async def test_page_only_lists_own_clients(self, http_client, auth_headers):
        await _create_client(http_client, auth_headers(OWNER_ID), client_name="mine")
        await _create_client(http_client, auth_headers(OTHER_USER_ID), client_name="theirs")

        response = await http_client.get(
            f"{BASE}/client/page", params={"page": 1, "size": 10}, headers=auth_headers(OWNER_ID)
        )

        assert response.status_code == 200
        page = response.json()
        assert page["total"] == 1
        assert page["items"][0]["client_name"] == "mine"

    async def test_oversized_page_is_clamped(self, http_client, auth_headers):
        response = await http_client.get(
            f"{BASE}/client/page", params={"page": 0, "size": 1000}, headers=auth_headers()
        )

        assert response.status_code == 200
        assert response.json()["page"] == 1
        assert response.json()["size"] == 100

    async def test_delete_by_non_owner_is_forbidden(self, http_client, auth_headers):
        body = await _create_client(http_client, auth_headers(OWNER_ID))

        response = await http_client.delete(f"{BASE}/client/{body['id']}", headers=auth_headers(OTHER_USER_ID))

        assert response.status_code == 403
        assert response.json()["code"] == "PERMISSION_DENIED"

    async def test_delete_by_owner(self, http_client, auth_headers):
        body = await _create_client(http_client, auth_headers())

        response = await http_client.delete(f"{BASE}/client/{body['id']}", headers=auth_headers())
        assert response.status_code == 204

        missing = await http_client.get(f"{BASE}/client", params={"id": body["id"]}, headers=auth_headers())
        assert missing.status_code == 404

    async def test_secret_flow(self, http_client, auth_headers):
        body = await _create_client(http_client, auth_headers())

        added = await http_client.post(
            f"{BASE}/clientSecret",
            json={"client_id": body["id"], "value": "topsecret", "hash_type": 1},
            headers=auth_headers(),
        )
        assert added.status_code == 200
        assert added.json()["value"] != "topsecret"

        removed = await http_client.delete(
            f"{BASE}/clientSecret", params={"id": added.json()["id"]}, headers=auth_headers()
        )
        assert removed.status_code == 204

    async def test_delete_missing_secret_succeeds(self, http_client, auth_headers):
        response = await http_client.delete(f"{BASE}/clientSecret", params={"id": 99}, headers=auth_headers())

        assert response.status_code == 204
