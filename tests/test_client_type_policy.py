"""
Unit tests for the client type defaults.
"""

import pytest

from client_admin.domain.constants import GrantTypes
from client_admin.domain.exceptions import InvalidInputException
from client_admin.domain.models.client_domain_model import ClientSecurity
from client_admin.domain.models.enums import ClientType
from client_admin.domain.services.client_type_policy import ClientTypePolicy


def _security(pkce=False, secret=True, offline=False):
    return ClientSecurity(require_pkce=pkce, require_client_secret=secret, allow_offline_access=offline)


class TestClientTypePolicy:
    """Test cases for ClientTypePolicy.apply."""

    def test_empty_leaves_everything_unchanged(self):
        grants, security = ClientTypePolicy.apply(ClientType.EMPTY, ["implicit"], _security(False, True, True))

        assert grants == ["implicit"]
        assert security == _security(False, True, True)

    @pytest.mark.parametrize("client_type", [ClientType.WEB, 1])
    def test_web_requires_pkce_and_secret(self, client_type):
        grants, security = ClientTypePolicy.apply(client_type, [], _security(False, False, False))

        assert grants == [GrantTypes.AUTHORIZATION_CODE]
        assert security.require_pkce is True
        assert security.require_client_secret is True
        assert security.allow_offline_access is False

    @pytest.mark.parametrize("client_type", [ClientType.SPA, ClientType.NATIVE])
    def test_public_clients_require_pkce_without_secret(self, client_type):
        grants, security = ClientTypePolicy.apply(client_type, [], _security(False, True, True))

        assert grants == [GrantTypes.AUTHORIZATION_CODE]
        assert security.require_pkce is True
        assert security.require_client_secret is False
        assert security.allow_offline_access is True

    def test_machine_only_adds_client_credentials(self):
        grants, security = ClientTypePolicy.apply(ClientType.MACHINE, [], _security(False, True, False))

        assert grants == [GrantTypes.CLIENT_CREDENTIALS]
        assert security == _security(False, True, False)

    def test_device_allows_offline_access_without_secret(self):
        grants, security = ClientTypePolicy.apply(ClientType.DEVICE, [], _security(True, True, False))

        assert grants == [GrantTypes.DEVICE_FLOW]
        assert security.require_pkce is True
        assert security.require_client_secret is False
        assert security.allow_offline_access is True

    def test_defaults_are_merged_without_duplicates(self):
        grants, _ = ClientTypePolicy.apply(
            ClientType.WEB,
            ["authorization_code", "client_credentials", "authorization_code"],
            _security(),
        )

        assert grants == ["authorization_code", "client_credentials"]

    @pytest.mark.parametrize("client_type", [6, -1, "web", None])
    def test_unknown_type_is_rejected(self, client_type):
        with pytest.raises(InvalidInputException) as exc_info:
            ClientTypePolicy.apply(client_type, [], _security())

        assert exc_info.value.internal_code == "INVALID_INPUT"
        assert "client_type" in exc_info.value.details
