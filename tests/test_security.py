"""
Unit tests for secret hashing, client identifier generation and caller
identification.
"""

import base64
import hashlib
from datetime import timedelta

import pytest
from fastapi import HTTPException
from jose import jwt

from client_admin.adapters.configuration.config import settings
from client_admin.adapters.outbound.security import (
    CallerIdentityManager,
    build_client_id,
    generate_client_id,
    hash_client_secret,
)
from client_admin.adapters.outbound.security.identifier import current_ticks
from client_admin.domain.models.enums import HashType


class TestSecretHasher:
    """Test cases for hash_client_secret."""

    def test_shared_secret_sha256(self):
        expected = base64.b64encode(hashlib.sha256(b"topsecret").digest()).decode()

        assert hash_client_secret("SharedSecret", HashType.SHA256, "topsecret") == expected

    def test_shared_secret_sha512(self):
        expected = base64.b64encode(hashlib.sha512(b"topsecret").digest()).decode()

        assert hash_client_secret("SharedSecret", HashType.SHA512, "topsecret") == expected

    def test_raw_integer_selector(self):
        expected = base64.b64encode(hashlib.sha256(b"topsecret").digest()).decode()

        assert hash_client_secret("SharedSecret", 1, "topsecret") == expected

    def test_other_secret_types_are_stored_verbatim(self):
        assert hash_client_secret("X509Thumbprint", HashType.SHA256, "ABCDEF") == "ABCDEF"

    def test_no_hash_is_stored_verbatim(self):
        assert hash_client_secret("SharedSecret", HashType.NONE, "plain") == "plain"


class TestClientIdentifier:
    """Test cases for the external client identifier."""

    def test_zero_bytes(self):
        assert build_client_id(bytes(16), 0) == "1"

    def test_product_of_incremented_bytes(self):
        assert build_client_id(bytes([1] * 16), 0) == "10000"
        assert build_client_id(bytes([1] * 16), 1) == "ffff"

    def test_negative_result_wraps_to_64_bits(self):
        assert build_client_id(bytes(16), 2) == "ffffffffffffffff"

    def test_deterministic(self):
        raw = bytes(range(16))
        assert build_client_id(raw, 637000000000000000) == build_client_id(raw, 637000000000000000)

    def test_ticks_are_dotnet_ticks(self):
        # 2020-01-01 in 100ns ticks since 0001-01-01
        assert current_ticks() > 637134336000000000

    def test_generated_identifiers_are_hex(self):
        client_id = generate_client_id()

        assert 0 < len(client_id) <= 16
        int(client_id, 16)


class TestCallerIdentity:
    """Test cases for CallerIdentityManager."""

    def test_round_trip_user_id(self):
        token = CallerIdentityManager.create_access_token(42)

        assert CallerIdentityManager.resolve_user_id(token) == 42

    def test_expired_token_is_rejected(self):
        token = CallerIdentityManager.create_access_token(42, expires_delta=timedelta(seconds=-10))

        with pytest.raises(HTTPException) as exc_info:
            CallerIdentityManager.resolve_user_id(token)
        assert exc_info.value.status_code == 401

    def test_non_numeric_subject_is_rejected(self):
        token = jwt.encode({"sub": "alice"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

        with pytest.raises(HTTPException) as exc_info:
            CallerIdentityManager.resolve_user_id(token)
        assert exc_info.value.status_code == 401

    def test_foreign_signature_is_rejected(self):
        token = jwt.encode({"sub": "1"}, "another-key", algorithm=settings.ALGORITHM)

        with pytest.raises(HTTPException):
            CallerIdentityManager.resolve_user_id(token)
