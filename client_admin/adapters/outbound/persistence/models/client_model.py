# client_admin/adapters/outbound/persistence/models/client_model.py

"""
Client aggregate models.

A Client owns seven relation tables (grant types, redirect URIs, post-logout
redirect URIs, scopes, identity-provider restrictions, claims and CORS
origins), a list of secrets and exactly one ownership record. Every child
row references its client through a foreign key only.
"""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from client_admin.adapters.outbound.persistence.models.base_model import Base, utcnow
from client_admin.domain.constants import SHARED_SECRET
from client_admin.domain.models.enums import (
    AccessTokenType,
    ClientType,
    HashType,
    TokenExpiration,
    TokenUsage,
)


def _child(model: str):
    return relationship(model, cascade="all, delete-orphan", passive_deletes=True)


class Client(Base):
    """
    Registered OAuth2/OIDC relying party.

    Attributes:
        id: Internal identity, assigned by the database
        client_id: External identifier, generated once at creation
        client_type: Classification that drove the creation defaults
        created: Creation timestamp, assigned by the database
    """
    __tablename__ = "clients"
    __mapper_args__ = {"eager_defaults": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(String(200), unique=True, nullable=False, index=True)
    client_type = Column(Integer, nullable=False, default=int(ClientType.EMPTY))
    enabled = Column(Boolean, nullable=False, default=True)
    client_name = Column(String(200))
    description = Column(String(1000))
    client_uri = Column(String(2000))
    logo_uri = Column(String(2000))
    require_consent = Column(Boolean, nullable=False, default=False)
    allow_remember_consent = Column(Boolean, nullable=False, default=True)
    require_pkce = Column(Boolean, nullable=False, default=True)
    allow_plain_text_pkce = Column(Boolean, nullable=False, default=False)
    require_client_secret = Column(Boolean, nullable=False, default=True)
    allow_offline_access = Column(Boolean, nullable=False, default=False)
    allow_access_tokens_via_browser = Column(Boolean, nullable=False, default=False)
    always_include_user_claims_in_id_token = Column(Boolean, nullable=False, default=False)
    front_channel_logout_uri = Column(String(2000))
    back_channel_logout_uri = Column(String(2000))
    identity_token_lifetime = Column(Integer, nullable=False, default=300)
    access_token_lifetime = Column(Integer, nullable=False, default=3600)
    authorization_code_lifetime = Column(Integer, nullable=False, default=300)
    absolute_refresh_token_lifetime = Column(Integer, nullable=False, default=2592000)
    sliding_refresh_token_lifetime = Column(Integer, nullable=False, default=1296000)
    device_code_lifetime = Column(Integer, nullable=False, default=300)
    refresh_token_usage = Column(Integer, nullable=False, default=int(TokenUsage.ONE_TIME_ONLY))
    refresh_token_expiration = Column(Integer, nullable=False, default=int(TokenExpiration.ABSOLUTE))
    access_token_type = Column(Integer, nullable=False, default=int(AccessTokenType.JWT))
    client_claims_prefix = Column(String(200), default="client_")
    created = Column(DateTime, nullable=False, server_default=func.now(), index=True)
    updated = Column(DateTime, onupdate=utcnow)

    allowed_grant_types = _child("ClientGrantType")
    redirect_uris = _child("ClientRedirectUri")
    post_logout_redirect_uris = _child("ClientPostLogoutRedirectUri")
    allowed_scopes = _child("ClientScope")
    identity_provider_restrictions = _child("ClientIdPRestriction")
    claims = _child("ClientClaim")
    allowed_cors_origins = _child("ClientCorsOrigin")
    client_secrets = _child("ClientSecret")

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, client_id={self.client_id}, type={self.client_type})>"


class ClientGrantType(Base):
    __tablename__ = "client_grant_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    grant_type = Column(String(250), nullable=False)


class ClientRedirectUri(Base):
    __tablename__ = "client_redirect_uris"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    redirect_uri = Column(String(2000), nullable=False)


class ClientPostLogoutRedirectUri(Base):
    __tablename__ = "client_post_logout_redirect_uris"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    post_logout_redirect_uri = Column(String(2000), nullable=False)


class ClientScope(Base):
    __tablename__ = "client_scopes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    scope = Column(String(200), nullable=False)


class ClientIdPRestriction(Base):
    __tablename__ = "client_idp_restrictions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    provider = Column(String(200), nullable=False)


class ClientClaim(Base):
    __tablename__ = "client_claims"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(250), nullable=False)
    value = Column(String(250), nullable=False)


class ClientCorsOrigin(Base):
    __tablename__ = "client_cors_origins"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    origin = Column(String(150), nullable=False)


class ClientSecret(Base):
    """
    Secret of a client. The value is stored already hashed when the secret
    is a shared secret with a hash algorithm.
    """
    __tablename__ = "client_secrets"
    __mapper_args__ = {"eager_defaults": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(String(2000))
    value = Column(String(4000), nullable=False)
    type = Column(String(250), nullable=False, default=SHARED_SECRET)
    hash_type = Column(Integer, nullable=False, default=int(HashType.SHA256))
    expiration = Column(DateTime)
    created = Column(DateTime, nullable=False, server_default=func.now())


class ClientOwner(Base):
    """Administrator permitted to modify and delete a client."""
    __tablename__ = "client_owners"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, unique=True)
    user_id = Column(Integer, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<ClientOwner(client_id={self.client_id}, user_id={self.user_id})>"
