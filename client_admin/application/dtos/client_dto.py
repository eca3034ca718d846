# client_admin/application/dtos/client_dto.py

"""
Schemas for client aggregate data.

This module defines the Pydantic DTOs used to validate and serialise
clients, their relation sets and their secrets.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from client_admin.domain.constants import SHARED_SECRET
from client_admin.domain.models.enums import AccessTokenType, HashType, TokenExpiration, TokenUsage

# Scalar columns a caller may write on create and replace
CLIENT_SCALAR_FIELDS = (
    "client_type",
    "enabled",
    "client_name",
    "description",
    "client_uri",
    "logo_uri",
    "require_consent",
    "allow_remember_consent",
    "require_pkce",
    "allow_plain_text_pkce",
    "require_client_secret",
    "allow_offline_access",
    "allow_access_tokens_via_browser",
    "always_include_user_claims_in_id_token",
    "front_channel_logout_uri",
    "back_channel_logout_uri",
    "identity_token_lifetime",
    "access_token_lifetime",
    "authorization_code_lifetime",
    "absolute_refresh_token_lifetime",
    "sliding_refresh_token_lifetime",
    "device_code_lifetime",
    "refresh_token_usage",
    "refresh_token_expiration",
    "access_token_type",
    "client_claims_prefix",
)


class ClientClaimDto(BaseModel):
    """Claim included in the tokens issued to a client."""
    type: str = Field(..., min_length=1, description="Claim type")
    value: str = Field(..., description="Claim value")

    model_config = ConfigDict(from_attributes=True)


class ClientSettings(BaseModel):
    """
    Scalar configuration shared by the input and output schemas.
    """
    client_type: int = Field(0, description="Client classification (see /enums clientType)")
    enabled: bool = True
    client_name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    client_uri: Optional[str] = None
    logo_uri: Optional[str] = None
    require_consent: bool = False
    allow_remember_consent: bool = True
    require_pkce: bool = True
    allow_plain_text_pkce: bool = False
    require_client_secret: bool = True
    allow_offline_access: bool = False
    allow_access_tokens_via_browser: bool = False
    always_include_user_claims_in_id_token: bool = False
    front_channel_logout_uri: Optional[str] = None
    back_channel_logout_uri: Optional[str] = None
    identity_token_lifetime: int = Field(300, ge=0)
    access_token_lifetime: int = Field(3600, ge=0)
    authorization_code_lifetime: int = Field(300, ge=0)
    absolute_refresh_token_lifetime: int = Field(2592000, ge=0)
    sliding_refresh_token_lifetime: int = Field(1296000, ge=0)
    device_code_lifetime: int = Field(300, ge=0)
    refresh_token_usage: TokenUsage = TokenUsage.ONE_TIME_ONLY
    refresh_token_expiration: TokenExpiration = TokenExpiration.ABSOLUTE
    access_token_type: AccessTokenType = AccessTokenType.JWT
    client_claims_prefix: Optional[str] = "client_"


class ClientInput(ClientSettings):
    """
    Full client representation sent on save.

    An ``id`` of 0 creates a new client; any other value replaces the
    client with that id. Relation sets are always written exactly as sent.
    """
    id: int = Field(0, ge=0, description="Internal id, 0 to create a new client")
    allowed_grant_types: List[str] = Field(default_factory=list)
    redirect_uris: List[str] = Field(default_factory=list)
    post_logout_redirect_uris: List[str] = Field(default_factory=list)
    allowed_scopes: List[str] = Field(default_factory=list)
    identity_provider_restrictions: List[str] = Field(default_factory=list)
    claims: List[ClientClaimDto] = Field(default_factory=list)
    allowed_cors_origins: List[str] = Field(default_factory=list)


class ClientSecretInput(BaseModel):
    """Secret to attach to an existing client."""
    client_id: int = Field(..., description="Internal id of the owning client")
    value: str = Field(..., min_length=1, description="Raw secret value")
    type: str = Field(SHARED_SECRET, description="Secret type")
    hash_type: HashType = Field(HashType.SHA256, description="Hash algorithm applied before storage")
    description: Optional[str] = Field(None, max_length=2000)
    expiration: Optional[datetime] = None


class ClientSecretOutput(BaseModel):
    id: int
    client_id: int
    value: str
    type: str
    hash_type: HashType
    description: Optional[str] = None
    expiration: Optional[datetime] = None
    created: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ClientSummary(BaseModel):
    """
    Schema for client listings.
    """
    id: int
    client_id: str
    client_name: Optional[str] = None
    client_type: int
    enabled: bool
    description: Optional[str] = None
    created: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ClientOutput(ClientSettings):
    """
    Schema for the full client aggregate.
    """
    id: int
    client_id: str
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    allowed_grant_types: List[str] = Field(default_factory=list)
    redirect_uris: List[str] = Field(default_factory=list)
    post_logout_redirect_uris: List[str] = Field(default_factory=list)
    allowed_scopes: List[str] = Field(default_factory=list)
    identity_provider_restrictions: List[str] = Field(default_factory=list)
    claims: List[ClientClaimDto] = Field(default_factory=list)
    allowed_cors_origins: List[str] = Field(default_factory=list)
    client_secrets: List[ClientSecretOutput] = Field(default_factory=list)
