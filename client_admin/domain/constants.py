# client_admin/domain/constants.py

"""
Process-wide lookup tables.

Immutable after import; exposed as tuples so callers cannot mutate them.
"""

SHARED_SECRET = "SharedSecret"


class GrantTypes:
    """Grant type names understood by the identity server."""
    IMPLICIT = "implicit"
    HYBRID = "hybrid"
    AUTHORIZATION_CODE = "authorization_code"
    CLIENT_CREDENTIALS = "client_credentials"
    RESOURCE_OWNER_PASSWORD = "password"
    DEVICE_FLOW = "urn:ietf:params:oauth:grant-type:device_code"

    ALL = (
        IMPLICIT,
        HYBRID,
        AUTHORIZATION_CODE,
        CLIENT_CREDENTIALS,
        RESOURCE_OWNER_PASSWORD,
        DEVICE_FLOW,
    )


# OpenID Connect Core 1.0, section 5.1
STANDARD_CLAIMS = (
    "sub",
    "name",
    "given_name",
    "family_name",
    "middle_name",
    "nickname",
    "preferred_username",
    "profile",
    "picture",
    "website",
    "email",
    "email_verified",
    "gender",
    "birthdate",
    "zoneinfo",
    "locale",
    "phone_number",
    "phone_number_verified",
    "address",
    "updated_at",
    "role",
)
