# client_admin/adapters/outbound/security/caller_identity.py

from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from fastapi import HTTPException, status

from client_admin.adapters.configuration.config import settings


class CallerIdentityManager:
    """
    Resolves the numeric user id of the administrator behind a bearer token.
    """

    @classmethod
    def create_access_token(cls, subject: int, expires_delta: timedelta = None) -> str:
        """
        Create a bearer token whose 'sub' is the administrator's user id.
        """
        if expires_delta is None:
            expires_delta = timedelta(hours=1)

        expire = datetime.now(timezone.utc) + expires_delta
        payload = {
            "sub": str(subject),
            "exp": int(expire.timestamp()),
        }

        return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    @classmethod
    def resolve_user_id(cls, token: str) -> int:
        """
        Decode the token and return its subject as an integer.

        Raises HTTPException if the token is invalid, expired or its subject
        is not numeric.
        """
        try:
            payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        except JWTError:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired token.",
            )

        try:
            return int(payload.get("sub"))
        except (ValueError, TypeError):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid token: 'sub' is not a numeric user id.",
            )
