"""
FastAPI dependencies for authentication and authorization.

These dependencies are used to protect endpoints and extract the caller's
identity from the bearer token.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from app.core.exceptions import Forbidden, Unauthenticated
from app.core.security import decode_token
from app.schemas.user import AuthContext

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error is off so a missing header is a 401 like any other bad token
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthContext:
    """
    Extract and validate the caller from the JWT.

    The claims are trusted once the signature and expiry check out; no
    database lookup is made.

    Raises:
        Unauthenticated: If the token is absent, malformed or expired
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("Missing bearer token")

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise Unauthenticated("Invalid or expired token")

    return AuthContext(
        user_id=str(payload["user_id"]),
        username=payload["username"],
        role=payload["role"],
    )


async def get_admin_user(
    user: AuthContext = Depends(get_current_user),
) -> AuthContext:
    """
    Require the caller to have the admin role.

    Raises:
        Forbidden: If the caller is not an admin
    """
    if not user.is_admin:
        raise Forbidden("Admin access required")
    return user
