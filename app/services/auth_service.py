"""
Credential verification and login.

CredentialVerifier receives its account lookup as a constructor argument, so
callers (and tests) decide where accounts come from.
"""

import logging
from typing import Callable, Optional

from app.core.exceptions import InvalidCredentials, NotFound
from app.core.security import create_access_token, verify_password
from app.models.user import User
from app.schemas.user import LoginResponse, UserResponse

logger = logging.getLogger(__name__)

UserLookup = Callable[[str], Optional[User]]


class CredentialVerifier:
    """Checks an identifier/password pair against stored bcrypt hashes."""

    def __init__(self, lookup: UserLookup):
        self.lookup = lookup

    def verify(self, identifier: str, password: str) -> User:
        """
        Return the account matching identifier if password is correct.

        Raises:
            NotFound: No account has this username or email
            InvalidCredentials: Password does not match the stored hash
        """
        user = self.lookup(identifier)
        if user is None:
            raise NotFound("User not found")

        if not verify_password(password, user.password_hash):
            raise InvalidCredentials()

        return user

    def login(self, identifier: str, password: str) -> LoginResponse:
        """Verify credentials and issue an access token."""
        user = self.verify(identifier, password)

        token = create_access_token(
            user_id=str(user.id),
            username=user.username,
            role=user.role,
        )
        logger.info(f"User logged in: {user.username} (role: {user.role})")

        return LoginResponse(user=UserResponse.model_validate(user), token=token)
