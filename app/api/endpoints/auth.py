"""
Authentication endpoint.

- POST /login: Authenticate with username or email and receive a JWT
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import InvalidCredentials, NotFound
from app.crud import user as user_crud
from app.schemas.user import LoginRequest, LoginResponse
from app.services.auth_service import CredentialVerifier

router = APIRouter(tags=["Auth"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and return a JWT access token.

    Unknown accounts and wrong passwords get the same 401 so the response
    does not reveal which usernames exist.
    """
    verifier = CredentialVerifier(lambda identifier: user_crud.get_by_username_or_email(db, identifier))

    try:
        return verifier.login(request.username, request.password)
    except (NotFound, InvalidCredentials):
        logger.warning(f"Failed login attempt for '{request.username}'")
        raise InvalidCredentials()
