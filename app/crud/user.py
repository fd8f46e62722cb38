"""
CRUD operations for the User model.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.security import get_password_hash
from app.models.user import User, UserRole


def get_by_username_or_email(db: Session, identifier: str) -> Optional[User]:
    """Find exactly one account whose username or email equals identifier."""
    return db.query(User).filter(or_(User.username == identifier, User.email == identifier)).first()


def create(db: Session, username: str, email: str, password: str, role: UserRole = UserRole.USER) -> User:
    user = User(
        username=username,
        email=email,
        password_hash=get_password_hash(password),
        role=role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def get_by_id(db: Session, user_id: UUID) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()
