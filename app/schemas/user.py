"""
Pydantic schemas for login and the authenticated caller.
"""

from pydantic import BaseModel, Field, UUID4
from typing import Optional
from datetime import datetime


class LoginRequest(BaseModel):
    """Username or email plus password."""
    username: str = Field(..., min_length=1, description="Username or email")
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """User profile response (no password hash)."""
    id: UUID4
    username: str
    email: str
    role: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    user: UserResponse
    token: str


class AuthContext(BaseModel):
    """Caller identity extracted from a validated access token."""
    user_id: str
    username: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
