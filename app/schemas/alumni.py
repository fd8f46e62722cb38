from pydantic import BaseModel, EmailStr, Field, UUID4, field_validator
from typing import List, Optional
from datetime import datetime


class AlumniCreateRequest(BaseModel):
    """Schema for creating a new alumni record"""
    student_number: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=200)
    department: str = Field(..., min_length=1, max_length=200)
    cohort_year: int = Field(..., ge=1900, le=2100)
    graduation_year: int = Field(..., ge=1900, le=2100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = None


class AlumniUpdateRequest(BaseModel):
    """Partial update; only fields present in the body are written"""
    student_number: Optional[str] = Field(None, min_length=1, max_length=50)
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    department: Optional[str] = Field(None, min_length=1, max_length=200)
    cohort_year: Optional[int] = Field(None, ge=1900, le=2100)
    graduation_year: Optional[int] = Field(None, ge=1900, le=2100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = None

    @field_validator("student_number", "name", "department", "cohort_year", "graduation_year", "email")
    @classmethod
    def reject_null(cls, value):
        # Only runs for fields present in the body; these columns are NOT NULL
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class AlumniResponse(BaseModel):
    id: UUID4
    student_number: str
    name: str
    department: str
    cohort_year: int
    graduation_year: int
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class AlumniEnvelope(BaseModel):
    success: bool = True
    data: AlumniResponse


class AlumniListEnvelope(BaseModel):
    success: bool = True
    data: List[AlumniResponse]


class SuccessResponse(BaseModel):
    success: bool = True
