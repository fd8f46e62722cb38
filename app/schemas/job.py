from pydantic import BaseModel, Field, UUID4, field_validator, model_validator
from typing import Optional
from datetime import date, datetime

from app.models.job import DeletedState


class JobCreateRequest(BaseModel):
    """Schema for creating a job record"""
    legacy_id: Optional[int] = None
    alumni_id: int = Field(..., description="Legacy integer id of the alumni (not the alumni UUID)")
    company: str = Field(..., min_length=1, max_length=200)
    position: str = Field(..., min_length=1, max_length=200)
    industry: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1, max_length=200)
    salary_range: Optional[str] = None
    start_date: Optional[date] = Field(None, description="YYYY-MM-DD, defaults to today")
    end_date: Optional[date] = None
    status: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class JobUpdateRequest(BaseModel):
    """Partial update; the deleted state is only changed via soft-delete/restore"""
    legacy_id: Optional[int] = None
    alumni_id: Optional[int] = None
    company: Optional[str] = Field(None, min_length=1, max_length=200)
    position: Optional[str] = Field(None, min_length=1, max_length=200)
    industry: Optional[str] = Field(None, min_length=1, max_length=200)
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    salary_range: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = None

    @field_validator("alumni_id", "company", "position", "industry", "location", "start_date", "status")
    @classmethod
    def reject_null(cls, value):
        # Only runs for fields present in the body; these columns are NOT NULL
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class JobResponse(BaseModel):
    """
    Job record as sent over the wire.

    `deleted` serializes as the legacy "yes"/"no" strings.
    """
    id: UUID4
    legacy_id: Optional[int] = None
    alumni_id: int
    company: str
    position: str
    industry: str
    location: str
    salary_range: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    status: str
    deleted: DeletedState
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        use_enum_values = True


class JobCreateResponse(BaseModel):
    message: str
    id: UUID4


class JobYearCount(BaseModel):
    year: int
    count: int
