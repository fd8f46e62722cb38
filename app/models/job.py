import enum
import uuid
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Enum, func
from sqlalchemy.dialects.postgresql import UUID
from app.core.database import Base


class DeletedState(str, enum.Enum):
    """
    Soft delete state of a job record.

    The values are the legacy "isdeleted" wire strings and are what gets stored.

    ACTIVE --soft-delete--> TRASHED --restore--> ACTIVE
    Either state --hard-delete--> row removed
    """
    ACTIVE = "no"
    TRASHED = "yes"


class Job(Base):
    """
    Employment history entry ("pekerjaan") for an alumni.

    alumni_id is the alumni's legacy integer id from the previous schema. It
    does NOT refer to Alumni.id (a UUID) and is not a database foreign key.
    """
    __tablename__ = "pekerjaan"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    legacy_id = Column(Integer, nullable=True, index=True)
    alumni_id = Column(Integer, nullable=False, index=True)

    company = Column(String, nullable=False, index=True)
    position = Column(String, nullable=False)
    industry = Column(String, nullable=False)
    location = Column(String, nullable=False)
    salary_range = Column(String, nullable=True)

    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=True)
    status = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    deleted = Column(
        Enum(DeletedState, native_enum=False, length=3, values_callable=lambda e: [m.value for m in e]),
        default=DeletedState.ACTIVE,
        nullable=False,
        index=True
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Job(id={self.id}, company='{self.company}', deleted={self.deleted.value})>"
