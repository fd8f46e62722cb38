"""
Alumni database model.

A graduate record with academic and contact attributes.
"""

import uuid
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from app.core.database import Base


class Alumni(Base):
    """
    Alumni record.

    student_number and email are caller supplied and intentionally not
    unique at this layer.
    """
    __tablename__ = "alumni"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    student_number = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False, index=True)
    department = Column(String, nullable=False)
    cohort_year = Column(Integer, nullable=False)
    graduation_year = Column(Integer, nullable=False)

    # Contact
    email = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Alumni(id={self.id}, student_number='{self.student_number}', name='{self.name}')>"
