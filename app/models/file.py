"""
Uploaded file metadata.

The bytes live on local disk under UPLOAD_DIR/<category>/<file_name>; this
table records where, what and whose.
"""

import uuid
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, func
from sqlalchemy.dialects.postgresql import UUID
from app.core.database import Base


class File(Base):
    __tablename__ = "files"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)

    file_name = Column(String, nullable=False, unique=True)  # Generated storage name
    original_name = Column(String, nullable=False)
    file_path = Column(String, nullable=False)
    file_size = Column(Integer, nullable=False)
    file_type = Column(String, nullable=False)  # MIME type
    category = Column(String, nullable=False, index=True)  # "foto" or "sertifikat"

    uploaded_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<File(id={self.id}, category='{self.category}', file_name='{self.file_name}')>"
