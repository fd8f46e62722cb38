from pydantic import BaseModel, UUID4
from typing import List, Optional
from datetime import datetime


class FileRecordResponse(BaseModel):
    """Uploaded file metadata"""
    id: UUID4
    user_id: UUID4
    file_name: str
    original_name: str
    file_path: str
    file_size: int
    file_type: str
    category: str
    uploaded_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FileUploadResponse(BaseModel):
    message: str
    data: FileRecordResponse


class FileListResponse(BaseModel):
    count: int
    data: List[FileRecordResponse]
