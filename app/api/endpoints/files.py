"""
API endpoints for photo and certificate uploads.

Admins can see and manage every file; other callers only their own.
"""

import logging
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, File as FileParam, Query, UploadFile
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_user
from app.core.storage import LocalStorage, get_storage
from app.schemas.common import MessageResponse
from app.schemas.file import FileListResponse, FileRecordResponse, FileUploadResponse
from app.schemas.user import AuthContext
from app.services.file_service import FileService, read_limit

router = APIRouter(prefix="/file", tags=["File"])
logger = logging.getLogger(__name__)


def get_file_service(
    db: Session = Depends(get_db),
    storage: LocalStorage = Depends(get_storage)
) -> FileService:
    return FileService(db, storage)


@router.post("/{category}", status_code=201, response_model=FileUploadResponse)
async def upload_file(
    category: str,
    file: UploadFile = FileParam(...),
    target_id: Optional[str] = Query(None, description="Owner user id (admin only)"),
    user: AuthContext = Depends(get_current_user),
    service: FileService = Depends(get_file_service)
):
    """
    Upload a photo (category `foto`: jpeg/png, max 1MB) or a certificate
    (category `sertifikat`: pdf, max 2MB).

    At most one byte past the category cap is read from the upload. The file
    is stored under a generated name; the original name is kept in
    the metadata.
    """
    data = await file.read(read_limit(category))
    record = service.upload(
        actor=user,
        category=category,
        original_name=file.filename or "",
        content_type=file.content_type,
        data=data,
        target_user_id=target_id,
    )
    return {"message": "File uploaded successfully", "data": record}


@router.get("", response_model=FileListResponse)
def list_files(
    user: AuthContext = Depends(get_current_user),
    service: FileService = Depends(get_file_service)
):
    files = service.list_files(user)
    return {"count": len(files), "data": files}


@router.get("/{file_id}", response_model=FileRecordResponse)
def get_file(
    file_id: UUID,
    user: AuthContext = Depends(get_current_user),
    service: FileService = Depends(get_file_service)
):
    return service.get_file(user, file_id)


@router.delete("/{file_id}", response_model=MessageResponse)
def delete_file(
    file_id: UUID,
    user: AuthContext = Depends(get_current_user),
    service: FileService = Depends(get_file_service)
):
    service.delete_file(user, file_id)
    return MessageResponse(message="File deleted successfully")
