"""
CRUD operations for uploaded file metadata.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.models.file import File


def create(db: Session, file: File) -> File:
    db.add(file)
    db.commit()
    db.refresh(file)
    return file


def get_by_id(db: Session, file_id: UUID) -> Optional[File]:
    return db.query(File).filter(File.id == file_id).first()


def get_all(db: Session) -> List[File]:
    return db.query(File).order_by(File.uploaded_at.desc()).all()


def get_by_user_id(db: Session, user_id: UUID) -> List[File]:
    return db.query(File).filter(File.user_id == user_id).order_by(File.uploaded_at.desc()).all()


def delete(db: Session, file_id: UUID) -> bool:
    deleted = db.query(File).filter(File.id == file_id).delete(synchronize_session=False)
    db.commit()
    return deleted > 0
