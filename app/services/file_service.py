"""
File upload service: validation, disk persistence, metadata and ownership.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional
from uuid import UUID
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import Forbidden, InvalidFile, NotFound, ValidationError, classify_storage_error
from app.core.storage import LocalStorage
from app.crud import file as file_crud
from app.crud import user as user_crud
from app.models.file import File
from app.schemas.user import AuthContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryRule:
    content_types: FrozenSet[str]
    max_bytes: int
    label: str


CATEGORY_RULES = {
    "foto": CategoryRule(
        content_types=frozenset({"image/jpeg", "image/png"}),
        max_bytes=settings.FOTO_MAX_BYTES,
        label="jpeg/jpg/png",
    ),
    "sertifikat": CategoryRule(
        content_types=frozenset({"application/pdf"}),
        max_bytes=settings.SERTIFIKAT_MAX_BYTES,
        label="pdf",
    ),
}


def validate_upload(category: str, content_type: Optional[str], size: int) -> CategoryRule:
    """
    Check declared content type and size against the category's rule.

    Raises:
        InvalidFile: Unknown category, disallowed type, or file too large
    """
    rule = CATEGORY_RULES.get(category)
    if rule is None:
        raise InvalidFile(f"Unknown file category: {category}")

    if size > rule.max_bytes:
        raise InvalidFile(f"Max {rule.max_bytes // (1024 * 1024)}MB allowed")

    if content_type not in rule.content_types:
        raise InvalidFile(f"Only {rule.label} allowed")

    return rule


def read_limit(category: str) -> int:
    """
    Most bytes worth reading from an upload in this category: one past the
    cap, so an oversized file still fails validate_upload.

    Raises:
        InvalidFile: Unknown category
    """
    rule = CATEGORY_RULES.get(category)
    if rule is None:
        raise InvalidFile(f"Unknown file category: {category}")
    return rule.max_bytes + 1


def _parse_user_id(value: str) -> UUID:
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid user id")


class FileService:
    def __init__(self, db: Session, storage: LocalStorage):
        self.db = db
        self.storage = storage

    @staticmethod
    def _check_owner(actor: AuthContext, file: File) -> None:
        if not actor.is_admin and str(file.user_id) != actor.user_id:
            raise Forbidden("Not allowed to access this file")

    def upload(
        self,
        actor: AuthContext,
        category: str,
        original_name: str,
        content_type: Optional[str],
        data: bytes,
        target_user_id: Optional[str] = None,
    ) -> File:
        """
        Validate, write to disk, then record metadata.

        Admins may upload on behalf of target_user_id; other callers may only
        upload for themselves. If the metadata insert fails the written file is
        removed again (best effort).
        """
        if target_user_id and not actor.is_admin and target_user_id != actor.user_id:
            raise Forbidden("Users may not upload files for someone else")

        validate_upload(category, content_type, len(data))

        if target_user_id and actor.is_admin:
            owner_id = _parse_user_id(target_user_id)
            if user_crud.get_by_id(self.db, owner_id) is None:
                raise NotFound("Target user not found")
        else:
            owner_id = _parse_user_id(actor.user_id)

        file_name, file_path = self.storage.save(data, category, original_name)
        logger.info(f"Saved {category} upload to {file_path}")

        record = File(
            user_id=owner_id,
            file_name=file_name,
            original_name=original_name,
            file_path=file_path,
            file_size=len(data),
            file_type=content_type,
            category=category,
        )

        try:
            return file_crud.create(self.db, record)
        except SQLAlchemyError as e:
            self.db.rollback()
            if not self.storage.delete_file(file_path):
                logger.error(f"Failed to clean up {file_path} after metadata error")
            logger.error(f"Failed to save file metadata: {e}")
            raise classify_storage_error(e)

    def list_files(self, actor: AuthContext) -> List[File]:
        """Admins see every file, other callers only their own."""
        if actor.is_admin:
            return file_crud.get_all(self.db)
        return file_crud.get_by_user_id(self.db, _parse_user_id(actor.user_id))

    def get_file(self, actor: AuthContext, file_id: UUID) -> File:
        file = file_crud.get_by_id(self.db, file_id)
        if file is None:
            raise NotFound("File not found")
        self._check_owner(actor, file)
        return file

    def delete_file(self, actor: AuthContext, file_id: UUID) -> None:
        """Remove metadata, then the bytes on disk."""
        file = self.get_file(actor, file_id)
        file_path = file.file_path

        file_crud.delete(self.db, file.id)
        if not self.storage.delete_file(file_path):
            logger.warning(f"File {file_path} was already missing from disk")
        logger.info(f"Deleted file {file_id} ({file_path})")
