"""
Local filesystem storage for uploaded files.

Files are grouped by category under the upload root and stored under a
generated name, never the client supplied one.
"""

import logging
import os
import uuid
from functools import lru_cache
from typing import Tuple
from app.core.config import settings

logger = logging.getLogger(__name__)


class LocalStorage:
    """Local filesystem storage backend"""

    def __init__(self, base_dir: str = "uploads"):
        self.base_dir = base_dir
        os.makedirs(self.base_dir, exist_ok=True)

    def save(self, data: bytes, category: str, original_filename: str) -> Tuple[str, str]:
        """
        Write bytes to <base_dir>/<category>/<uuid><ext>.

        Returns:
            (generated file name, file path)
        """
        ext = os.path.splitext(original_filename or "")[1].lower()
        file_name = f"{uuid.uuid4().hex}{ext}"

        directory = os.path.join(self.base_dir, category)
        os.makedirs(directory, exist_ok=True)
        file_path = os.path.join(directory, file_name)

        with open(file_path, "wb") as buffer:
            buffer.write(data)

        return file_name, file_path

    def delete_file(self, file_path: str) -> bool:
        """Delete file from local filesystem"""
        try:
            if os.path.exists(file_path):
                os.remove(file_path)
                return True
            return False
        except OSError as e:
            logger.error(f"Error deleting file {file_path}: {e}")
            return False

    def file_exists(self, file_path: str) -> bool:
        """Check if file exists on local filesystem"""
        return os.path.exists(file_path)


@lru_cache
def get_storage() -> LocalStorage:
    """Process-wide storage backend; also used as a FastAPI dependency."""
    return LocalStorage(settings.UPLOAD_DIR)
