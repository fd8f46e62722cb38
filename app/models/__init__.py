"""
Database models package.
"""

from app.models.alumni import Alumni
from app.models.job import Job, DeletedState
from app.models.user import User, UserRole
from app.models.file import File

__all__ = ["Alumni", "Job", "DeletedState", "User", "UserRole", "File"]
