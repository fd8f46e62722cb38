"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from app.crud import alumni, job, user, file, listing

__all__ = ["alumni", "job", "user", "file", "listing"]
