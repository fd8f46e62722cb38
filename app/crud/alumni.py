"""
CRUD operations for the Alumni model.
"""

from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.orm import Session

from app.crud.listing import ListingConfig, ListingParams, fetch_page
from app.models.alumni import Alumni
from app.schemas.alumni import AlumniCreateRequest, AlumniUpdateRequest

LISTING = ListingConfig(
    sort_columns={
        "name": Alumni.name,
        "student_number": Alumni.student_number,
        "cohort_year": Alumni.cohort_year,
        "graduation_year": Alumni.graduation_year,
        "email": Alumni.email,
    },
    default_sort="name",
    search_columns=(Alumni.name, Alumni.student_number, Alumni.department, Alumni.email),
)


def create(db: Session, data: AlumniCreateRequest) -> Alumni:
    alumni = Alumni(**data.model_dump())
    db.add(alumni)
    db.commit()
    db.refresh(alumni)
    return alumni


def get_by_id(db: Session, alumni_id: UUID) -> Optional[Alumni]:
    return db.query(Alumni).filter(Alumni.id == alumni_id).first()


def get_all(db: Session) -> List[Alumni]:
    return db.query(Alumni).order_by(Alumni.created_at.asc(), Alumni.id.asc()).all()


def get_page(db: Session, params: ListingParams) -> Tuple[List[Alumni], int]:
    return fetch_page(db, Alumni, LISTING, params)


def update(db: Session, alumni_id: UUID, data: AlumniUpdateRequest) -> Optional[Alumni]:
    """
    Apply a partial update.

    Returns:
        Updated Alumni instance if found, None otherwise
    """
    alumni = get_by_id(db, alumni_id)
    if not alumni:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(alumni, field, value)

    db.commit()
    db.refresh(alumni)
    return alumni


def delete(db: Session, alumni_id: UUID) -> bool:
    """
    Hard delete an alumni. Jobs referencing it are left untouched.

    Returns:
        True if deleted, False if not found
    """
    deleted = db.query(Alumni).filter(Alumni.id == alumni_id).delete(synchronize_session=False)
    db.commit()
    return deleted > 0
