"""
CRUD operations for the Job ("pekerjaan") model.

Implements the Repository pattern to encapsulate all database operations
for job records, including the soft delete state transitions.
"""

from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.exceptions import ValidationError
from app.crud.listing import ListingConfig, ListingParams, fetch_page
from app.models.job import Job, DeletedState
from app.schemas.job import JobCreateRequest, JobUpdateRequest

LISTING = ListingConfig(
    sort_columns={
        "company": Job.company,
        "position": Job.position,
        "industry": Job.industry,
        "location": Job.location,
        "start_date": Job.start_date,
        "status": Job.status,
    },
    default_sort="start_date",
    search_columns=(Job.company, Job.position, Job.industry, Job.location),
)


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job record.

    New records always start ACTIVE; start_date defaults to today.
    """
    values = job_data.model_dump()
    if values["start_date"] is None:
        values["start_date"] = date.today()

    db_job = Job(**values, deleted=DeletedState.ACTIVE)
    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: UUID) -> Optional[Job]:
    return db.query(Job).filter(Job.id == job_id).first()


def get_by_legacy_id(db: Session, legacy_id: int) -> Optional[Job]:
    return db.query(Job).filter(Job.legacy_id == legacy_id).first()


def get_all(db: Session) -> List[Job]:
    """All jobs, newest first. Trashed jobs are included."""
    return db.query(Job).order_by(Job.created_at.desc(), Job.id.desc()).all()


def get_page(db: Session, params: ListingParams) -> Tuple[List[Job], int]:
    return fetch_page(db, Job, LISTING, params)


def get_by_alumni_id(db: Session, alumni_id: int) -> List[Job]:
    return db.query(Job).filter(Job.alumni_id == alumni_id).order_by(Job.start_date.asc()).all()


def get_trashed(db: Session) -> List[Job]:
    return db.query(Job).filter(Job.deleted == DeletedState.TRASHED).order_by(Job.updated_at.desc()).all()


def update(db: Session, job_id: UUID, job_data: JobUpdateRequest) -> Optional[Job]:
    """
    Apply a partial update.

    The dates are checked against the merged record, so a new end_date
    alone may not fall before the stored start_date.

    Returns:
        Updated Job instance if found, None otherwise

    Raises:
        ValidationError: If the merged end_date is before the start_date
    """
    job = get_by_id(db, job_id)
    if not job:
        return None

    values = job_data.model_dump(exclude_unset=True)
    start_date = values.get("start_date", job.start_date)
    end_date = values.get("end_date", job.end_date)
    if start_date and end_date and end_date < start_date:
        raise ValidationError("end_date cannot be before start_date")

    for field, value in values.items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)
    return job


def set_deleted_state(db: Session, job_id: UUID, state: DeletedState) -> bool:
    """
    Move a job to the given deleted state with one conditional UPDATE.

    The current state is not checked, so repeating a transition is a no-op
    success.

    Returns:
        True if a row matched the id, False otherwise
    """
    matched = (
        db.query(Job)
        .filter(Job.id == job_id)
        .update({Job.deleted: state, Job.updated_at: func.now()}, synchronize_session=False)
    )
    db.commit()
    return matched > 0


def soft_delete(db: Session, job_id: UUID) -> bool:
    return set_deleted_state(db, job_id, DeletedState.TRASHED)


def restore(db: Session, job_id: UUID) -> bool:
    return set_deleted_state(db, job_id, DeletedState.ACTIVE)


def delete(db: Session, job_id: UUID) -> bool:
    """
    Hard delete a job in either state.

    Returns:
        True if deleted, False if not found
    """
    deleted = db.query(Job).filter(Job.id == job_id).delete(synchronize_session=False)
    db.commit()
    return deleted > 0


def count_by_year(db: Session, year: int) -> int:
    """
    Count jobs whose start_date falls in [Jan 1 year, Jan 1 year+1).

    Trashed jobs are counted too.
    """
    start = date(year, 1, 1)
    end = date(year + 1, 1, 1)
    return db.query(Job).filter(Job.start_date >= start, Job.start_date < end).count()
