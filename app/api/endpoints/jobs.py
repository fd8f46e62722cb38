"""
API endpoints for alumni employment history ("pekerjaan").

Soft delete/restore flip the record's deleted state; hard delete removes the
row. The plain listing includes trashed jobs, /trash shows only trashed ones.
"""

import logging
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user, get_current_user
from app.core.exceptions import NotFound
from app.crud import job as job_crud
from app.crud.listing import MAX_PAGE_SIZE, build_meta, normalize_params
from app.schemas.common import ListingEnvelope, MessageResponse
from app.schemas.job import JobCreateRequest, JobCreateResponse, JobResponse, JobUpdateRequest, JobYearCount
from app.schemas.user import AuthContext

router = APIRouter(prefix="/pekerjaan", tags=["Pekerjaan"])
logger = logging.getLogger(__name__)


def _parse_uuid(value: str) -> Optional[UUID]:
    try:
        return UUID(value)
    except ValueError:
        return None


def _require_uuid(value: str) -> UUID:
    job_id = _parse_uuid(value)
    if job_id is None:
        raise NotFound("Job not found")
    return job_id


@router.get("", response_model=List[JobResponse])
def list_jobs(
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user)
):
    """List all jobs, newest first. Soft-deleted jobs are included."""
    return job_crud.get_all(db)


@router.get("/pag", response_model=ListingEnvelope[JobResponse])
def list_jobs_paginated(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    sort_by: Optional[str] = Query("start_date", alias="sortBy"),
    order: Optional[str] = Query("asc"),
    search: Optional[str] = Query(""),
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user)
):
    """
    Paginated, searchable, sortable job listing.

    Args:
        sortBy: company, position, industry, location, start_date or status
            (anything else falls back to start_date)
        order: asc or desc (anything else means asc)
        search: case-insensitive match on company, position, industry or location
    """
    params = normalize_params(job_crud.LISTING, search, sort_by, order, page, limit)
    items, total = job_crud.get_page(db, params)
    return {"data": items, "meta": build_meta(params, total)}


@router.get("/trash", response_model=List[JobResponse])
def list_trashed_jobs(
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user)
):
    """List soft-deleted jobs."""
    return job_crud.get_trashed(db)


@router.get("/tahun/{year}", response_model=JobYearCount)
def count_jobs_by_year(
    year: int = Path(..., ge=1, le=9998),
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(get_admin_user)
):
    """Number of jobs that started in the given year, trashed ones included."""
    return JobYearCount(year=year, count=job_crud.count_by_year(db, year))


@router.get("/alumni/{alumni_id}", response_model=List[JobResponse])
def list_jobs_by_alumni(
    alumni_id: int,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(get_admin_user)
):
    """Jobs for an alumni, by the alumni's legacy integer id."""
    return job_crud.get_by_alumni_id(db, alumni_id)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: str,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user)
):
    """
    Retrieve a job by its UUID, or by its legacy integer id when the path
    value is not a UUID.
    """
    job = None
    uuid_id = _parse_uuid(job_id)
    if uuid_id is not None:
        job = job_crud.get_by_id(db, uuid_id)
    elif job_id.isascii() and job_id.isdigit():
        job = job_crud.get_by_legacy_id(db, int(job_id))

    if not job:
        raise NotFound("Job not found")
    return job


@router.post("", status_code=201, response_model=JobCreateResponse)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(get_admin_user)
):
    new_job = job_crud.create(db, request)
    logger.info(f"Created job {new_job.id} for alumni {new_job.alumni_id} by {admin.username}")
    return JobCreateResponse(message="Job created successfully", id=new_job.id)


@router.put("/{job_id}", response_model=MessageResponse)
def update_job(
    job_id: str,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(get_admin_user)
):
    """Partial update; omitted fields keep their current values."""
    if not job_crud.update(db, _require_uuid(job_id), request):
        raise NotFound("Job not found")
    logger.info(f"Updated job {job_id} by {admin.username}")
    return MessageResponse(message="Job updated successfully")


@router.put("/{job_id}/soft-delete", response_model=MessageResponse)
def soft_delete_job(
    job_id: str,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user)
):
    """Move a job to the trash. Trashing an already trashed job is a no-op."""
    if not job_crud.soft_delete(db, _require_uuid(job_id)):
        raise NotFound("Job not found")
    logger.info(f"Soft deleted job {job_id} by {user.username}")
    return MessageResponse(message="Job moved to trash")


@router.put("/{job_id}/restore", response_model=MessageResponse)
def restore_job(
    job_id: str,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user)
):
    """Bring a job back from the trash. Restoring an active job is a no-op."""
    if not job_crud.restore(db, _require_uuid(job_id)):
        raise NotFound("Job not found")
    logger.info(f"Restored job {job_id} by {user.username}")
    return MessageResponse(message="Job restored")


def _hard_delete(db: Session, job_id: str, admin: AuthContext) -> MessageResponse:
    if not job_crud.delete(db, _require_uuid(job_id)):
        raise NotFound("Job not found")
    logger.info(f"Permanently deleted job {job_id} by {admin.username}")
    return MessageResponse(message="Job permanently deleted")


@router.delete("/hard/{job_id}", response_model=MessageResponse)
def hard_delete_job(
    job_id: str,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(get_admin_user)
):
    return _hard_delete(db, job_id, admin)


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: str,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(get_admin_user)
):
    """Hard delete, whatever the job's deleted state."""
    return _hard_delete(db, job_id, admin)
