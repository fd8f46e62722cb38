"""
API endpoints for alumni records.

Reads are open to any authenticated caller; writes require the admin role.
"""

import logging
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user, get_current_user
from app.core.exceptions import NotFound
from app.crud import alumni as alumni_crud
from app.crud.listing import MAX_PAGE_SIZE, build_meta, normalize_params
from app.schemas.alumni import (
    AlumniCreateRequest,
    AlumniEnvelope,
    AlumniListEnvelope,
    AlumniResponse,
    AlumniUpdateRequest,
    SuccessResponse,
)
from app.schemas.common import ListingEnvelope
from app.schemas.user import AuthContext

router = APIRouter(prefix="/alumni", tags=["Alumni"])
logger = logging.getLogger(__name__)


@router.get("", response_model=AlumniListEnvelope)
def list_alumni(
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user)
):
    """List every alumni record."""
    return {"success": True, "data": alumni_crud.get_all(db)}


@router.get("/pag", response_model=ListingEnvelope[AlumniResponse])
def list_alumni_paginated(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    sort_by: Optional[str] = Query("name", alias="sortBy"),
    order: Optional[str] = Query("asc"),
    search: Optional[str] = Query(""),
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user)
):
    """
    Paginated, searchable, sortable alumni listing.

    Args:
        sortBy: name, student_number, cohort_year, graduation_year or email
            (anything else falls back to name)
        order: asc or desc (anything else means asc)
        search: case-insensitive match on name, student number, department or email
    """
    params = normalize_params(alumni_crud.LISTING, search, sort_by, order, page, limit)
    items, total = alumni_crud.get_page(db, params)
    return {"data": items, "meta": build_meta(params, total)}


@router.get("/{alumni_id}", response_model=AlumniEnvelope)
def get_alumni(
    alumni_id: UUID,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user)
):
    alumni = alumni_crud.get_by_id(db, alumni_id)
    if not alumni:
        raise NotFound("Alumni not found")
    return {"success": True, "data": alumni}


@router.post("", status_code=201, response_model=AlumniEnvelope)
def create_alumni(
    request: AlumniCreateRequest,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(get_admin_user)
):
    alumni = alumni_crud.create(db, request)
    logger.info(f"Created alumni {alumni.id} ({alumni.student_number}) by {admin.username}")
    return {"success": True, "data": alumni}


@router.put("/{alumni_id}", response_model=SuccessResponse)
def update_alumni(
    alumni_id: UUID,
    request: AlumniUpdateRequest,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(get_admin_user)
):
    """Partial update; omitted fields keep their current values."""
    if not alumni_crud.update(db, alumni_id, request):
        raise NotFound("Alumni not found")
    logger.info(f"Updated alumni {alumni_id} by {admin.username}")
    return SuccessResponse()


@router.delete("/{alumni_id}", response_model=SuccessResponse)
def delete_alumni(
    alumni_id: UUID,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(get_admin_user)
):
    """Hard delete. Job records pointing at this alumni are not touched."""
    if not alumni_crud.delete(db, alumni_id):
        raise NotFound("Alumni not found")
    logger.info(f"Deleted alumni {alumni_id} by {admin.username}")
    return SuccessResponse()
