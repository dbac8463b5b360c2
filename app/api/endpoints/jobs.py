"""
Job endpoints.

- POST   /jobs       create a job (admin)
- GET    /jobs       list jobs, optionally filtered by title, minSalary, hasEquity
- GET    /jobs/{id}  a single job with its company
- PATCH  /jobs/{id}  partially update a job (admin)
- DELETE /jobs/{id}  delete a job (admin)

Endpoints never catch errors: validation failures, missing jobs and anything
raised by the CRUD layer go straight to the app's error handlers.
"""

import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, Request
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.core.validation import validate_payload
from app.crud import job as job_crud
from app.models.user import User
from app.schemas.job import (
    JobCreateRequest,
    JobDeletedResponse,
    JobDetailEnvelope,
    JobEnvelope,
    JobListEnvelope,
    JobSearchFilter,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


def to_number(value: str) -> float:
    """
    Parse a query-string number; anything unparseable becomes NaN.

    A blank value counts as 0.
    """
    if value.strip() == "":
        return 0
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return float("nan")


def coerce_search_params(params) -> dict:
    """
    Convert raw query-string values into the types JobSearchFilter expects.

    minSalary becomes a number (NaN if unparseable, left for validation to
    reject). hasEquity is True only for the exact string "true"; every
    search therefore carries an explicit hasEquity.
    """
    query = dict(params)
    if "minSalary" in query:
        query["minSalary"] = to_number(query["minSalary"])
    query["hasEquity"] = query.get("hasEquity") == "true"
    return query


@router.post("", status_code=201, response_model=JobEnvelope)
def create_job(
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Create a new job.

    Body: { title, salary, equity, companyHandle }
    Returns: { job: { id, title, salary, equity, companyHandle } }
    """
    job_data = validate_payload(JobCreateRequest, payload)

    job = job_crud.create(db, job_data)

    logger.info(f"Admin {admin_user.username} created job {job.id}: {job.title}")
    return {"job": job}


@router.get("", response_model=JobListEnvelope)
def list_jobs(request: Request, db: Session = Depends(get_db)):
    """
    List jobs, optionally filtered.

    Query:
        title: case-insensitive substring of the job title
        minSalary: minimum salary
        hasEquity: "true" to only list jobs with non-zero equity

    Returns: { jobs: [ { id, title, salary, equity, companyHandle, companyName }, ... ] }
    """
    filters = validate_payload(JobSearchFilter, coerce_search_params(request.query_params))

    jobs = job_crud.find_all(db, filters)
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID.

    Returns: { job: { id, title, salary, equity, company } }
    """
    job = job_crud.get(db, job_id)
    return {"job": job}


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Partially update a job.

    Body: any of { title, salary, equity }. The company cannot be changed.
    Returns: { job: { id, title, salary, equity, companyHandle } }
    """
    job_data = validate_payload(JobUpdateRequest, payload)

    job = job_crud.update(db, job_id, job_data)

    logger.info(f"Admin {admin_user.username} updated job {job_id}")
    return {"job": job}


@router.delete("/{job_id}", response_model=JobDeletedResponse)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Delete a job by ID.

    Returns: { deleted: id }
    """
    job_crud.remove(db, job_id)

    logger.info(f"Admin {admin_user.username} deleted job {job_id}")
    return {"deleted": job_id}
