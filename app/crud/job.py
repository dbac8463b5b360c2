"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer. Callers pass
already-validated schemas; missing rows raise NotFoundError.
"""

from typing import List
from sqlalchemy.orm import Session, contains_eager, joinedload
from app.core.errors import BadRequestError, NotFoundError
from app.models.company import Company
from app.models.job import Job
from app.schemas.job import JobCreateRequest, JobSearchFilter, JobUpdateRequest


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so they match literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id

    Raises:
        BadRequestError: If the company does not exist
    """
    if db.get(Company, job_data.company_handle) is None:
        raise BadRequestError(f"No company: {job_data.company_handle}")

    db_job = Job(
        title=job_data.title,
        salary=job_data.salary,
        equity=job_data.equity,
        company_handle=job_data.company_handle,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def find_all(db: Session, filters: JobSearchFilter) -> List[Job]:
    """
    Find jobs matching the search filters, ordered by title.

    - title: case-insensitive substring match
    - min_salary: salary at least this amount
    - has_equity: if True, only jobs with non-zero equity; if False, no
      equity filtering at all

    Args:
        db: Database session
        filters: Validated search filters

    Returns:
        List of Job instances with their company loaded
    """
    query = (
        db.query(Job)
        .join(Job.company)
        .options(contains_eager(Job.company))
    )

    if filters.title is not None:
        pattern = escape_like(filters.title)
        query = query.filter(Job.title.ilike(f"%{pattern}%", escape="\\"))

    if filters.min_salary is not None:
        query = query.filter(Job.salary >= filters.min_salary)

    if filters.has_equity:
        query = query.filter(Job.equity > 0)

    return query.order_by(Job.title, Job.id).all()


def get(db: Session, job_id: int) -> Job:
    """
    Retrieve a job by its ID, with its company.

    Raises:
        NotFoundError: If no job has this ID
    """
    job = (
        db.query(Job)
        .options(joinedload(Job.company))
        .filter(Job.id == job_id)
        .first()
    )

    if not job:
        raise NotFoundError(f"No job: {job_id}")

    return job


def update(db: Session, job_id: int, job_data: JobUpdateRequest) -> Job:
    """
    Partially update a job with the fields present in job_data.

    Args:
        db: Database session
        job_id: Job ID to update
        job_data: Validated partial update

    Returns:
        Updated Job instance

    Raises:
        BadRequestError: If job_data contains no fields
        NotFoundError: If no job has this ID
    """
    changes = job_data.model_dump(exclude_unset=True)
    if not changes:
        raise BadRequestError("No data")

    job = db.get(Job, job_id)
    if not job:
        raise NotFoundError(f"No job: {job_id}")

    for field, value in changes.items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no job has this ID
    """
    job = db.get(Job, job_id)
    if not job:
        raise NotFoundError(f"No job: {job_id}")

    db.delete(job)
    db.commit()
