import logging

from fastapi import APIRouter, Depends, Response, status

from jobs_api.dependencies import get_owned_jobs
from jobs_api.errors import NotFoundError
from jobs_api.repositories import OwnedJobs, parse_job_id
from jobs_api.schemas import (
    JobCreate,
    JobUpdate,
    JobResponse,
    JobListResponse,
    JobEnvelope,
    UpdatedJobEnvelope,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _not_found(job_id: str) -> NotFoundError:
    return NotFoundError(f"No job with id {job_id} was found")


@router.get("", response_model=JobListResponse)
def list_jobs(jobs: OwnedJobs = Depends(get_owned_jobs)):
    """List the caller's jobs, oldest first."""
    owned = jobs.list_all()
    return JobListResponse(
        jobs=[JobResponse.model_validate(job) for job in owned],
        num_of_jobs=len(owned),
    )


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: str, jobs: OwnedJobs = Depends(get_owned_jobs)):
    job = jobs.get(parse_job_id(job_id))
    if not job:
        raise _not_found(job_id)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.post("", response_model=JobEnvelope, status_code=status.HTTP_200_OK)
def create_job(job_data: JobCreate, jobs: OwnedJobs = Depends(get_owned_jobs)):
    """Create a job owned by the caller, whatever owner the body names."""
    job = jobs.create(job_data)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.patch("/{job_id}", response_model=UpdatedJobEnvelope)
def update_job(
    job_id: str,
    changes: JobUpdate,
    jobs: OwnedJobs = Depends(get_owned_jobs),
):
    updated_job = jobs.update(parse_job_id(job_id), changes)
    if not updated_job:
        raise _not_found(job_id)
    return UpdatedJobEnvelope(updated_job=JobResponse.model_validate(updated_job))


@router.delete("/{job_id}")
def delete_job(job_id: str, jobs: OwnedJobs = Depends(get_owned_jobs)):
    if not jobs.delete(parse_job_id(job_id)):
        raise _not_found(job_id)
    logger.info("Deleted job %s for user %d", job_id, jobs.owner_id)
    return Response(status_code=status.HTTP_200_OK)
