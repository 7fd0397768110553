from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from jobs_api.models.job import COMPANY_MAX_LENGTH, ROLE_MAX_LENGTH, JobStatus


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class JobCreate(BaseModel):
    """A complete job document; unknown keys such as createdBy are dropped."""

    role: str = Field(min_length=1, max_length=ROLE_MAX_LENGTH)
    company: str = Field(min_length=1, max_length=COMPANY_MAX_LENGTH)
    status: JobStatus = JobStatus.PENDING


class JobUpdate(BaseModel):
    """A partial job document, validated in full once merged onto the stored job."""

    role: str | None = None
    company: str | None = None
    status: JobStatus | None = None


class JobResponse(CamelModel):
    id: int
    role: str
    company: str
    status: JobStatus
    created_by: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class JobListResponse(CamelModel):
    jobs: list[JobResponse]
    num_of_jobs: int


class JobEnvelope(CamelModel):
    job: JobResponse


class UpdatedJobEnvelope(CamelModel):
    updated_job: JobResponse
