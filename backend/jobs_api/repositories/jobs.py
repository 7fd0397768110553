"""
Owner-scoped access to the jobs table.

Every query built here filters on the owning user. The owner id is a
required constructor argument, so there is no way to reach another user's
rows through this class.
"""

import logging

from sqlalchemy.orm import Query, Session

from jobs_api.errors import CastError
from jobs_api.models import Job
from jobs_api.schemas import JobCreate, JobUpdate

logger = logging.getLogger(__name__)


# Largest value a signed 32-bit INTEGER column holds
MAX_JOB_ID = 2**31 - 1


def parse_job_id(raw_id: str) -> int:
    """Convert a path segment to a job id, raising CastError if it isn't one.

    Only plain ASCII digits without a leading zero are accepted, so each id
    has exactly one spelling.
    """
    if not raw_id or not raw_id.isascii() or not raw_id.isdigit() or raw_id.startswith("0"):
        raise CastError(raw_id)
    job_id = int(raw_id)
    if job_id > MAX_JOB_ID:
        raise CastError(raw_id)
    return job_id


class OwnedJobs:
    def __init__(self, db: Session, owner_id: int):
        if owner_id is None:
            raise ValueError("owner_id is required")
        self.db = db
        self.owner_id = owner_id

    def _query(self) -> Query:
        return self.db.query(Job).filter(Job.created_by == self.owner_id)

    def list_all(self) -> list[Job]:
        return self._query().order_by(Job.created_at.asc(), Job.id.asc()).all()

    def get(self, job_id: int) -> Job | None:
        return self._query().filter(Job.id == job_id).first()

    def create(self, data: JobCreate) -> Job:
        job = Job(
            role=data.role,
            company=data.company,
            status=data.status.value,
            created_by=self.owner_id,
        )
        self.db.add(job)
        self.db.commit()
        self.db.refresh(job)
        logger.info("Created job %d for user %d", job.id, self.owner_id)
        return job

    def update(self, job_id: int, changes: JobUpdate) -> Job | None:
        """Merge changes onto the stored job and save it.

        The row is locked for the rest of the transaction and the merged
        document is validated in full, so a patch can't leave the job in a
        state that create would reject. Raises pydantic.ValidationError.
        """
        job = self._query().filter(Job.id == job_id).with_for_update().first()
        if job is None:
            return None

        merged = {"role": job.role, "company": job.company, "status": job.status}
        merged.update(changes.model_dump(exclude_unset=True))
        validated = JobCreate.model_validate(merged)

        job.role = validated.role
        job.company = validated.company
        job.status = validated.status.value
        self.db.commit()
        self.db.refresh(job)
        return job

    def delete(self, job_id: int) -> bool:
        deleted = (
            self._query()
            .filter(Job.id == job_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0
