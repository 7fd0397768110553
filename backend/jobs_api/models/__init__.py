from jobs_api.models.user import User
from jobs_api.models.job import Job, JobStatus

__all__ = ["User", "Job", "JobStatus"]
