from jobs_api.repositories.jobs import OwnedJobs, parse_job_id

__all__ = ["OwnedJobs", "parse_job_id"]
