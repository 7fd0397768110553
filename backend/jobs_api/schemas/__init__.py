from jobs_api.schemas.user import UserCreate, UserSummary
from jobs_api.schemas.auth import LoginRequest, AuthResponse
from jobs_api.schemas.job import (
    JobCreate,
    JobUpdate,
    JobResponse,
    JobListResponse,
    JobEnvelope,
    UpdatedJobEnvelope,
)

__all__ = [
    "UserCreate",
    "UserSummary",
    "LoginRequest",
    "AuthResponse",
    "JobCreate",
    "JobUpdate",
    "JobResponse",
    "JobListResponse",
    "JobEnvelope",
    "UpdatedJobEnvelope",
]
