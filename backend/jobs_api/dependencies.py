from dataclasses import dataclass

from fastapi import Request, Depends
from sqlalchemy.orm import Session

from jobs_api.database import get_db
from jobs_api.errors import UnauthenticatedError
from jobs_api.repositories import OwnedJobs
from jobs_api.services import CredentialService, get_credential_service

AUTH_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class CurrentUser:
    user_id: int
    name: str


def get_current_user(
    request: Request,
    credentials: CredentialService = Depends(get_credential_service),
) -> CurrentUser:
    """Resolve the bearer token into the calling user. Raises 401 otherwise.

    Use this as a dependency for protected routes. The token alone identifies
    the caller; the users table is not consulted.
    """
    header = request.headers.get(AUTH_HEADER)
    if not header or not header.startswith(BEARER_PREFIX):
        raise UnauthenticatedError("Authentication invalid")

    token = header[len(BEARER_PREFIX):].strip()
    if not token:
        raise UnauthenticatedError("Authentication invalid")

    claims = credentials.verify_token(token)
    if claims is None:
        raise UnauthenticatedError("Authentication invalid")

    request.state.user = CurrentUser(user_id=claims.user_id, name=claims.name)
    return request.state.user


def get_owned_jobs(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> OwnedJobs:
    return OwnedJobs(db, owner_id=user.user_id)
