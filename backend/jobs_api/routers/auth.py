import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobs_api.database import get_db
from jobs_api.errors import BadRequestError, UnauthenticatedError
from jobs_api.models import User
from jobs_api.schemas import UserCreate, UserSummary, LoginRequest, AuthResponse
from jobs_api.services import CredentialService, get_credential_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credential_service),
):
    """Register a new user and return an access token.

    Email uniqueness is left to the unique index; a duplicate surfaces as an
    IntegrityError and is reported by the error handlers.
    """
    user = User(
        name=user_data.name,
        email=user_data.email,
        password_hash=credentials.hash(user_data.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %d", user.id)

    token = credentials.issue_token(user.id, user.name)
    return AuthResponse(user=UserSummary.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credential_service),
):
    """Exchange email and password for an access token."""
    if not login_data.email or not login_data.password:
        raise BadRequestError("Please provide email and password")

    user = db.query(User).filter(User.email == login_data.email).first()
    if not user or not credentials.verify(login_data.password, user.password_hash):
        raise UnauthenticatedError("Invalid Credentials")

    token = credentials.issue_token(user.id, user.name)
    return AuthResponse(user=UserSummary.model_validate(user), token=token)
