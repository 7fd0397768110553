from pydantic import BaseModel, EmailStr

from jobs_api.schemas.user import UserSummary


class LoginRequest(BaseModel):
    # Presence is checked by the login route so a missing value reads as a bad request.
    # EmailStr normalizes the address the same way registration stored it.
    email: EmailStr | None = None
    password: str | None = None


class AuthResponse(BaseModel):
    user: UserSummary
    token: str
