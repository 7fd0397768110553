from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache

from passlib.context import CryptContext
from jose import jwt, JWTError

from jobs_api.config import get_settings


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""

    user_id: int
    name: str


class CredentialService(ABC):
    """Password hashing and token handling used by the identity routes.

    Routes and dependencies only talk to this interface so the hashing and
    signing algorithms can change without touching them.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        ...

    @abstractmethod
    def verify(self, password: str, hashed_password: str) -> bool:
        ...

    @abstractmethod
    def issue_token(self, user_id: int, name: str) -> str:
        ...

    @abstractmethod
    def verify_token(self, token: str) -> TokenClaims | None:
        """Return the token's claims, or None if it is invalid or expired."""


class JWTCredentialService(CredentialService):
    """bcrypt password hashes and HMAC-signed JWT access tokens."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_hours: int = 24):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_hours = expire_hours
        self.pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        return self.pwd_context.verify(password, hashed_password)

    def issue_token(
        self, user_id: int, name: str, expires_delta: timedelta | None = None
    ) -> str:
        if expires_delta is None:
            expires_delta = timedelta(hours=self.expire_hours)
        to_encode = {
            "sub": str(user_id),
            "name": name,
            "exp": datetime.now(timezone.utc) + expires_delta,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> TokenClaims | None:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            return None

        try:
            user_id = int(payload.get("sub"))
        except (TypeError, ValueError):
            return None

        return TokenClaims(user_id=user_id, name=payload.get("name") or "")


@lru_cache
def get_credential_service() -> CredentialService:
    settings = get_settings()
    return JWTCredentialService(
        secret_key=settings.secret_key,
        algorithm=settings.jwt_algorithm,
        expire_hours=settings.jwt_expire_hours,
    )
