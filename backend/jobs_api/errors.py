"""Error taxonomy and the normalizer that maps any failure to an HTTP outcome.

Handlers never build error responses themselves. They raise, and the
exception handlers registered in ``jobs_api.main`` call ``normalize_error``
to get the status code and message sent back as ``{"msg": ...}``.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from fastapi import status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

GENERIC_MESSAGE = "Something went wrong, please try again later"


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not_found"
    DUPLICATE_KEY = "duplicate_key"
    VALIDATION_FAILED = "validation_failed"
    CAST_FAILED = "cast_failed"
    HTTP = "http"
    INTERNAL = "internal"


class APIError(Exception):
    """Base class for errors raised deliberately by application code."""

    kind = ErrorKind.INTERNAL
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, fields: list[str] | None = None):
        self.message = message
        self.fields = fields or []
        super().__init__(message)


class BadRequestError(APIError):
    kind = ErrorKind.BAD_REQUEST
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthenticatedError(APIError):
    kind = ErrorKind.UNAUTHENTICATED
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(APIError):
    kind = ErrorKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND


class CastError(Exception):
    """A path value could not be converted to the column type it targets."""

    def __init__(self, value: str, path: str = "id"):
        self.value = value
        self.path = path
        super().__init__(f"Cast to integer failed for value {value!r} at path {path!r}")


@dataclass(frozen=True)
class NormalizedError:
    status_code: int
    kind: ErrorKind
    message: str
    fields: list[str] = field(default_factory=list)


# Unique-constraint wording per driver:
#   sqlite:     UNIQUE constraint failed: users.email
#   mysql:      Duplicate entry 'a@b.c' for key 'users.ix_users_email'
#   postgresql: duplicate key value violates unique constraint ... Key (email)=(a@b.c)
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: (?P<columns>[\w.]+(?:, [\w.]+)*)")
_MYSQL_UNIQUE = re.compile(r"Duplicate entry .* for key '(?:\w+\.)?(?P<key>\w+)'")
_POSTGRES_UNIQUE = re.compile(r"Key \((?P<columns>[^)]+)\)=")
_INDEX_PREFIX = re.compile(r"^(?:ix|uq)_[a-z]+_")


def duplicate_key_fields(exc: IntegrityError) -> list[str] | None:
    """Return the columns of a violated unique constraint, or None."""
    message = str(exc.orig)

    match = _SQLITE_UNIQUE.search(message)
    if match:
        return [column.split(".")[-1] for column in match.group("columns").split(", ")]

    match = _MYSQL_UNIQUE.search(message)
    if match:
        return [_INDEX_PREFIX.sub("", match.group("key"))]

    if "duplicate key" in message:
        match = _POSTGRES_UNIQUE.search(message)
        if match:
            return [column.strip() for column in match.group("columns").split(",")]

    return None


def _describe_validation_error(error: dict) -> tuple[str, str]:
    """Turn one pydantic error entry into (field, message)."""
    names = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field_name = ".".join(names) or "body"
    if error.get("type") == "missing":
        return field_name, f"Please provide {field_name}"
    return field_name, f"{field_name}: {error.get('msg', 'invalid value')}"


def normalize_error(exc: Exception) -> NormalizedError:
    """Classify an exception into the status code and message sent to clients."""
    if isinstance(exc, APIError):
        return NormalizedError(exc.status_code, exc.kind, exc.message, list(exc.fields))

    if isinstance(exc, IntegrityError):
        fields = duplicate_key_fields(exc)
        if fields:
            return NormalizedError(
                status.HTTP_400_BAD_REQUEST,
                ErrorKind.DUPLICATE_KEY,
                f"Duplicate value entered for the {','.join(fields)} field. "
                "Please choose another value",
                fields,
            )

    if isinstance(exc, (RequestValidationError, ValidationError)):
        described = [_describe_validation_error(error) for error in exc.errors()]
        return NormalizedError(
            status.HTTP_400_BAD_REQUEST,
            ErrorKind.VALIDATION_FAILED,
            "Validation failed due to the following reasons: "
            + ", ".join(message for _, message in described),
            [name for name, _ in described],
        )

    if isinstance(exc, CastError):
        return NormalizedError(
            status.HTTP_404_NOT_FOUND,
            ErrorKind.CAST_FAILED,
            f"No job found with an id of {exc.value}",
            [exc.path],
        )

    if isinstance(exc, StarletteHTTPException):
        return NormalizedError(exc.status_code, ErrorKind.HTTP, str(exc.detail))

    return NormalizedError(
        status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorKind.INTERNAL, GENERIC_MESSAGE
    )
