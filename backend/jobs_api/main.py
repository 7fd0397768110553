import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobs_api.errors import APIError, CastError, normalize_error
from jobs_api.routers import health, auth, jobs

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Jobs API",
    description="Track job applications per user",
    version="1.0.0",
)

# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(auth.router, prefix="/api/v1/auth", tags=["auth"])
app.include_router(jobs.router, prefix="/api/v1/jobs", tags=["jobs"])


# Error handlers
def _error_response(request: Request, exc: Exception) -> JSONResponse:
    """Normalize any error into a {"msg": ...} JSON response."""
    error = normalize_error(exc)

    if error.status_code >= 500:
        logger.exception(
            "Unhandled exception: %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
    else:
        logger.warning(
            "%s %s -> %d %s: %s",
            request.method,
            request.url.path,
            error.status_code,
            error.kind.value,
            error.message,
        )

    return JSONResponse(status_code=error.status_code, content={"msg": error.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Framework HTTP errors keep their status; unmatched routes get a fixed message."""
    if exc.status_code == 404 and exc.detail == "Not Found":
        exc = StarletteHTTPException(status_code=404, detail="Route does not exist")
    return _error_response(request, exc)


@app.exception_handler(APIError)
@app.exception_handler(CastError)
@app.exception_handler(IntegrityError)
@app.exception_handler(RequestValidationError)
@app.exception_handler(ValidationError)
async def api_error_handler(request: Request, exc: Exception):
    return _error_response(request, exc)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with a generic 500 JSON body."""
    return _error_response(request, exc)
