"""
Jezik API application: exception mapping, CORS, storage startup and routes.
"""
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
import logging
import traceback
from jezik.core.config import settings
from jezik.core.exceptions import (
    JezikException,
    ValidationError,
    NotFoundError,
    ConflictError,
    UpstreamError
)
from jezik.services.catalog_service import seed_catalog
from jezik.services.storage import create_storage

from jezik.api.v1 import api_router

logger = logging.getLogger(__name__)

# Application exception -> HTTP status; subclasses resolve through their MRO
EXCEPTION_STATUS_CODES = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    UpstreamError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

app = FastAPI(title="Jezik API", version="1.0.0")


def status_code_for(exc: JezikException) -> int:
    for exc_type in type(exc).__mro__:
        if exc_type in EXCEPTION_STATUS_CODES:
            return EXCEPTION_STATUS_CODES[exc_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, detail, error_type: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "type": error_type, **extra},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject malformed requests with 400, logging the body that failed."""
    raw_body = await request.body()
    body = raw_body.decode('utf-8') if raw_body else None
    logger.error(
        f"Invalid request to {request.method} {request.url.path}: {exc.errors()} "
        f"(body: {body or 'empty'})"
    )
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        jsonable_encoder(exc.errors()),
        "RequestValidationError",
        body=body,
    )


@app.exception_handler(JezikException)
async def jezik_exception_handler(request: Request, exc: JezikException):
    """Map application exceptions to their HTTP status."""
    status_code = status_code_for(exc)
    logger.warning(
        f"{type(exc).__name__} on {request.method} {request.url.path} "
        f"-> {status_code}: {str(exc)}"
    )
    return error_response(status_code, str(exc), type(exc).__name__)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Answer unhandled errors with a 500; details only in development."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)

    if settings.is_development:
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc),
            type(exc).__name__,
            traceback=traceback.format_exc(),
        )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal server error occurred. Please try again later.",
        "InternalServerError",
    )


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Create the process-wide storage and load the base catalog."""
    storage = create_storage(settings)
    if settings.seed_catalog:
        seed_catalog(storage)
    app.state.storage = storage


@app.get("/")
async def root():
    return {
        "message": "Jezik API",
        "status": "running",
        "storage_backend": settings.storage_backend,
        "gemini_configured": bool(settings.google_gemini_api_key),
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        }
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}


# Include API router
app.include_router(api_router, prefix=settings.api_prefix)
