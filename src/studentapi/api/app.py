"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from studentapi import __version__
from studentapi.api.exceptions import BadRequestError
from studentapi.api.models import APIResponse
from studentapi.api.routes import info, students
from studentapi.config import Settings, get_settings
from studentapi.logging import get_logger
from studentapi.student_store import (
    StateStoreError,
    StudentExistsError,
    StudentNotFoundError,
    StudentStore,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Sequence

    from studentapi.api.dependencies import StudentRepository

logger = get_logger("api")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](success=False, message=message).model_dump(exclude_none=True),
    )


def format_validation_errors(errors: Sequence[Any]) -> str:
    """Render pydantic validation errors as one client-facing message."""
    parts = []
    for error in errors:
        # Drop the leading "body"/"path" segment
        loc = [str(part) for part in error.get("loc", ())[1:]]
        field = ".".join(loc) if loc else "body"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "Validation failed: " + "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Map request and store errors to JSON error responses."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, format_validation_errors(exc.errors()))

    @app.exception_handler(BadRequestError)
    async def bad_request_handler(_request: Request, exc: BadRequestError) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        response = _error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(StudentNotFoundError)
    async def student_not_found_handler(
        _request: Request, _exc: StudentNotFoundError
    ) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, "Student not found")

    @app.exception_handler(StudentExistsError)
    async def student_exists_handler(_request: Request, exc: StudentExistsError) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(StateStoreError)
    async def state_store_error_handler(request: Request, exc: StateStoreError) -> JSONResponse:
        logger.error(
            "Store failure on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Opens the store unless one was injected into create_app, and closes only
    the store it opened.
    """
    owns_store = getattr(app.state, "student_store", None) is None
    if owns_store:
        app.state.student_store = StudentStore(app.state.settings.database_url)
    logger.info("Student Records API started")

    yield

    if owns_store:
        app.state.student_store.close()
        app.state.student_store = None
    logger.info("Student Records API stopped")


def create_app(
    settings: Settings | None = None,
    store: StudentRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. Defaults to the environment.
        store: Pre-built store to serve from. Defaults to a StudentStore
               opened on settings.database_url during the lifespan.
    """
    app = FastAPI(
        title="Student Records API",
        description="REST API for managing student records",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings if settings is not None else get_settings()
    if store is not None:
        app.state.student_store = store

    register_exception_handlers(app)

    app.include_router(info.router)
    app.include_router(students.router)

    return app


# Default app instance
app = create_app()
