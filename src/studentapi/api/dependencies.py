"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Protocol

from fastapi import Depends, Request

from studentapi.config import Settings, get_settings

if TYPE_CHECKING:
    from studentapi.student_store import Student


class StudentRepository(Protocol):
    """Interface for the student persistence component."""

    def create_student(self, full_name: str, student_code: str, is_active: bool) -> Student:
        """Create and return a new student."""
        ...

    def list_students(self) -> list[Student]:
        """Return all students."""
        ...

    def get_student(self, student_id: str) -> Student:
        """Return the student with the given ID."""
        ...

    def update_student(self, student_id: str, full_name: str, is_active: bool) -> Student:
        """Update name and active flag, return the updated student."""
        ...

    def delete_student(self, student_id: str) -> None:
        """Permanently delete a student."""
        ...

    def close(self) -> None:
        """Release store resources."""
        ...


def get_student_store(request: Request) -> StudentRepository:
    """Dependency that provides the store attached to the application."""
    store: StudentRepository | None = getattr(request.app.state, "student_store", None)
    if store is None:
        raise RuntimeError("Student store not initialized. Start the application lifespan first.")
    return store


# Type alias for dependency injection
StudentStoreDep = Annotated[StudentRepository, Depends(get_student_store)]


def get_app_settings(request: Request) -> Settings:
    """Dependency that provides the settings the application was built with."""
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()


# Type alias for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
