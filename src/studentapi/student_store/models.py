"""SQLAlchemy models for Student Store."""

from __future__ import annotations

import re
import secrets
import time
from typing import Any

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    validates,
)

from studentapi.student_store.exceptions import InvalidStudentError

STUDENT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def generate_object_id() -> str:
    """Generate a new 24-character hex identifier.

    The first 4 bytes are the big-endian creation timestamp in seconds, the
    remaining 8 bytes are random.
    """
    timestamp = int(time.time()) & 0xFFFFFFFF
    return f"{timestamp:08x}{secrets.token_hex(8)}"


def is_valid_student_id(student_id: str) -> bool:
    """Check whether a string is in the store's identifier format."""
    return STUDENT_ID_PATTERN.fullmatch(student_id) is not None


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Student(Base):
    """Student model - stores a single student record."""

    __tablename__ = "students"

    id: Mapped[str] = mapped_column(String(24), primary_key=True)
    full_name: Mapped[str] = mapped_column(Text, nullable=False)
    student_code: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False)

    def __init__(
        self,
        full_name: str,
        student_code: str,
        is_active: bool,
        id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_object_id()
        self.full_name = full_name
        self.student_code = student_code
        self.is_active = is_active

    @validates("full_name", "student_code")
    def _validate_text(self, key: str, value: Any) -> str:
        if not isinstance(value, str) or not value:
            raise InvalidStudentError(f"Student '{key}' must be a non-empty string")
        return value

    @validates("is_active")
    def _validate_is_active(self, _key: str, value: Any) -> bool:
        if not isinstance(value, bool):
            raise InvalidStudentError("Student 'is_active' must be a boolean")
        return value

    def __repr__(self) -> str:
        return f"<Student(id={self.id!r}, student_code={self.student_code!r})>"
