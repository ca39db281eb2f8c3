"""Pydantic models for REST API."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper.

    Serialized without the fields that are None, so a body carries
    ``data``, ``message`` or both next to ``success``.
    """

    success: bool = True
    message: str | None = None
    data: T | None = None


class CamelModel(BaseModel):
    """Base model exposing snake_case fields under camelCase JSON keys.

    Input is accepted only under the camelCase keys.
    """

    model_config = ConfigDict(alias_generator=to_camel)


class CamelResponseModel(CamelModel):
    """Outgoing model, also constructible by snake_case field name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Student models


class StudentCreate(CamelModel):
    """Request model for creating a student."""

    name: StrictStr = Field(..., min_length=1)
    student_code: StrictStr = Field(..., min_length=1)
    is_active: StrictBool


class StudentUpdate(CamelModel):
    """Request model for updating a student. The student code is immutable."""

    name: StrictStr = Field(..., min_length=1)
    is_active: StrictBool


class StudentResponse(CamelResponseModel):
    """Response model for a student."""

    id: str
    name: str
    student_code: str
    is_active: bool


def student_to_response(student: Any) -> StudentResponse:
    """Convert a Student model to StudentResponse."""
    return StudentResponse(
        id=student.id,
        name=student.full_name,
        student_code=student.student_code,
        is_active=student.is_active,
    )


# Info models


class OwnerInfo(CamelResponseModel):
    """Response model for the service owner."""

    full_name: str
    student_code: str
