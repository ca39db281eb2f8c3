"""Student CRUD endpoints."""

from fastapi import APIRouter, status

from studentapi.api.dependencies import StudentStoreDep
from studentapi.api.exceptions import BadRequestError
from studentapi.api.models import (
    APIResponse,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
    student_to_response,
)
from studentapi.student_store import StateStoreError, is_valid_student_id

router = APIRouter(prefix="/students", tags=["students"])


@router.post(
    "",
    response_model=APIResponse[StudentResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_student(student: StudentCreate, store: StudentStoreDep) -> APIResponse[StudentResponse]:
    """Create a new student."""
    try:
        created = store.create_student(
            full_name=student.name,
            student_code=student.student_code,
            is_active=student.is_active,
        )
    except StateStoreError as e:
        # Store failures on create are reported to the client as-is
        raise BadRequestError(str(e)) from e
    return APIResponse(message="Student created successfully", data=student_to_response(created))


@router.get("", response_model=APIResponse[list[StudentResponse]], response_model_exclude_none=True)
def list_students(store: StudentStoreDep) -> APIResponse[list[StudentResponse]]:
    """List all students."""
    students = store.list_students()
    return APIResponse(data=[student_to_response(s) for s in students])


@router.get(
    "/{student_id}",
    response_model=APIResponse[StudentResponse],
    response_model_exclude_none=True,
)
def get_student(student_id: str, store: StudentStoreDep) -> APIResponse[StudentResponse]:
    """Get a student by ID."""
    student = store.get_student(student_id)
    return APIResponse(data=student_to_response(student))


@router.put(
    "/{student_id}",
    response_model=APIResponse[StudentResponse],
    response_model_exclude_none=True,
)
def update_student(
    student_id: str, student: StudentUpdate, store: StudentStoreDep
) -> APIResponse[StudentResponse]:
    """Update a student's name and active flag."""
    updated = store.update_student(
        student_id,
        full_name=student.name,
        is_active=student.is_active,
    )
    return APIResponse(message="Student updated successfully", data=student_to_response(updated))


@router.delete(
    "/{student_id}",
    response_model=APIResponse[None],
    response_model_exclude_none=True,
)
def delete_student(student_id: str, store: StudentStoreDep) -> APIResponse[None]:
    """Permanently delete a student."""
    if not is_valid_student_id(student_id):
        raise BadRequestError("Invalid student ID format")
    store.delete_student(student_id)
    return APIResponse(message="Student deleted successfully")
