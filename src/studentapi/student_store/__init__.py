"""Student Store - Persistent storage for student records."""

from studentapi.student_store.exceptions import (
    InvalidStudentError,
    InvalidStudentIdError,
    StateStoreError,
    StudentExistsError,
    StudentNotFoundError,
)
from studentapi.student_store.models import (
    Student,
    generate_object_id,
    is_valid_student_id,
)
from studentapi.student_store.store import StudentStore

__all__ = [
    "InvalidStudentError",
    "InvalidStudentIdError",
    "StateStoreError",
    "Student",
    "StudentExistsError",
    "StudentNotFoundError",
    "StudentStore",
    "generate_object_id",
    "is_valid_student_id",
]
