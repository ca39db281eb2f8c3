"""StudentStore - Main API for Student Store operations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from studentapi.logging import get_logger, sanitize_for_log
from studentapi.student_store.database import Database
from studentapi.student_store.exceptions import (
    InvalidStudentIdError,
    StateStoreError,
    StudentExistsError,
    StudentNotFoundError,
)
from studentapi.student_store.models import Student, is_valid_student_id

logger = get_logger("student_store")


def _normalize_id(student_id: str) -> str:
    """Validate an identifier and return its canonical (lowercase) form.

    Raises:
        InvalidStudentIdError: If the identifier is not 24 hex characters
    """
    if not is_valid_student_id(student_id):
        raise InvalidStudentIdError(f"Invalid student id '{student_id}'")
    return student_id.lower()


class StudentStore:
    """Main API for Student Store operations.

    Provides CRUD operations for Students. Every call uses its own session.
    """

    def __init__(self, url: str = "sqlite:///students.db") -> None:
        """Initialize Student Store.

        Creates database and tables if they don't exist.

        Args:
            url: SQLAlchemy database URL, or ":memory:"
        """
        self._db = Database(url)
        try:
            self._db.create_tables()
        except SQLAlchemyError as e:
            raise StateStoreError(f"Could not initialize database: {e}") from e
        logger.info("Student store ready (url=%s)", sanitize_for_log(url))

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    def create_student(self, full_name: str, student_code: str, is_active: bool) -> Student:
        """Create a new student.

        Args:
            full_name: Student's display name
            student_code: Unique student code
            is_active: Whether the student is active

        Returns:
            Created Student object with generated ID

        Raises:
            InvalidStudentError: If a field violates a storage constraint
            StudentExistsError: If a student with the same code already exists
            StateStoreError: On any other store failure
        """
        session = self._db.get_session()
        try:
            student = Student(
                full_name=full_name,
                student_code=student_code,
                is_active=is_active,
            )
            session.add(student)
            session.commit()
            session.refresh(student)
            logger.info("Created student %s (code=%s)", student.id, student.student_code)
            return student
        except IntegrityError as e:
            session.rollback()
            if "unique" in str(e.orig).lower() or "duplicate" in str(e.orig).lower():
                raise StudentExistsError(
                    f"Student with studentCode '{student_code}' already exists"
                ) from e
            logger.exception("Failed to create student (code=%s)", student_code)
            raise StateStoreError(str(e.orig)) from e
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("Failed to create student (code=%s)", student_code)
            raise StateStoreError(str(e)) from e
        finally:
            session.close()

    def get_student(self, student_id: str) -> Student:
        """Get student by ID.

        Args:
            student_id: The student's unique ID

        Returns:
            The Student object

        Raises:
            InvalidStudentIdError: If the ID is malformed
            StudentNotFoundError: If student doesn't exist
            StateStoreError: On any other store failure
        """
        key = _normalize_id(student_id)
        session = self._db.get_session()
        try:
            student = session.get(Student, key)
            if student is None:
                raise StudentNotFoundError(f"Student with id '{student_id}' not found")
            return student
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch student %s", student_id)
            raise StateStoreError(str(e)) from e
        finally:
            session.close()

    def list_students(self) -> list[Student]:
        """List all students.

        Returns:
            List of all students in store order

        Raises:
            StateStoreError: On any store failure
        """
        session = self._db.get_session()
        try:
            result = session.execute(select(Student))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.exception("Failed to list students")
            raise StateStoreError(str(e)) from e
        finally:
            session.close()

    def update_student(self, student_id: str, full_name: str, is_active: bool) -> Student:
        """Replace a student's name and active flag.

        The student code is never changed.

        Args:
            student_id: The student's unique ID
            full_name: New display name
            is_active: New active flag

        Returns:
            The updated Student object

        Raises:
            InvalidStudentIdError: If the ID is malformed
            InvalidStudentError: If a field violates a storage constraint
            StudentNotFoundError: If student doesn't exist
            StateStoreError: On any other store failure
        """
        key = _normalize_id(student_id)
        session = self._db.get_session()
        try:
            student = session.get(Student, key)
            if student is None:
                raise StudentNotFoundError(f"Student with id '{student_id}' not found")

            student.full_name = full_name
            student.is_active = is_active

            session.commit()
            session.refresh(student)
            logger.info("Updated student %s", student.id)
            return student
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("Failed to update student %s", student_id)
            raise StateStoreError(str(e)) from e
        finally:
            session.close()

    def delete_student(self, student_id: str) -> None:
        """Permanently delete a student.

        Args:
            student_id: The student's unique ID

        Raises:
            InvalidStudentIdError: If the ID is malformed
            StudentNotFoundError: If student doesn't exist
            StateStoreError: On any other store failure
        """
        key = _normalize_id(student_id)
        session = self._db.get_session()
        try:
            student = session.get(Student, key)
            if student is None:
                raise StudentNotFoundError(f"Student with id '{student_id}' not found")

            session.delete(student)
            session.commit()
            logger.info("Deleted student %s", key)
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("Failed to delete student %s", student_id)
            raise StateStoreError(str(e)) from e
        finally:
            session.close()
