"""Custom exceptions for Student Store."""


class StateStoreError(Exception):
    """Base exception for Student Store errors."""


class StudentNotFoundError(StateStoreError):
    """Student with given ID does not exist."""


class StudentExistsError(StateStoreError):
    """Student with given student code already exists."""


class InvalidStudentIdError(StateStoreError):
    """Identifier is not in the store's ID format."""


class InvalidStudentError(StateStoreError):
    """Student field violates a storage constraint."""
