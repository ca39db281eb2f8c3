"""Student Records API - CRUD service for student records."""

__version__ = "0.1.0"
