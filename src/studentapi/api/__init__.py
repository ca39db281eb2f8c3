"""REST API for the Student Records service."""

from studentapi.api.app import create_app
from studentapi.api.models import (
    APIResponse,
    OwnerInfo,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
)

__all__ = [
    "APIResponse",
    "OwnerInfo",
    "StudentCreate",
    "StudentResponse",
    "StudentUpdate",
    "create_app",
]
