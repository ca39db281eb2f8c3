"""Static service information endpoint."""

from fastapi import APIRouter

from studentapi.api.dependencies import SettingsDep
from studentapi.api.models import APIResponse, OwnerInfo

router = APIRouter(tags=["info"])


@router.get("/info", response_model=APIResponse[OwnerInfo], response_model_exclude_none=True)
def get_info(settings: SettingsDep) -> APIResponse[OwnerInfo]:
    """Return the owner of this service."""
    return APIResponse(
        data=OwnerInfo(
            full_name=settings.owner_full_name,
            student_code=settings.owner_student_code,
        )
    )
