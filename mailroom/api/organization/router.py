"""Organization setup router: display profile."""

from typing import Annotated

from fastapi import APIRouter, Query

from mailroom.api.core.dependencies import OrgContextDep, OrgProfileServiceDep
from mailroom.api.core.messages import APIResponse, MessageCode
from mailroom.api.organization.schemas import (
    OrgProfileData,
    OrgProfileModel,
    OrgProfileResponse,
    OrgProfileUpdateData,
    OrgProfileUpdateRequest,
    OrgProfileUpdateResponse,
)
from mailroom.modules.organization.profile import OrgProfilePatch
from mailroom.utils.nanoid import NANO_ID_LENGTH

router = APIRouter(
    prefix="/org/setup/profile",
    tags=["organizations"],
)


@router.get("", response_model=OrgProfileResponse)
async def get_org_profile(
    context: OrgContextDep,
    service: OrgProfileServiceDep,
    org_public_id: Annotated[
        str | None, Query(min_length=3, max_length=NANO_ID_LENGTH)
    ] = None,
) -> OrgProfileResponse:
    """Read an organization's profile, defaulting to the session organization."""
    result = await service.get_org_profile(context, org_public_id=org_public_id)

    org_profile = (
        OrgProfileModel.model_validate(result.org_profile)
        if result.org_profile
        else None
    )
    return APIResponse.success(
        message_code=MessageCode.SUCCESS,
        data=OrgProfileData(org_profile=org_profile),
    )


@router.post("", response_model=OrgProfileUpdateResponse)
async def set_org_profile(
    profile_data: OrgProfileUpdateRequest,
    context: OrgContextDep,
    service: OrgProfileServiceDep,
) -> OrgProfileUpdateResponse:
    """Update the session organization's profile (admins only)."""
    result = await service.set_org_profile(
        context,
        OrgProfilePatch(
            name=profile_data.org_name, avatar_id=profile_data.org_avatar_id
        ),
    )
    return APIResponse.success(
        message_code=MessageCode.ORGANIZATION_UPDATED,
        data=OrgProfileUpdateData(success=result.success),
    )
