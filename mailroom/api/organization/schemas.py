"""Organization profile API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from mailroom.api.core.messages import APIResponse
from mailroom.database.models.organizations import (
    ORG_NAME_MAX_LENGTH,
    ORG_NAME_MIN_LENGTH,
)


class OrgProfileModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    public_id: str
    name: str
    avatar_id: str | None = None


class OrgProfileData(BaseModel):
    org_profile: OrgProfileModel | None = None


class OrgProfileUpdateRequest(BaseModel):
    org_name: str = Field(
        ..., min_length=ORG_NAME_MIN_LENGTH, max_length=ORG_NAME_MAX_LENGTH
    )
    org_avatar_id: str | None = None


class OrgProfileUpdateData(BaseModel):
    success: bool


OrgProfileResponse = APIResponse[OrgProfileData]
OrgProfileUpdateResponse = APIResponse[OrgProfileUpdateData]
