"""Organization display profile: read and admin-only update."""

from dataclasses import dataclass
from typing import Protocol

from fastapi import status
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from mailroom.api.core.exceptions.base import MailroomException
from mailroom.api.core.messages import MessageCode
from mailroom.core.base import BaseService
from mailroom.core.context import OrgContext
from mailroom.database.models import Organization
from mailroom.modules.organization.members import MembershipService


class OrgAdminCheck(Protocol):
    async def __call__(
        self, org: Organization | None, user_id: int | None
    ) -> bool: ...


@dataclass(frozen=True)
class OrgProfile:
    public_id: str
    name: str
    avatar_id: str | None = None


@dataclass(frozen=True)
class OrgProfileResult:
    org_profile: OrgProfile | None = None


@dataclass(frozen=True)
class OrgProfileUpdateResult:
    success: bool = True


@dataclass(frozen=True)
class OrgProfilePatch:
    """Update to an organization's profile.

    ``name`` is always written. ``avatar_id`` is written only when given;
    leaving it out keeps the stored avatar.
    """

    name: str
    avatar_id: str | None = None

    def to_values(self) -> dict:
        values: dict = {"name": self.name}
        if self.avatar_id:
            values["avatar_id"] = self.avatar_id
        return values


class OrgProfileService(BaseService):
    def __init__(self, db: AsyncSession, is_org_admin: OrgAdminCheck | None = None):
        super().__init__(db)
        self.is_org_admin = is_org_admin or MembershipService(db).is_user_admin_of_org

    async def get_org_profile(
        self, context: OrgContext, org_public_id: str | None = None
    ) -> OrgProfileResult:
        """Fetch the public profile of an organization.

        Looks up ``org_public_id`` when given, otherwise the organization
        bound to the session. A missing organization yields an empty result.
        """
        stmt = select(Organization.public_id, Organization.name, Organization.avatar_id)
        if org_public_id:
            stmt = stmt.where(Organization.public_id == org_public_id)
        elif context.org_id is not None:
            stmt = stmt.where(Organization.id == context.org_id)
        else:
            return OrgProfileResult()

        result = await self.db.execute(stmt.limit(1))
        row = result.first()
        if row is None:
            return OrgProfileResult()

        return OrgProfileResult(
            org_profile=OrgProfile(
                public_id=row.public_id, name=row.name, avatar_id=row.avatar_id
            )
        )

    async def set_org_profile(
        self, context: OrgContext, patch: OrgProfilePatch
    ) -> OrgProfileUpdateResult:
        """Update the session organization's name and, optionally, its avatar."""
        # No bound organization means nothing to update, whatever the admin check says
        is_admin = context.org_id is not None and await self.is_org_admin(
            context.org, context.user_id
        )
        if not is_admin:
            self.logger.info(
                "Rejected organization profile update",
                user_id=context.user_id,
                org_id=context.org_id,
            )
            raise MailroomException(
                MessageCode.UNAUTHORIZED,
                status.HTTP_401_UNAUTHORIZED,
                {"description": "You are not an admin"},
            )

        await self.db.execute(
            update(Organization)
            .where(Organization.id == context.org_id)
            .values(**patch.to_values())
        )
        await self.db.commit()

        self.logger.info(
            "Updated organization profile",
            org_id=context.org_id,
            avatar_changed="avatar_id" in patch.to_values(),
        )
        return OrgProfileUpdateResult(success=True)
