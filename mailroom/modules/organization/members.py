"""Organization membership lookups."""

from sqlalchemy import select

from mailroom.core.base import BaseService
from mailroom.database.models import (
    Organization,
    OrgMember,
    OrgMemberRole,
    OrgMemberStatus,
)


class MembershipService(BaseService):
    async def get_membership(self, org_id: int, user_id: int) -> OrgMember | None:
        stmt = select(OrgMember).where(
            OrgMember.org_id == org_id,
            OrgMember.user_id == user_id,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def is_active_member(self, org_id: int, user_id: int) -> bool:
        membership = await self.get_membership(org_id, user_id)
        return membership is not None and membership.status == OrgMemberStatus.ACTIVE

    async def is_user_admin_of_org(
        self, org: Organization | None, user_id: int | None
    ) -> bool:
        """Check whether the user holds an active admin membership in the org."""
        if org is None or user_id is None:
            return False

        membership = await self.get_membership(org.id, user_id)
        if membership is None:
            return False
        return (
            membership.role == OrgMemberRole.ADMIN
            and membership.status == OrgMemberStatus.ACTIVE
        )
