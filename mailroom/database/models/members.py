"""Organization membership model and related enums."""

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class OrgMemberRole(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"


class OrgMemberStatus(str, Enum):
    ACTIVE = "active"
    INVITED = "invited"
    REMOVED = "removed"


class OrgMember(Base):
    __tablename__ = "org_members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    org_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    role: Mapped[OrgMemberRole] = mapped_column(
        String, default=OrgMemberRole.MEMBER, nullable=False
    )
    status: Mapped[OrgMemberStatus] = mapped_column(
        String, default=OrgMemberStatus.ACTIVE, nullable=False
    )
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    organization = relationship("Organization", back_populates="members")
    user = relationship("User", back_populates="memberships")

    __table_args__ = (
        # One membership row per user per organization
        UniqueConstraint("org_id", "user_id", name="unique_org_member"),
    )
