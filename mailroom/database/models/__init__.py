"""Database models for the Mailroom API."""

from .base import Base
from .members import OrgMember, OrgMemberRole, OrgMemberStatus
from .organizations import Organization
from .users import User

__all__ = [
    # Base
    "Base",
    # Enums
    "OrgMemberRole",
    "OrgMemberStatus",
    # Models
    "Organization",
    "User",
    "OrgMember",
]
