"""Test factories for Mailroom API models."""

from .base import AsyncSQLAlchemyModelFactory
from .members import OrgMemberFactory
from .organizations import OrganizationFactory
from .users import UserFactory

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "OrgMemberFactory",
    "OrganizationFactory",
    "UserFactory",
]
