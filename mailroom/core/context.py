"""Per-request session context passed explicitly into services."""

from dataclasses import dataclass

from mailroom.database.models.organizations import Organization
from mailroom.database.models.users import User


@dataclass(frozen=True)
class OrgContext:
    """Authenticated user and the organization the session is bound to.

    Either side may be absent. An absent user or organization is a distinct
    "no context" state; callers must not fall back to a placeholder id.
    """

    user: User | None = None
    org: Organization | None = None

    @property
    def user_id(self) -> int | None:
        return self.user.id if self.user is not None else None

    @property
    def org_id(self) -> int | None:
        return self.org.id if self.org is not None else None
