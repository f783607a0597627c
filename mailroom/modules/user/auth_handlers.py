"""Session token handling: builds the per-request organization context."""

from fastapi import status
from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mailroom.api.core.constants import JWT_ALGORITHM
from mailroom.api.core.exceptions.base import MailroomException
from mailroom.api.core.messages import MessageCode
from mailroom.core.context import OrgContext
from mailroom.database.models import Organization, User
from mailroom.modules.organization.members import MembershipService
from mailroom.utils.settings.auth import AuthSettings
from mailroom.utils.logger import get_logger

logger = get_logger(__name__)


def decode_session_token(token: str) -> dict:
    auth_settings = AuthSettings()
    if not auth_settings.JWT_SECRET:
        # An empty HS256 key would accept tokens anyone can sign
        logger.error("JWT secret is not configured")
        raise MailroomException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Session tokens cannot be verified"},
        )
    try:
        return jwt.decode(
            token,
            auth_settings.JWT_SECRET,
            algorithms=[JWT_ALGORITHM],
            audience=auth_settings.JWT_AUDIENCE,
        )
    except JWTError as e:
        logger.warning("JWT decoding failed", error=str(e))
        raise MailroomException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Invalid or expired authentication token"},
        )


async def resolve_org_context(db: AsyncSession, token: str) -> OrgContext:
    """Resolve the session user and, when claimed, the bound organization.

    The ``org`` claim binds an organization only if it exists and the user is
    an active member of it. Otherwise the context carries no organization.
    """
    payload = decode_session_token(token)

    user_public_id = payload.get("sub")
    if not user_public_id:
        raise MailroomException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Token subject missing"},
        )

    result = await db.execute(select(User).where(User.public_id == user_public_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise MailroomException(
            MessageCode.AUTH_REQUIRED,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Unknown user"},
        )

    org_public_id = payload.get("org")
    if not org_public_id:
        return OrgContext(user=user)

    result = await db.execute(
        select(Organization).where(Organization.public_id == org_public_id)
    )
    org = result.scalar_one_or_none()
    if org is None:
        logger.debug("Claimed organization not found", org_public_id=org_public_id)
        return OrgContext(user=user)

    if not await MembershipService(db).is_active_member(org.id, user.id):
        logger.info(
            "User is not an active member of claimed organization",
            user_id=user.id,
            org_id=org.id,
        )
        return OrgContext(user=user)

    return OrgContext(user=user, org=org)
