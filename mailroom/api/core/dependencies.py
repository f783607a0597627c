from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from mailroom.api.core.exceptions.base import MailroomException
from mailroom.api.core.messages import MessageCode
from mailroom.core.context import OrgContext
from mailroom.modules.organization.profile import OrgProfileService
from mailroom.modules.user.auth_handlers import resolve_org_context


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


async def get_org_profile_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> OrgProfileService:
    """Get organization profile service with database session."""
    return OrgProfileService(db)


async def get_org_context(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> OrgContext:
    """Dependency to build the session context from the bearer token."""
    authorization = request.headers.get("Authorization", "")
    if not authorization:
        raise MailroomException(
            MessageCode.AUTH_REQUIRED,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Authorization header required"},
        )

    auth_parts = authorization.split(" ")
    if len(auth_parts) != 2 or auth_parts[0].lower() != "bearer":
        raise MailroomException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Authorization header must be 'Bearer <token>'"},
        )

    return await resolve_org_context(db, auth_parts[1])


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
OrgProfileServiceDep = Annotated[
    OrgProfileService, Depends(get_org_profile_service)
]
OrgContextDep = Annotated[OrgContext, Depends(get_org_context)]
