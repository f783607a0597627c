"""Global test configuration and fixtures for the Mailroom API."""

import os
from collections.abc import AsyncGenerator
from typing import Callable

os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-for-testing-only")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from jose import jwt

from mailroom.api.core.constants import JWT_ALGORITHM
from mailroom.database.models import (
    Base,
    Organization,
    OrgMemberRole,
    User,
)
from mailroom.utils.settings.auth import AuthSettings

from tests.factories import OrganizationFactory, OrgMemberFactory, UserFactory

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")
TEST_BASE_URL = "http://test-mailroom-api"


@pytest.fixture
def user_factory():
    return UserFactory


@pytest.fixture
def organization_factory():
    return OrganizationFactory


@pytest.fixture
def member_factory():
    return OrgMemberFactory


@pytest_asyncio.fixture
async def async_engine():
    """Create an engine with a fresh schema for each test."""
    engine_kwargs: dict = {"echo": False}
    if TEST_DATABASE_URL.startswith("sqlite"):
        # Single shared connection keeps the in-memory database alive
        engine_kwargs.update(
            connect_args={"check_same_thread": False}, poolclass=StaticPool
        )
    engine = create_async_engine(TEST_DATABASE_URL, **engine_kwargs)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session wrapped in a rolled-back transaction."""
    connection = await async_engine.connect()
    transaction = await connection.begin()

    async_session_factory = async_sessionmaker(bind=connection, expire_on_commit=False)

    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
            await transaction.rollback()
            await connection.close()


@pytest_asyncio.fixture
async def app(db_session: AsyncSession) -> AsyncGenerator[FastAPI, None]:
    """FastAPI application bound to the test session."""
    from mailroom.api.core.dependencies import get_db_session
    from mailroom.main import app

    async def override_get_db_session():
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    async with LifespanManager(app):
        yield app
    app.dependency_overrides.clear()


# Test Data Fixtures
@pytest_asyncio.fixture
async def test_organization(
    db_session: AsyncSession, organization_factory
) -> Organization:
    return await organization_factory.create_async(
        db_session, name="Test Organization", avatar_id="av_original"
    )


@pytest_asyncio.fixture
async def test_admin_user(
    db_session: AsyncSession,
    user_factory,
    member_factory,
    test_organization: Organization,
) -> User:
    """Create a user holding an active admin membership."""
    user = await user_factory.create_async(db_session, username="admin-user")
    await member_factory.create_async(
        db_session,
        org_id=test_organization.id,
        user_id=user.id,
        role=OrgMemberRole.ADMIN,
    )
    return user


@pytest_asyncio.fixture
async def test_member_user(
    db_session: AsyncSession,
    user_factory,
    member_factory,
    test_organization: Organization,
) -> User:
    """Create a user holding an active non-admin membership."""
    user = await user_factory.create_async(db_session, username="member-user")
    await member_factory.create_async(
        db_session,
        org_id=test_organization.id,
        user_id=user.id,
        role=OrgMemberRole.MEMBER,
    )
    return user


# JWT Token Fixtures
@pytest.fixture
def jwt_token_factory() -> Callable[..., str]:
    """Factory for creating session tokens for test users."""
    auth_settings = AuthSettings()

    def create_token(
        user: User, org: Organization | None = None, secret: str | None = None
    ) -> str:
        payload = {"sub": user.public_id, "aud": auth_settings.JWT_AUDIENCE}
        if org is not None:
            payload["org"] = org.public_id
        return jwt.encode(
            payload, secret or auth_settings.JWT_SECRET, algorithm=JWT_ALGORITHM
        )

    return create_token


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client without credentials."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url=TEST_BASE_URL
    ) as ac:
        yield ac


@pytest.fixture
def client_factory(app: FastAPI, jwt_token_factory):
    """Factory for creating HTTP clients for a given session context."""

    def create_client(
        user: User, org: Organization | None = None
    ) -> AsyncClient:
        token = jwt_token_factory(user, org)
        return AsyncClient(
            transport=ASGITransport(app=app),
            base_url=TEST_BASE_URL,
            headers={"Authorization": f"Bearer {token}"},
        )

    return create_client


@pytest_asyncio.fixture
async def admin_client(
    client_factory, test_admin_user: User, test_organization: Organization
) -> AsyncGenerator[AsyncClient, None]:
    async with client_factory(test_admin_user, test_organization) as ac:
        yield ac


@pytest_asyncio.fixture
async def member_client(
    client_factory, test_member_user: User, test_organization: Organization
) -> AsyncGenerator[AsyncClient, None]:
    async with client_factory(test_member_user, test_organization) as ac:
        yield ac
