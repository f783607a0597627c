from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from mailroom.utils.settings.database import DatabaseSettings

async_engine = create_async_engine(
    DatabaseSettings().DATABASE_URL_ASYNC, echo=False, pool_pre_ping=True
)
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)
