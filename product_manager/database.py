"""Database engine, session factory and the request-scoped session dependency."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from product_manager.config import settings

# Sync driver prefixes and the async drivers that replace them
ASYNC_DRIVERS = {
    "postgresql://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def get_async_database_url(url: str) -> str:
    """Convert a plain connection string to its async-driver form.

    postgresql://... becomes postgresql+asyncpg://... and sqlite://...
    becomes sqlite+aiosqlite://...; URLs that already name a driver are
    returned unchanged.
    """
    for prefix, async_prefix in ASYNC_DRIVERS.items():
        if url.startswith(prefix):
            return url.replace(prefix, async_prefix, 1)
    return url


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given connection string."""
    return create_async_engine(
        get_async_database_url(url),
        echo=echo,
        pool_pre_ping=True,
    )


async_engine = build_engine(settings.database_url, echo=settings.debug)

async_session_factory = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that provides a database session for one request.

    Commits when the request completes and rolls back if it raised.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
