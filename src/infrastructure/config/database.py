"""
Database configuration.
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from src.infrastructure.config.settings import get_settings
from src.infrastructure.persistence.models import Base

settings = get_settings()

_engine_options = {"echo": settings.debug}
if settings.get_async_database_url().startswith("postgresql"):
    _engine_options.update(
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )

engine = create_async_engine(settings.get_async_database_url(), **_engine_options)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_db_session() -> AsyncSession:
    """Dependency для получения DB session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_models() -> None:
    """Создать таблицы (без миграций)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
