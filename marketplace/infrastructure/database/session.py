# marketplace/infrastructure/database/session.py

from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)
from sqlalchemy.orm import declarative_base
from marketplace.config.settings import get_settings

DATABASE_URL = get_settings().database_url


def build_engine(url: str) -> AsyncEngine:
    # sqlite drivers do not accept queue pool sizing
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=False)
    return create_async_engine(
        url,
        echo=False,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
    )


engine = build_engine(DATABASE_URL)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    autoflush=False,
    class_=AsyncSession,
)

Base = declarative_base()


async def get_db() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create all tables. Used at startup when auto_create_schema is on and by scripts/create_tables.py."""
    # Registers the ORM rows on Base.metadata
    from marketplace.infrastructure.database import models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
