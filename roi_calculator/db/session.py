# roi_calculator/db/session.py
# -----------------------------------------------------------------------------
# Async engine / session for the calculation store
# - one AsyncSession per request through Depends(get_session); crud functions
#   receive it as an argument
# - init_models() creates the financial / strategy / equipment / roi tables
# - DATABASE_URL defaults to a local SQLite file (aiosqlite)
# -----------------------------------------------------------------------------
from collections.abc import AsyncGenerator
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base

from roi_calculator.core.config import settings

engine = create_async_engine(settings.DATABASE_URL, echo=False, future=True)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)
Base = declarative_base()


async def init_models() -> None:
    from roi_calculator.db import models  # noqa: F401  (register tables on Base)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Request scoped session; uncommitted work is rolled back on close."""
    async with AsyncSessionLocal() as session:
        yield session
