"""
CRM Core Database Configuration
SQLAlchemy setup for PostgreSQL (asyncpg) and SQLite (aiosqlite)
"""

import unicodedata
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from typing import AsyncGenerator, Optional
import structlog

from .config import settings

logger = structlog.get_logger()


class Base(DeclarativeBase):
    """Base class for all database models"""
    pass


def unaccent(value: Optional[str]) -> Optional[str]:
    """Lower-case and strip accents, e.g. 'Crème' -> 'creme'"""
    if value is None:
        return None
    decomposed = unicodedata.normalize("NFKD", str(value))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).lower()


def configure_sqlite(async_engine: AsyncEngine) -> None:
    """Enforce foreign keys and register unaccent() on every SQLite connection"""
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def on_connect(dbapi_connection, connection_record):
        dbapi_connection.create_function("unaccent", 1, unaccent)
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
    pool_recycle=300,
)
configure_sqlite(engine)

# Create session maker
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception as e:
            logger.error("Database session error", error=str(e))
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(bind=None):
    """Initialize database tables"""
    # Import all models to register them
    from .. import models

    async with (bind or engine).begin() as conn:
        if conn.dialect.name == "postgresql" and settings.search_unaccent:
            await conn.execute(text("CREATE EXTENSION IF NOT EXISTS unaccent"))
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created/verified", tables=len(models.ENTITY_CLASSES))


async def close_db():
    """Close database connections"""
    await engine.dispose()
    logger.info("Database connections closed")
