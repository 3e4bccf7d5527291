import logging
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from hackernews.core.config import settings
from hackernews.logging_config import mask_credentials

logger = logging.getLogger(__name__)


def to_async_url(url: str) -> str:
    """Returns a URL usable by the async engine, adding the asyncpg driver if missing."""
    # Attempt to fix if it looks like a standard postgres URL
    if url.startswith("postgresql://"):
        logger.warning(
            f"DATABASE_URL {mask_credentials(url)} is missing the +asyncpg driver, adding it."
        )
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url  # Use as-is (asyncpg or aiosqlite)


# --- SQLite connection setup (local runs and tests) ---
def _enable_sqlite_pragmas(dbapi_connection, connection_record):
    # Let SQLAlchemy emit BEGIN itself; the driver's implicit one breaks SAVEPOINT
    dbapi_connection.isolation_level = None
    # SQLite leaves foreign keys unenforced and LIKE case-insensitive by default
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


def _begin_sqlite_transaction(conn):
    conn.exec_driver_sql("BEGIN")


def configure_engine(engine: AsyncEngine) -> AsyncEngine:
    """Applies per-dialect connection setup to an async engine."""
    if engine.dialect.name == "sqlite":
        # Listeners go on the sync engine; async engines do not dispatch events
        event.listen(engine.sync_engine, "connect", _enable_sqlite_pragmas)
        event.listen(engine.sync_engine, "begin", _begin_sqlite_transaction)
    return engine


# --- Async Engine and Session (for Application) ---
# Ensure async URL has the right prefix
ASYNC_SQLALCHEMY_DATABASE_URL = to_async_url(settings.DATABASE_URL)

async_engine = configure_engine(
    create_async_engine(
        ASYNC_SQLALCHEMY_DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        pool_pre_ping=True,  # Drop connections the server closed while idle
    )
)
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


Base = declarative_base()


# --- Schema bootstrap (no migrations) ---
async def create_tables(engine: AsyncEngine = async_engine) -> None:
    """Creates any missing tables for the registered models."""
    # Import models so they are registered on Base.metadata
    from hackernews import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables checked/created.")


# --- Async Dependency to get DB session (one per GraphQL request) ---
# Resolvers share this session; a rejected insert only rolls back its own savepoint
async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    session: AsyncSession = AsyncSessionLocal()
    try:
        yield session
        await session.commit()  # Commit if the request finished
    except SQLAlchemyError as e:
        logger.error(f"Database error in async session: {e}", exc_info=True)
        await session.rollback()
        raise
    except Exception as e:
        logger.error(f"Unexpected error in async session: {e}", exc_info=True)
        await session.rollback()  # Rollback on any other exception during yield
        raise
    finally:
        await session.close()
