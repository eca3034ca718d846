# client_admin/adapters/outbound/persistence/database.py

import time
import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from client_admin.adapters.configuration.config import settings
from client_admin.adapters.outbound.persistence.models import Base
from client_admin.domain.exceptions import DomainException, DatabaseOperationException

# Configure logger
logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """
    SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
    for every new connection.
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    conn.info.setdefault("query_start_time", []).append(time.time())
    if settings.ENVIRONMENT == "development":
        logger.debug(f"Executing SQL: {statement}")


def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    starts = conn.info.get("query_start_time")
    total = time.time() - starts.pop() if starts else 0.0

    if total > 0.5:
        logger.warning(f"Slow query ({total:.2f}s): {statement}")


def create_engine_for(database_url: str) -> AsyncEngine:
    """
    Create an async engine for the given URL and register the query listeners.

    SQLite URLs (used by the test suite) share a single connection; every
    other backend gets a sized connection pool.
    """
    if database_url.startswith("sqlite"):
        async_engine = create_async_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(async_engine.sync_engine, "connect", enable_sqlite_foreign_keys)
    else:
        async_engine = create_async_engine(
            database_url,
            echo=False,
            pool_size=20,
            max_overflow=10,
            pool_timeout=30,
            pool_recycle=1800,
            pool_pre_ping=True,
        )

    sync_engine: Engine = async_engine.sync_engine
    event.listen(sync_engine, "before_cursor_execute", before_cursor_execute)
    event.listen(sync_engine, "after_cursor_execute", after_cursor_execute)
    return async_engine


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=bind,
        expire_on_commit=False,
    )


database_url = str(settings.DATABASE_URL)
logger.info(f"Connecting to database: {database_url.split('@')[-1]}")

try:
    engine = create_engine_for(database_url)
    AsyncSessionLocal = create_session_factory(engine)
    logger.info("Async database connection configured successfully")

except SQLAlchemyError as e:
    logger.error(f"Error connecting to database: {str(e)}")
    raise


@asynccontextmanager
async def atomic(session: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """
    Run a group of writes as one unit: commit when the block finishes,
    roll back when anything inside it raises.

    Domain exceptions are re-raised untouched; persistence errors are
    re-raised as DatabaseOperationException.

    Example:
        ```python
        async with atomic(db):
            db.add(client)
            await db.flush()
            db.add(ClientOwner(client_id=client.id, user_id=user_id))
        ```
    """
    try:
        yield session
        await session.commit()
    except DomainException:
        await session.rollback()
        raise
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"Atomic unit rolled back: {str(e)}")
        raise DatabaseOperationException(original_error=e) from e
    except BaseException:
        await session.rollback()
        raise


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Provides an async context for database operations,
    ensuring the session is closed at the end.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    session = AsyncSessionLocal()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    async with get_db_context() as session:
        yield session


async def create_schema(bind: AsyncEngine = None) -> None:
    """Create every table that doesn't exist yet."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
