"""Database connection and session management.

This module provides database connection management using SQLAlchemy's
async engine and session handling, plus the two destructive operations test
setup needs: dropping everything in the database and re-creating one table
with its indexes.

Only point this at an isolated test database.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import Connection, MetaData, Table, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def _drop_every_table(sync_conn: Connection) -> None:
    metadata = MetaData()
    metadata.reflect(bind=sync_conn)
    metadata.drop_all(bind=sync_conn)


def _create_table_and_indexes(sync_conn: Connection, table: Table) -> None:
    table.create(sync_conn, checkfirst=True)
    for index in table.indexes:
        index.create(sync_conn, checkfirst=True)


class Database:
    """Database connection and session management.

    Usage:
        db = Database("sqlite+aiosqlite:///test.db")
        async with db.get_session() as session:
            # Automatically commits on success, rolls back on error
            ...
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        """Initialize database with connection parameters.

        Args:
            database_url: Async database URL (postgresql+asyncpg://..., sqlite+aiosqlite://...)
            echo: If True, log all SQL statements
            pool_size: Number of connections to maintain in pool (server databases only)
            max_overflow: Maximum overflow connections above pool_size (server databases only)
        """
        self.database_url = database_url
        engine_options: dict = {"echo": echo}
        if not database_url.startswith("sqlite"):
            engine_options.update(
                pool_pre_ping=True,
                pool_size=pool_size,
                max_overflow=max_overflow,
            )
        if "postgresql" in database_url:
            engine_options["connect_args"] = {
                "server_settings": {"jit": "off"},
                "command_timeout": 60,
                "timeout": 30,
            }

        self.engine: AsyncEngine = create_async_engine(database_url, **engine_options)

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional database session.

        Commits on successful exit, rolls back on exception, always closes.

        Yields:
            AsyncSession: Database session for operations
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def await_connection(self) -> None:
        """Return once a round trip to the database succeeds.

        Unlike ``check_connection`` this raises the driver's error instead of
        returning False.
        """
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if connection is successful, False otherwise
        """
        try:
            await self.await_connection()
            return True
        except Exception:
            return False

    async def drop_database(self) -> None:
        """Drop every table in the database, mapped or not.

        Warning: This deletes all data.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(_drop_every_table)

    async def create_table(self, table: Table) -> None:
        """Create a table and each of its indexes if they are absent."""
        async with self.engine.begin() as conn:
            await conn.run_sync(_create_table_and_indexes, table)

    async def close(self) -> None:
        """Close all database connections."""
        await self.engine.dispose()
