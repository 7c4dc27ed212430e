"""
Acme Flavors Backend: Database Lifecycle and Sessions
=====================================================

What:  Async SQLAlchemy engine wrapper, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   A `Database` value owns the engine. The lifespan constructs it at
       startup, stores it on `app.state.database`, and disposes it at
       shutdown. Request handlers reach it through `get_db_session`.

Connection Strategy:
    pool_size=1, max_overflow=0 (defaults from settings):
        A single logical connection is shared by every request. Concurrent
        requests queue at the pool while another statement is in flight.
    SQLite URLs (tests) skip the pool sizing arguments and use the
    dialect's default pool.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from flavors_api.config import Settings


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


class Database:
    """
    Explicitly constructed store client.

    Lifecycle:
        db = Database(settings)   # engine created, no connection opened yet
        await db.ping()           # first connection
        ...                       # handlers borrow sessions via db.session()
        await db.dispose()        # all connections closed
    """

    def __init__(self, settings: Settings):
        self.url = settings.database_url
        engine_kwargs = {
            # Echo SQL in DEBUG mode for development visibility
            "echo": settings.log_level == "DEBUG",
        }
        if make_url(self.url).get_backend_name() != "sqlite":
            engine_kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=True,
            )
        self.engine: AsyncEngine = create_async_engine(self.url, **engine_kwargs)

        # expire_on_commit=False: returned rows stay readable after commit
        self.session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def ping(self) -> None:
        """Round-trips a trivial statement; raises if the store is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Closes every pooled connection."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The repository commits its own statements, so this only guarantees the
    session is closed (and its connection returned to the pool) afterwards.

    Example usage in a route:
        @router.get("/flavors")
        async def list_flavors(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
