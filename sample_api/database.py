"""
Sample API: Connection Source
===============================

What:  The `Database` handle (async engine + session factory) and the FastAPI
       dependency that hands one pooled session to each request.
How:   The app factory creates one Database and stores it on `app.state`.
       `get_db_session` pulls it from there, so tests can swap in a different
       Database (SQLite via aiosqlite) without touching any global.
When:  Engine is created with the app; sessions are created per request and
       always closed, which returns the connection to the pool.

Connection Pooling:
    pool_size:     fixed connection limit (default 10)
    max_overflow:  0 by default, keeping the pool bounded
    pool_timeout:  seconds to wait for a free connection; expiry raises
                   sqlalchemy.exc.TimeoutError, surfaced as HTTP 500
    pool_recycle:  connections idle past this age are replaced on checkout
    pool_pre_ping: validates a connection before handing it out
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import QueuePool

from sample_api.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for the agents, customer and orders ORM models."""
    pass


class Database:
    """
    Process-wide handle on the connection pool.

    Owns the async engine and the session factory. Created once at startup,
    disposed once at shutdown.
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_timeout: int = 30,
        pool_recycle: int = 30,
        pool_pre_ping: bool = True,
        connect_timeout: Optional[int] = None,
        echo: bool = False,
    ):
        self.url = url
        connect_args: Dict[str, Any] = {}
        # aiomysql takes connect_timeout; SQLite drivers do not
        if connect_timeout is not None and make_url(url).get_backend_name() == "mysql":
            connect_args["connect_timeout"] = connect_timeout

        self.engine: AsyncEngine = create_async_engine(
            url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_recycle=pool_recycle,
            pool_pre_ping=pool_pre_ping,
            connect_args=connect_args,
            echo=echo,
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a Database from the application settings."""
        return cls(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=settings.db_pool_recycle,
            pool_pre_ping=settings.db_pool_pre_ping,
            connect_timeout=settings.db_connect_timeout,
            echo=settings.log_level == "DEBUG",
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yield one session for the duration of a request.

        Rolls back on any exception and closes on every exit path, so a
        failing request never keeps its connection checked out.
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    def pool_status(self) -> Dict[str, Optional[int]]:
        """Current pool capacity and the number of connections in use."""
        pool = self.engine.pool
        if isinstance(pool, QueuePool):
            return {"size": pool.size(), "checked_out": pool.checkedout()}
        return {"size": None, "checked_out": None}

    async def create_all(self) -> None:
        """Create the three tables if missing (tests and local development)."""
        from sample_api import models  # noqa: F401  registers tables on Base.metadata

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("Database engine disposed")


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency providing a pooled session per request.

    Example:
        @router.get("/agents")
        async def list_agents(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
