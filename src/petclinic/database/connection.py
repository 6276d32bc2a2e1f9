"""
Database connection utilities for the petclinic package.

This module provides async SQLAlchemy engine configuration and connection
management utilities for PostgreSQL (asyncpg) and SQLite (aiosqlite)
databases.
"""

import asyncio
import logging
import time
from typing import Any, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool, NullPool

from ..exceptions import ConnectionException

logger = logging.getLogger(__name__)

ASYNC_DRIVERS = {
    "postgresql": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
}


class DatabaseConfig:
    """Configuration class for database connections."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 20,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        echo: bool = False,
        echo_pool: bool = False,
    ):
        """
        Initialize database configuration.

        Args:
            database_url: PostgreSQL or SQLite connection URL
            pool_size: Number of connections to maintain in the pool
            max_overflow: Maximum number of connections that can overflow the pool
            pool_timeout: Timeout for getting connection from pool
            pool_recycle: Time in seconds to recycle connections
            echo: Whether to echo SQL statements
            echo_pool: Whether to echo pool events
        """
        self.database_url = database_url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.echo = echo
        self.echo_pool = echo_pool

        self._validate_database_url()

    def _validate_database_url(self) -> None:
        """Validate the database URL format."""
        try:
            url = make_url(self.database_url)
        except ArgumentError as e:
            raise ValueError(f"Invalid database URL: {e}")

        backend = url.get_backend_name()
        if backend not in ASYNC_DRIVERS:
            raise ValueError(
                "Invalid database URL: must use postgresql:// or sqlite:// "
                "(optionally with the asyncpg/aiosqlite driver)"
            )
        if backend == "postgresql":
            if not url.host:
                raise ValueError("Invalid database URL: must include hostname")
            if not url.database:
                raise ValueError("Invalid database URL: must include database name")

    @property
    def is_sqlite(self) -> bool:
        """Whether the URL points at a SQLite database."""
        return make_url(self.database_url).get_backend_name() == "sqlite"

    def get_async_url(self) -> str:
        """Convert database URL to async format if needed."""
        url = make_url(self.database_url)
        backend = url.get_backend_name()
        if url.drivername == backend:
            url = url.set(drivername=ASYNC_DRIVERS[backend])
        return url.render_as_string(hide_password=False)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLite ignores foreign keys (and ON DELETE CASCADE) unless asked."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(
    database_url: str,
    pool_size: int = 10,
    max_overflow: int = 20,
    pool_timeout: int = 30,
    pool_recycle: int = 3600,
    pool_pre_ping: bool = True,
    echo: bool = False,
    echo_pool: bool = False,
    use_null_pool: bool = False,
    connect_args: Optional[dict] = None,
) -> AsyncEngine:
    """
    Create an async SQLAlchemy engine with proper configuration.

    SQLite engines always use NullPool and have foreign key enforcement
    switched on for every connection.

    Args:
        database_url: PostgreSQL or SQLite connection URL
        pool_size: Number of connections to maintain in the pool
        max_overflow: Maximum number of connections that can overflow the pool
        pool_timeout: Timeout for getting connection from pool
        pool_recycle: Time in seconds to recycle connections
        pool_pre_ping: Whether to validate connections before use
        echo: Whether to echo SQL statements
        echo_pool: Whether to echo pool events
        use_null_pool: Whether to use NullPool (useful for testing)
        connect_args: Additional connection arguments

    Returns:
        Configured async SQLAlchemy engine

    Raises:
        ValueError: If database URL is invalid
    """
    config = DatabaseConfig(
        database_url=database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
        pool_recycle=pool_recycle,
        echo=echo,
        echo_pool=echo_pool,
    )

    async_url = config.get_async_url()

    engine_kwargs: Dict[str, Any] = {
        "echo": config.echo,
        "echo_pool": config.echo_pool,
    }

    if connect_args:
        engine_kwargs["connect_args"] = connect_args

    if use_null_pool or config.is_sqlite:
        engine_kwargs["poolclass"] = NullPool
    else:
        engine_kwargs.update(
            {
                "poolclass": AsyncAdaptedQueuePool,
                "pool_size": config.pool_size,
                "max_overflow": config.max_overflow,
                "pool_timeout": config.pool_timeout,
                "pool_recycle": config.pool_recycle,
                "pool_pre_ping": pool_pre_ping,
            }
        )

    try:
        engine = create_async_engine(async_url, **engine_kwargs)
    except Exception as e:
        logger.error(f"Failed to create database engine: {e}")
        raise

    if config.is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    logger.info(
        f"Created async database engine for {make_url(async_url).host or make_url(async_url).database}"
    )
    return engine


async def check_connection(
    engine: AsyncEngine, max_retries: int = 3, retry_delay: float = 1.0
) -> bool:
    """
    Check database connection health, retrying with exponential backoff.

    Args:
        engine: SQLAlchemy async engine
        max_retries: Maximum number of retry attempts
        retry_delay: Delay between retries in seconds

    Returns:
        True if connection is healthy, False otherwise
    """
    for attempt in range(max_retries + 1):
        try:
            async with engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connection check successful")
            return True
        except Exception as e:
            if attempt < max_retries:
                logger.warning(
                    f"Database connection check failed (attempt {attempt + 1}/{max_retries + 1}): {e}"
                )
                await asyncio.sleep(retry_delay * (2**attempt))
            else:
                logger.error(
                    f"Database connection check failed after {max_retries + 1} attempts: {e}"
                )
                return False
    return False


async def close_engine(engine: AsyncEngine) -> None:
    """
    Properly close the database engine and all connections.

    Args:
        engine: SQLAlchemy async engine to close
    """
    await engine.dispose()
    logger.info("Database engine closed successfully")


async def wait_for_database(
    engine: AsyncEngine, timeout: float = 30.0, check_interval: float = 1.0
) -> bool:
    """
    Wait for database to become available.

    Args:
        engine: SQLAlchemy async engine
        timeout: Maximum time to wait in seconds
        check_interval: Time between checks in seconds

    Returns:
        True once the database answers

    Raises:
        ConnectionException: If database doesn't become available within timeout
    """
    start_time = time.time()

    while time.time() - start_time < timeout:
        if await check_connection(engine, max_retries=0):
            return True
        await asyncio.sleep(check_interval)

    raise ConnectionException(
        f"Database did not become available within {timeout} seconds",
        database_url=engine.url.render_as_string(hide_password=True),
    )


def get_database_url(
    host: str,
    port: int = 5432,
    database: str = "petclinic",
    username: str = "postgres",
    password: str = "",  # nosec B107
    driver: str = "asyncpg",
    **kwargs: Any,
) -> str:
    """
    Construct a PostgreSQL database URL.

    Args:
        host: Database host
        port: Database port
        database: Database name
        username: Database username
        password: Database password
        driver: Database driver (asyncpg for async)
        **kwargs: Additional URL parameters

    Returns:
        Formatted database URL
    """
    if password:
        auth = f"{username}:{password}"
    else:
        auth = username

    base_url = f"postgresql+{driver}://{auth}@{host}:{port}/{database}"

    if kwargs:
        params = "&".join(f"{k}={v}" for k, v in kwargs.items())
        base_url += f"?{params}"

    return base_url
