"""
Database session management utilities for the petclinic package.

This module provides the async session factory, session management and
transaction utilities. Every web request runs inside one transaction
obtained from ``SessionManager.get_transaction``.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Awaitable, Callable, Dict, Optional, TypeVar

from sqlalchemy import MetaData, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ..exceptions import EntityNotFoundException, TransactionException
from ..models import Base
from .connection import close_engine

logger = logging.getLogger(__name__)

R = TypeVar("R")


class SessionManager:
    """Manages database sessions and provides transaction utilities."""

    def __init__(
        self, engine: AsyncEngine, session_config: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize session manager with database engine.

        Args:
            engine: SQLAlchemy async engine
            session_config: Optional session configuration overrides
        """
        self.engine = engine

        config = {
            "expire_on_commit": False,
            "autoflush": True,
        }
        if session_config:
            config.update(session_config)

        self.session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            autoflush=config["autoflush"],
            expire_on_commit=config["expire_on_commit"],
        )

    async def create_session(self) -> AsyncSession:
        """
        Create a new database session.

        Returns:
            New async database session
        """
        return self.session_factory()

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for database sessions with automatic cleanup.

        Yields:
            Database session

        Example:
            async with session_manager.get_session() as session:
                result = await session.execute(select(Owner))
        """
        session = await self.create_session()
        try:
            yield session
        except EntityNotFoundException as e:
            await session.rollback()
            logger.debug(f"Rolling back after lookup miss: {e}")
            raise
        except Exception as e:
            await session.rollback()
            logger.error(f"Session error, rolling back: {e}")
            raise
        finally:
            await session.close()

    @asynccontextmanager
    async def get_transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for database transactions with automatic commit/rollback.

        Yields:
            Database session within a transaction

        Example:
            async with session_manager.get_transaction() as session:
                session.add(Owner(first_name="Sam", ...))
                # committed when the block exits without an exception
        """
        async with self.get_session() as session:
            async with session.begin():
                yield session

    async def execute_in_transaction(
        self,
        operation: Callable[..., Awaitable[R]],
        *args: Any,
        **kwargs: Any,
    ) -> R:
        """
        Execute an operation within a transaction.

        Args:
            operation: Async function taking the session as first argument
            *args: Arguments to pass to the operation
            **kwargs: Keyword arguments to pass to the operation

        Returns:
            Result of the operation

        Raises:
            TransactionException: If the database rejects the transaction
        """
        try:
            async with self.get_transaction() as session:
                return await operation(session, *args, **kwargs)
        except SQLAlchemyError as e:
            logger.error(f"Database operation failed: {e}")
            raise TransactionException(
                "Database transaction failed",
                operation=getattr(operation, "__name__", str(operation)),
                original_error=e,
            ) from e

    async def health_check(self) -> Dict[str, Any]:
        """
        Health check for database sessions and connections.

        Returns:
            Dictionary with health check results
        """
        health_status: Dict[str, Any] = {
            "status": "healthy",
            "timestamp": time.time(),
            "checks": {},
        }

        try:
            start_time = time.time()
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
            health_status["checks"]["basic_query"] = {
                "status": "pass",
                "response_time": round((time.time() - start_time) * 1000, 2),
            }
        except SQLAlchemyError as e:
            health_status["status"] = "unhealthy"
            health_status["checks"]["basic_query"] = {
                "status": "fail",
                "error": str(e),
                "error_type": type(e).__name__,
            }
            logger.error(f"Database error during health check: {e}")

        return health_status

    async def create_schema(self, metadata: Optional[MetaData] = None) -> None:
        """
        Create all tables that do not exist yet.

        Args:
            metadata: Metadata holding the table definitions (defaults to the
                      petclinic models)
        """
        metadata = metadata if metadata is not None else Base.metadata
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info(f"Database schema ready ({len(metadata.tables)} tables)")

    async def drop_schema(self, metadata: Optional[MetaData] = None) -> None:
        """
        Drop all tables (use with caution).

        Args:
            metadata: Metadata holding the table definitions (defaults to the
                      petclinic models)
        """
        metadata = metadata if metadata is not None else Base.metadata
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.drop_all)
        logger.warning("All database tables dropped")

    async def close(self) -> None:
        """Dispose of the engine, closing every pooled connection."""
        await close_engine(self.engine)
        logger.info("All database sessions and connections closed")
